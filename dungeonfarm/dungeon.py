"""Dungeon trips: random monsters, fights and loot."""

from __future__ import annotations

import random

from .console import Console
from .entities import Combatant, Goblin, Hero, Minotaur, Slime, Wolf
from .inventory import Inventory, ItemCode, inventory_screen
from .state import BOSS_FLOOR_COUNT, GameState

_MONSTER_TYPES = (Goblin, Slime, Wolf)
_INVENTORY_CHOICE = 5
LEAVE_CHOICE = 6


class Dungeon:
    """One trip into the dungeon, fought floor by floor."""

    def __init__(
        self,
        state: GameState,
        console: Console,
        rng: random.Random | None = None,
    ) -> None:
        self._state = state
        self._console = console
        self._rng = rng if rng is not None else random.Random()

    def random_item(self) -> ItemCode:
        """The loot dropped by a defeated monster."""
        return ItemCode(self._rng.randrange(2) + 1)

    def spawn_monster(self) -> Combatant:
        """The boss once enough monsters have fallen, otherwise a random monster."""
        if self._state.boss_count == BOSS_FLOOR_COUNT:
            return Minotaur()
        return _MONSTER_TYPES[self._rng.randrange(len(_MONSTER_TYPES))]()

    def _fight_screen(self, hero: Combatant, monster: Combatant) -> str:
        return (
            f"{{ 현재 층 : {self._state.score}층 }}\n\n"
            f"{{ {hero.name} }}         {{ {monster.name} }}\n"
            f"체력   : {hero.health}       체력   : {monster.health}\n"
            f"공격력 : {hero.attack}        공격력 : {monster.attack}\n\n"
        )

    def fight(self, hero: Hero, monster: Combatant, inventory: Inventory) -> int:
        """Fight until someone falls or the hero leaves; return the last choice."""
        choice = 0
        while True:
            if hero.is_dead():
                self._state.reset_after_death()
                return choice

            self._console.clear()
            self._console.show(self._fight_screen(hero, monster))
            self._console.show(hero.skill_menu())
            choice = self._console.read_choice()
            monster.take_damage(hero.skill_damage(choice))

            if monster.is_dead():
                self._state.defeat_boss_step()
                self._state.advance_floor()
                inventory.add(self.random_item(), 1)
                return choice

            if 1 <= choice <= 4:
                hero.take_damage(monster.attack)
            elif choice == _INVENTORY_CHOICE:
                inventory_screen(inventory, hero, self._console)
            elif choice == LEAVE_CHOICE:
                self._state.boss_count = 1
                return choice

    def run(self, hero: Hero, inventory: Inventory) -> None:
        """Keep fighting monsters until the hero dies, leaves or meets the boss."""
        while True:
            monster = self.spawn_monster()
            choice = self.fight(hero, monster, inventory)
            if hero.is_dead():
                return
            if isinstance(monster, Minotaur):
                return
            if choice == LEAVE_CHOICE:
                self._state.record_high_score()
                return