"""Menus that tie the dungeon, farm and inventory into one game."""

from __future__ import annotations

import argparse
import random

from .console import Console
from .dungeon import Dungeon
from .entities import Archer, Hero, Sorcerer, Warrior
from .farm import Farm
from .inventory import Inventory, inventory_screen
from .state import GameState

_HEROES = {1: Warrior, 2: Sorcerer, 3: Archer}


class Game:
    """A game session from the title screen onwards."""

    def __init__(self, console: Console | None = None, rng: random.Random | None = None) -> None:
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState()

    def start_menu(self) -> bool:
        """Show the title screen; True to start playing, False to quit."""
        while True:
            self.console.clear()
            self.console.show("{ Text RPG }\n1. 게임 시작하기\n2. 게임 나가기")
            choice = self.console.read_choice()
            if choice == 1:
                return True
            if choice == 2:
                return False

    def character_select(self) -> Hero:
        """Let the player pick heroes until a session with one ends; return it."""
        while True:
            self.console.clear()
            self.console.show("{ 캐릭터를 선택해 주세요. }\n1. Warrior\n2. Socerer\n3. Archer")
            hero_type = _HEROES.get(self.console.read_choice())
            if hero_type is None:
                continue
            hero = hero_type()
            if self.character_intro(hero):
                return hero

    def character_intro(self, hero: Hero) -> bool:
        """Introduce the hero; True once played, False if the player went back."""
        while True:
            self.console.clear()
            self.console.show(hero.stat_sheet())
            self.console.show("{ 선택지 }\n1. 계속하기\n2. 뒤로가기")
            choice = self.console.read_choice()
            if choice == 1:
                self.main_menu(hero)
                return True
            if choice == 2:
                return False

    def main_menu(self, hero: Hero) -> None:
        """The hub between dungeon, farm and inventory, until leaving or death."""
        inventory = Inventory()
        farm = Farm(self.state, self.console)
        while True:
            self.console.clear()
            self.console.show(hero.stat_sheet())
            self.console.show(f"{{ 최고 던전 탐사 기록 }}\n{self.state.high_score}층\n")
            self.console.show("{ 선택지 }\n1. 던전\n2. 농장\n3. 인벤토리\n4. 나가기")
            choice = self.console.read_choice()
            if choice == 1:
                self.state.bread_count += 1
                hero.get_hungry()
                Dungeon(self.state, self.console, self.rng).run(hero, inventory)
                if hero.is_dead():
                    return
            elif choice == 2:
                farm.screen(inventory)
            elif choice == 3:
                inventory_screen(inventory, hero, self.console)
            elif choice == 4:
                return

    def run(self) -> None:
        """Play sessions until the player quits from the title screen."""
        while self.start_menu():
            self.character_select()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dungeonfarm", description="A small text role-playing game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for monster and loot rolls")
    args = parser.parse_args(argv)
    game = Game(Console(), random.Random(args.seed))
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())