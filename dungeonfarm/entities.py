"""Heroes and monsters that take part in fights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

MAX_HEALTH = 100
MAX_HUNGER = 100
POTION_HEAL = 50
BREAD_FILL = 100
HUNGER_PER_TRIP = 10

_SKILL_MULTIPLIERS = {1: 1, 2: 2, 3: 10, 4: 100}


@dataclass
class Combatant:
    """Anything with a name, health and an attack value."""

    name: str
    health: int
    attack: int
    hungry: int = 0

    def take_damage(self, amount: int) -> None:
        """Lose the given amount of health."""
        self.health -= amount

    def drink_potion(self) -> None:
        """Restore health, never above the maximum."""
        self.health = min(self.health + POTION_HEAL, MAX_HEALTH)

    def eat_bread(self) -> None:
        """Restore hunger, never above the maximum."""
        self.hungry = min(self.hungry + BREAD_FILL, MAX_HUNGER)

    def get_hungry(self) -> None:
        """Lose hunger for one trip into the dungeon."""
        self.hungry -= HUNGER_PER_TRIP

    def is_dead(self) -> bool:
        return self.health <= 0

    def stat_sheet(self) -> str:
        """The character screen listing name and stats."""
        return (
            f"{{ {self.name} }}\n\n"
            "{ 스텟 }\n"
            f"체력 : {self.health}\n"
            f"공격력 : {self.attack}\n"
            f"허기 : {self.hungry}\n"
        )


class Hero(Combatant):
    """A playable character with four attack skills."""

    SKILL_NAMES: ClassVar[tuple[str, str, str]] = ("", "", "")

    def skill_damage(self, choice: int) -> int:
        """Damage dealt by the skill numbered ``choice``; zero for non-attacks."""
        return self.attack * _SKILL_MULTIPLIERS.get(choice, 0)

    def skill_menu(self) -> str:
        """The skill tree menu shown during a fight."""
        entries = ["일반 공격", *self.SKILL_NAMES, "인벤토리", "나가기"]
        lines = ["{ 스킬트리 }"]
        lines.extend(f"{number}. {entry}" for number, entry in enumerate(entries, start=1))
        return "\n".join(lines)


class Warrior(Hero):
    SKILL_NAMES = ("강하게 베기", "힘차게 베기", "진심 베기")

    def __init__(self) -> None:
        super().__init__("Warrior", MAX_HEALTH, 20, MAX_HUNGER)


class Sorcerer(Hero):
    SKILL_NAMES = ("매직 에로우", "메테오", "메지컬 빔")

    def __init__(self) -> None:
        super().__init__("Socerer", MAX_HEALTH, 5, MAX_HUNGER)


class Archer(Hero):
    SKILL_NAMES = ("더블 샷", "크리티컬 샷", "대궁 발사")

    def __init__(self) -> None:
        super().__init__("Archer", MAX_HEALTH, 10, MAX_HUNGER)


class Goblin(Combatant):
    def __init__(self) -> None:
        super().__init__("Goblin", 100, 5)


class Slime(Combatant):
    def __init__(self) -> None:
        super().__init__("Slime", 100, 5)


class Wolf(Combatant):
    def __init__(self) -> None:
        super().__init__("Wolf", 100, 5)


class Minotaur(Combatant):
    def __init__(self) -> None:
        super().__init__("[ BOSS ] MinoTauros", 1000000, 40)