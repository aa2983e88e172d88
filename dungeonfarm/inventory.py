"""An eight-slot bag holding bread and healing potions."""

from __future__ import annotations

from enum import IntEnum

from .console import Console
from .entities import Combatant

SLOT_COUNT = 8


class ItemCode(IntEnum):
    BREAD = 1
    HEALING_POTION = 2


class Inventory:
    """Slots hold item kinds; amounts are tracked per kind."""

    def __init__(self) -> None:
        self._slots: list[ItemCode | None] = [None] * SLOT_COUNT
        self._counts = {code: 0 for code in ItemCode}

    def add(self, code: ItemCode, amount: int) -> None:
        """Add items, taking the first free slot if the kind is not yet held."""
        code = ItemCode(code)
        if code not in self._slots:
            try:
                free = self._slots.index(None)
            except ValueError:
                return
            self._slots[free] = code
        self._counts[code] += amount

    def count(self, code: ItemCode) -> int:
        return self._counts[ItemCode(code)]

    def clean(self) -> None:
        """Empty slots whose items ran out and move the rest to the front."""
        held = [code for code in self._slots if code is not None and self._counts[code] > 0]
        self._slots = held + [None] * (SLOT_COUNT - len(held))

    def use_slot(self, index: int, hero: Combatant) -> ItemCode | None:
        """Use one item from a slot on the hero; return what was used."""
        if not 0 <= index < SLOT_COUNT:
            raise IndexError(f"slot {index} out of range")
        code = self._slots[index]
        if code is None or self._counts[code] <= 0:
            return None
        if code is ItemCode.BREAD:
            hero.eat_bread()
        else:
            hero.drink_potion()
        self._counts[code] -= 1
        self.clean()
        return code

    def slot_lines(self) -> list[str]:
        """One menu line per slot."""
        labels = {
            ItemCode.BREAD: "빵 {}개",
            ItemCode.HEALING_POTION: "체력 포션 {}개",
        }
        return [
            f"{index}. " + ("" if code is None else labels[code].format(self._counts[code]))
            for index, code in enumerate(self._slots)
        ]


def inventory_screen(inventory: Inventory, hero: Combatant, console: Console) -> None:
    """Show the bag and let the player use items until they leave."""
    while True:
        inventory.clean()
        console.clear()
        console.show("{ 인벤토리 }")
        console.show("\n".join(inventory.slot_lines()))
        console.show(f"{SLOT_COUNT}. 나가기")
        choice = console.read_choice()
        if choice == SLOT_COUNT:
            return
        if 0 <= choice < SLOT_COUNT:
            inventory.use_slot(choice, hero)