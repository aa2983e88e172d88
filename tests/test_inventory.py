import io

import pytest

from dungeonfarm.console import Console
from dungeonfarm.entities import MAX_HEALTH, MAX_HUNGER, Warrior
from dungeonfarm.inventory import SLOT_COUNT, Inventory, ItemCode, inventory_screen


def test_add_and_count():
    bag = Inventory()
    bag.add(ItemCode.BREAD, 3)
    bag.add(ItemCode.BREAD, 2)
    assert bag.count(ItemCode.BREAD) == 5
    assert bag.count(ItemCode.HEALING_POTION) == 0


def test_slot_lines_follow_insertion_order():
    bag = Inventory()
    bag.add(ItemCode.HEALING_POTION, 1)
    bag.add(ItemCode.BREAD, 4)
    lines = bag.slot_lines()
    assert len(lines) == SLOT_COUNT
    assert lines[0] == "0. 체력 포션 1개"
    assert lines[1] == "1. 빵 4개"
    assert lines[2] == "2. "


def test_clean_drops_empty_kinds_and_compacts():
    bag = Inventory()
    bag.add(ItemCode.BREAD, 0)
    bag.add(ItemCode.HEALING_POTION, 2)
    bag.clean()
    assert bag.slot_lines()[0] == "0. 체력 포션 2개"
    assert bag.slot_lines()[1] == "1. "


def test_use_bread_feeds_hero():
    bag = Inventory()
    bag.add(ItemCode.BREAD, 2)
    hero = Warrior()
    hero.get_hungry()
    assert bag.use_slot(0, hero) is ItemCode.BREAD
    assert hero.hungry == MAX_HUNGER
    assert bag.count(ItemCode.BREAD) == 1


def test_use_potion_heals_hero_and_empties_slot():
    bag = Inventory()
    bag.add(ItemCode.HEALING_POTION, 1)
    hero = Warrior()
    hero.take_damage(20)
    assert bag.use_slot(0, hero) is ItemCode.HEALING_POTION
    assert hero.health == MAX_HEALTH
    assert bag.count(ItemCode.HEALING_POTION) == 0
    assert bag.slot_lines()[0] == "0. "


def test_use_empty_slot_does_nothing():
    bag = Inventory()
    hero = Warrior()
    hero.take_damage(20)
    before = hero.health
    assert bag.use_slot(3, hero) is None
    assert hero.health == before


def test_use_slot_out_of_range():
    with pytest.raises(IndexError):
        Inventory().use_slot(SLOT_COUNT, Warrior())


def test_inventory_screen_uses_item_then_exits():
    bag = Inventory()
    bag.add(ItemCode.BREAD, 2)
    hero = Warrior()
    hero.get_hungry()
    out = io.StringIO()
    inventory_screen(bag, hero, Console(io.StringIO(f"0\n{SLOT_COUNT}\n"), out))
    assert hero.hungry == MAX_HUNGER
    assert bag.count(ItemCode.BREAD) == 1
    assert "{ 인벤토리 }" in out.getvalue()
    assert f"{SLOT_COUNT}. 나가기" in out.getvalue()


def test_inventory_screen_raises_when_input_ends():
    with pytest.raises(EOFError):
        inventory_screen(Inventory(), Warrior(), Console(io.StringIO(""), io.StringIO()))