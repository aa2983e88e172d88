# dungeonfarm

dungeonfarm is a text role-playing game that runs in the terminal. You pick a hero and fight your
way down the dungeon one floor at a time. Between trips you can collect bread from the farm and use
items from your inventory. All in-game text is in Korean.

## Installing

```
pip install .
```

## Playing

```
dungeonfarm
dungeonfarm --seed 42
```

`--seed` fixes the random number generator that picks monsters and loot, so a session can be
replayed. Every menu reads a number. Input that is not a number is ignored. When the input runs
out or you press Ctrl-C, the game ends quietly. The screen is cleared between menus only when
output goes to a terminal.

1. **Title screen.** `1` starts a game and `2` quits.
2. **Character select.** Pick one of three heroes. Each hero starts with 100 health and 100 hunger.

   | Hero     | Attack | Skills 2–4                             |
   |----------|--------|----------------------------------------|
   | Warrior  | 20     | 강하게 베기, 힘차게 베기, 진심 베기    |
   | Socerer  | 5      | 매직 에로우, 메테오, 메지컬 빔         |
   | Archer   | 10     | 더블 샷, 크리티컬 샷, 대궁 발사        |

   The next screen shows the hero's stats. `1` continues to the main menu. `2` goes back to the
   character select.
3. **Main menu.** This screen shows your best dungeon record. It offers:
   - `1` **Dungeon.** Each trip costs 10 hunger. Hunger has no other effect.
   - `2` **Farm.** Collect the bread that has been baked.
   - `3` **Inventory.** Use bread or healing potions.
   - `4` **Leave.** Go back to the title screen.

### Combat

Each turn you pick one of these actions:

| Choice | Effect                              |
|--------|-------------------------------------|
| 1      | Deals your attack                   |
| 2      | Deals twice your attack             |
| 3      | Deals ten times your attack         |
| 4      | Deals a hundred times your attack   |
| 5      | Opens the inventory                 |
| 6      | Leaves the dungeon                  |

If the monster survives one of your attacks, it strikes back for its attack value. Goblins, slimes
and wolves have 100 health and 5 attack. You keep fighting one monster after another until you die
or leave.

Each monster you defeat takes you one floor deeper and drops either bread or a healing potion at
random. After nine monsters have been defeated, the next encounter is the boss, `[ BOSS ] MinoTauros`,
with 1,000,000 health and 40 attack. The dungeon trip ends after the boss fight. When you leave the
dungeon, the boss countdown starts again. If you leave from an ordinary monster, your floor is also
recorded as the high score when it beats the old one, and the floor count restarts.

If your hero's health drops to zero, the game returns to the title screen. The floor, high score
and boss countdown are all reset.

### Inventory and farm

The inventory has eight slots, numbered 0 to 7. Choice 8 leaves the inventory. Each slot holds one
kind of item along with how many you have. Empty slots move to the back.

- **Healing potion:** restores 50 health, up to a maximum of 100.
- **Bread:** refills your hunger to 100.

The farm bakes one loaf for every five dungeon trips. Choosing `1` at the farm moves all baked
bread into your inventory.

## Using the package from code

The game reads from and writes to any text streams you give it:

```python
import io
import random

from dungeonfarm.console import Console
from dungeonfarm.game import Game

out = io.StringIO()
console = Console(io.StringIO("1\n1\n1\n4\n2\n"), out)
Game(console, random.Random(0)).run()
print(out.getvalue())
```

The parts of the game can also be used on their own:

- `dungeonfarm.console`: `Console`, with `read_choice()`, `show(text)` and `clear()`.
- `dungeonfarm.entities`: `Combatant`, the heroes (`Warrior`, `Sorcerer`, `Archer`, each a
  `Hero` with `skill_damage(choice)` and `skill_menu()`), and the monsters (`Goblin`, `Slime`,
  `Wolf`, `Minotaur`).
- `dungeonfarm.inventory`: `ItemCode`, the eight-slot `Inventory` (`add`, `count`, `clean`,
  `use_slot`, `slot_lines`) and the `inventory_screen` function.
- `dungeonfarm.state`: `GameState`, which tracks the floor, the high score, the boss countdown and
  the farm's trip counter.
- `dungeonfarm.dungeon`: `Dungeon`, with `spawn_monster`, `random_item`, `fight` and `run`.
- `dungeonfarm.farm`: `Farm`, with `available_bread` and `screen`.
- `dungeonfarm.game`: `Game` and the `main` entry point.

## What it does not do

Nothing is saved. The hero, inventory, farm and high score last only as long as the program runs.