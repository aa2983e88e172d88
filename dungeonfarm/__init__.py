"""A text role-playing game of dungeon floors, monsters, a farm, bread and potions."""

__version__ = "0.1.0"