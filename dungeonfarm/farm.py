"""The farm, which bakes bread as the hero makes dungeon trips."""

from __future__ import annotations

from .console import Console
from .inventory import Inventory, ItemCode
from .state import GameState

TRIPS_PER_BREAD = 5


class Farm:
    """Turns dungeon trips into bread the player can collect."""

    def __init__(self, state: GameState, console: Console) -> None:
        self._state = state
        self._console = console
        self._bread_ready = 0
        state.bread_count = 0

    def available_bread(self) -> int:
        """Bake bread from the trips made so far and return how much is ready."""
        while self._state.bread_count >= TRIPS_PER_BREAD:
            self._state.bread_count -= TRIPS_PER_BREAD
            self._bread_ready += 1
        return self._bread_ready

    def screen(self, inventory: Inventory) -> None:
        """Show the farm and hand out bread until the player leaves."""
        while True:
            self._console.clear()
            self._console.show(
                "{ 농장 관리인 }\n"
                "주기적으로 빵을 만들어줄께\n"
                "가끔씩 들어와서 빵 받아가\n\n"
                "{ 현재 가져갈 수 있는 빵의 양 }"
            )
            self._console.show(f"{self.available_bread()}개\n")
            self._console.show("{ 선택지 }\n1. 빵 받기\n2. 나가기")
            choice = self._console.read_choice()
            if choice == 1:
                inventory.add(ItemCode.BREAD, self._bread_ready)
                self._bread_ready = 0
            elif choice == 2:
                return