from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple

from .types import CalendarSystem

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def is_leap(self, year: int) -> bool: ...
    def month_length(self, year: int, month: int) -> int: ...
    def day_of_year(self, year: int, month: int, day: int) -> int: ...
    def to_epoch_day(self, year: int, month: int, day: int) -> int: ...
    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[CalendarSystem, CalendarEngine]

    def get(self, system: CalendarSystem | str) -> CalendarEngine:
        system = CalendarSystem.coerce(system)
        if system not in self._engines:
            raise KeyError(f"No engine for '{system.value}'. Available: {self.list()}")
        return self._engines[system]

    def list(self) -> List[str]:
        return sorted(s.value for s in self._engines)

    def register(self, system: CalendarSystem, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (system in self._engines):
            raise KeyError(f"Engine '{system.value}' already exists. Use overwrite=True to replace.")
        self._engines[system] = engine
