from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator


@dataclass(frozen=True)
class MonthGrid:
    month: date  # first day of the displayed month
    days: tuple[date, ...]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[date]:
        return iter(self.days)

    def __contains__(self, day: object) -> bool:
        return day in self.days

    @property
    def first(self) -> date:
        return self.days[0]

    @property
    def last(self) -> date:
        return self.days[-1]

    def weeks(self) -> list[tuple[date, ...]]:
        return [self.days[i : i + 7] for i in range(0, len(self.days), 7)]
