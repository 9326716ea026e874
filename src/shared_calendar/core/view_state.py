from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List

from ..domain import ViewMode
from . import dates
from .dates import DateLike


@dataclass
class ViewState:
    """Anchor date and view mode of one interactive session."""

    anchor: date = field(default_factory=date.today)
    mode: ViewMode = ViewMode.MONTH

    def __post_init__(self) -> None:
        self.anchor = dates.as_date(self.anchor)
        self.mode = ViewMode(self.mode)

    def go_to_date(self, value: DateLike) -> None:
        self.anchor = dates.as_date(value)

    def go_to_today(self) -> None:
        self.anchor = date.today()

    def go_to_previous(self) -> None:
        self._shift(-1)

    def go_to_next(self) -> None:
        self._shift(1)

    def change_view_mode(self, mode: ViewMode) -> None:
        self.mode = ViewMode(mode)

    def _shift(self, steps: int) -> None:
        if self.mode is ViewMode.MONTH:
            self.anchor = dates.add_months(self.anchor, steps)
        elif self.mode is ViewMode.WEEK:
            self.anchor = self.anchor + timedelta(days=7 * steps)
        else:
            self.anchor = self.anchor + timedelta(days=steps)

    def period_start(self) -> datetime:
        if self.mode is ViewMode.MONTH:
            return dates.month_start(self.anchor)
        if self.mode is ViewMode.WEEK:
            return dates.week_start(self.anchor)
        return dates.day_start(self.anchor)

    def period_end(self) -> datetime:
        if self.mode is ViewMode.MONTH:
            return dates.month_end(self.anchor)
        if self.mode is ViewMode.WEEK:
            return dates.week_end(self.anchor)
        return dates.day_end(self.anchor)

    def contains(self, value: DateLike) -> bool:
        moment = value if isinstance(value, datetime) else dates.day_start(value)
        return self.period_start() <= moment <= self.period_end()

    def visible_dates(self) -> List[date]:
        if self.mode is ViewMode.MONTH:
            return dates.generate_month_grid(self.anchor.year, self.anchor.month)
        if self.mode is ViewMode.WEEK:
            return dates.week_dates(self.anchor)
        return [self.anchor]

    def period_title(self) -> str:
        anchor = self.anchor
        if self.mode is ViewMode.MONTH:
            return f"{anchor:%B} {anchor.year}"
        if self.mode is ViewMode.DAY:
            return f"{anchor:%B} {anchor.day}, {anchor.year}"
        first = dates.week_start(anchor)
        last = dates.week_end(anchor)
        # The year always comes from the anchor, even for weeks spanning New Year.
        if first.month == last.month:
            return f"{first:%B} {first.day} - {last.day}, {anchor.year}"
        return f"{first:%B} {first.day} - {last:%B} {last.day}, {anchor.year}"
