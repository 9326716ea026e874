from __future__ import annotations

from typing import List

from .core.dates import is_today
from .domain import CalendarCell, CalendarEvent, ViewMode
from .services import CalendarPage

WEEKDAY_HEADER = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
CELL_WIDTH = 5


def _day_label(cell: CalendarCell) -> str:
    label = f"{cell.date.day:>2}"
    if not cell.in_current_period:
        return f"({label})".rjust(CELL_WIDTH)
    marker = "*" if is_today(cell.date) else " "
    count = "+" if cell.events else " "
    return f"{marker}{label}{count}".rjust(CELL_WIDTH)


def _event_line(event: CalendarEvent) -> str:
    if event.is_all_day:
        span = "all day    "
    else:
        span = f"{event.starts_at:%H:%M}-{event.ends_at:%H:%M}"
    category = f" [{event.category.label}]" if event.category else ""
    return f"{span}  {event.title}{category}"


def _agenda(cells: List[CalendarCell]) -> List[str]:
    lines: List[str] = []
    for cell in cells:
        if not cell.events or not cell.in_current_period:
            continue
        lines.append(f"{cell.date:%a %d %b}")
        lines.extend(f"  {_event_line(event)}" for event in cell.visible_events)
        if cell.overflow_label:
            lines.append(f"  {cell.overflow_label} more")
    return lines


def render_page(page: CalendarPage) -> str:
    """Plain-text rendering used by the ``view`` command."""

    lines = [page.title, ""]
    if page.mode is ViewMode.DAY:
        for hour, events in page.hours:
            titles = ", ".join(event.title for event in events)
            lines.append(f"{hour:02d}:00  {titles}".rstrip())
        return "\n".join(lines)

    lines.append("".join(name.rjust(CELL_WIDTH) for name in WEEKDAY_HEADER))
    for offset in range(0, len(page.cells), 7):
        week = page.cells[offset:offset + 7]
        lines.append("".join(_day_label(cell) for cell in week))
    agenda = _agenda(page.cells)
    if agenda:
        lines.append("")
        lines.extend(agenda)
    return "\n".join(lines)
