from __future__ import annotations

from enum import Enum
from typing import Optional


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class EventCategory(str, Enum):
    MEETING = "meeting"
    TASK = "task"
    TRAINING = "training"
    EVENT = "event"
    PERSONAL = "personal"
    HOLIDAY = "holiday"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def lookup(cls, value: object) -> Optional["EventCategory"]:
        """Resolve a stored value or a display label, case-insensitively."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        needle = value.strip().lower()
        for member in cls:
            if needle in (member.value, member.label.lower()):
                return member
        return None


_CATEGORY_LABELS = {
    EventCategory.MEETING: "Meeting",
    EventCategory.TASK: "Task",
    EventCategory.TRAINING: "Training",
    EventCategory.EVENT: "Event",
    EventCategory.PERSONAL: "Personal",
    EventCategory.HOLIDAY: "Holiday",
}


class EventColor(str, Enum):
    BLUE = "#2196F3"
    RED = "#F44336"
    GREEN = "#4CAF50"
    ORANGE = "#FF9800"
    PURPLE = "#9C27B0"
    TEAL = "#009688"
    PINK = "#E91E63"
    INDIGO = "#3F51B5"

    @property
    def label(self) -> str:
        return self.name.capitalize()


DEFAULT_COLOR = EventColor.BLUE.value
