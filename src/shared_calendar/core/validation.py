"""Field checks for the create/edit event form.

Every field is checked on every call so the caller can flag all invalid
inputs at once. The result maps field name to message; an empty mapping
means the form is valid.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..domain import EventCategory, parse_datetime

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
LOCATION_MAX_LENGTH = 200

COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")

FormErrors = Dict[str, str]


def _required(value: Any, label: str) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return f"{label} is required"
    return None


def _max_length(value: Any, limit: int, label: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        return f"{label} must be text"
    if len(value) > limit:
        return f"{label} must be at most {limit} characters"
    return None


def _to_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    try:
        return parse_datetime(value)
    except (TypeError, ValueError):
        return None


def validate_title(title: Any) -> Optional[str]:
    return _required(title, "Title") or _max_length(title, TITLE_MAX_LENGTH, "Title")


def validate_description(description: Any) -> Optional[str]:
    return _max_length(description, DESCRIPTION_MAX_LENGTH, "Description")


def validate_location(location: Any) -> Optional[str]:
    return _max_length(location, LOCATION_MAX_LENGTH, "Location")


def validate_category(category: Any) -> Optional[str]:
    if category is None or category == "":
        return None
    if EventCategory.lookup(category) is None:
        return "Choose a valid category"
    return None


def validate_color(color: Optional[str]) -> Optional[str]:
    if not color:
        return None
    if not isinstance(color, str) or not COLOR_PATTERN.match(color):
        return "Color must be a hex code such as #RRGGBB or #RGB"
    return None


def validate_event_form(payload: Mapping[str, Any]) -> FormErrors:
    errors: FormErrors = {}

    checks = {
        "title": validate_title(payload.get("title")),
        "description": validate_description(payload.get("description")),
        "location": validate_location(payload.get("location")),
        "category": validate_category(payload.get("category")),
        "color": validate_color(payload.get("color")),
    }

    starts_at = _to_datetime(payload.get("starts_at"))
    ends_at = _to_datetime(payload.get("ends_at"))
    if starts_at is None:
        checks["starts_at"] = "Start time must be a valid date and time"
    if ends_at is None:
        checks["ends_at"] = "End time must be a valid date and time"
    elif starts_at is not None and ends_at <= starts_at:
        checks["ends_at"] = "End time must be after the start time"

    for name, message in checks.items():
        if message:
            errors[name] = message
    return errors


def has_validation_errors(errors: Mapping[str, Optional[str]]) -> bool:
    return any(message for message in errors.values())
