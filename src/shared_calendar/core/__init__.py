"""Period arithmetic, view navigation, event projection and form validation."""

from . import dates
from .projector import (
    MAX_CELL_EVENTS,
    events_for_date,
    events_for_hour,
    hour_slots,
    in_current_period,
    project,
)
from .validation import FormErrors, has_validation_errors, validate_event_form
from .view_state import ViewState

__all__ = [
    "MAX_CELL_EVENTS",
    "FormErrors",
    "ViewState",
    "dates",
    "events_for_date",
    "events_for_hour",
    "has_validation_errors",
    "hour_slots",
    "in_current_period",
    "project",
    "validate_event_form",
]
