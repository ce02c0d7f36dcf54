# rotation/solver - Rotation assignment and schedule editing
from .editing import (
    InvalidManualEdit,
    add_assignment,
    available_slots,
    available_workers,
    remove_assignment,
)
from .eligibility import PreviousLookup, eligible_workers, is_eligible
from .pickers import FirstPicker, Picker, RandomPicker
from .rotation import distribute_overflow, fill_regular_slots, generate_schedule
from .validation import ValidationResult, Violation, validate_schedule

__all__ = [
    "generate_schedule",
    "fill_regular_slots",
    "distribute_overflow",
    "PreviousLookup",
    "is_eligible",
    "eligible_workers",
    "Picker",
    "RandomPicker",
    "FirstPicker",
    "available_workers",
    "available_slots",
    "add_assignment",
    "remove_assignment",
    "InvalidManualEdit",
    "validate_schedule",
    "ValidationResult",
    "Violation",
]
