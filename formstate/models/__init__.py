"""Event and result models exchanged with callers."""

from formstate.models.events import FieldBlurEvent, FieldChangeEvent, FieldEvent
from formstate.models.results import SubmitResult

__all__ = ["FieldEvent", "FieldChangeEvent", "FieldBlurEvent", "SubmitResult"]
