"""Field event models — what a rendering layer sends into a form."""

from pydantic import BaseModel
from typing import Any, Literal, Optional


class FieldEvent(BaseModel):
    """Base model for all field events. ``name`` identifies the field."""

    event: str
    name: str


class FieldChangeEvent(FieldEvent):
    """A field's input changed.

    Mirrors an input element: ``type`` is the widget type and ``checked`` the
    checkbox state, which replaces ``value`` when ``type == "checkbox"``.
    """

    event: Literal["change"] = "change"
    value: Any = None
    type: str = "text"
    checked: Optional[bool] = None

    @property
    def raw_value(self) -> Any:
        if self.type == "checkbox":
            return bool(self.checked)
        return self.value


class FieldBlurEvent(FieldEvent):
    """A field lost focus (committed)."""

    event: Literal["blur"] = "blur"
