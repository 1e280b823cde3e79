"""Form state schema — the form-level phase and the snapshot handed to renderers."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FormPhase(str, Enum):
    """Form-level state: idle → validating → {idle | submitting → idle}."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class FormSnapshot(BaseModel):
    """Read-only view of a form at one instant."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, Optional[str]] = Field(default_factory=dict)
    touched: dict[str, bool] = Field(default_factory=dict)
    is_submitting: bool = False
    phase: FormPhase = FormPhase.IDLE

    @property
    def is_valid(self) -> bool:
        """True when no error entry holds a message.

        Only reflects fields validated so far; submit() validates everything.
        """
        return all(message is None for message in self.errors.values())

    @property
    def visible_errors(self) -> dict[str, str]:
        """Errors a renderer should show: touched fields with a message."""
        return {
            name: message
            for name, message in self.errors.items()
            if message is not None and self.touched.get(name)
        }
