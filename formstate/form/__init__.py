"""Form state controller."""

from formstate.form.controller import FormController
from formstate.form.state import FormPhase, FormSnapshot

__all__ = ["FormController", "FormPhase", "FormSnapshot"]
