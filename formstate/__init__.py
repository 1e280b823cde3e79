"""formstate — form state tracking, rule-chain validation and guarded submission.

Usage:
    from formstate import FormController, required, confirm_password

    form = FormController(
        {"password": "", "confirmPassword": ""},
        {"password": [required()], "confirmPassword": [required(), confirm_password()]},
    )
    form.on_change("password", "Abc12345!")
    form.on_blur("password")
    result = await form.submit(save_account)
"""

from formstate.config import Settings, get_settings
from formstate.form import FormController, FormPhase, FormSnapshot
from formstate.log_config import configure_logging
from formstate.models import FieldBlurEvent, FieldChangeEvent, SubmitResult
from formstate.services.auth import AuthService, InvalidCredentials
from formstate.services.session_store import SessionStore
from formstate.validators import (
    FieldKind,
    Rule,
    StrengthConfig,
    ValidationEngine,
    ValidationReport,
    composite_strength,
    conditional_on,
    confirm_password,
    cross_field_equals,
    email,
    end_date_after_start,
    max_length,
    mexican_phone,
    min_length,
    numeric,
    password_strength,
    pattern,
    required,
    url,
)

__version__ = "1.0.0"

__all__ = [
    "FormController",
    "FormPhase",
    "FormSnapshot",
    "FieldChangeEvent",
    "FieldBlurEvent",
    "SubmitResult",
    "AuthService",
    "InvalidCredentials",
    "SessionStore",
    "FieldKind",
    "Rule",
    "StrengthConfig",
    "ValidationEngine",
    "ValidationReport",
    "Settings",
    "get_settings",
    "configure_logging",
    "required",
    "min_length",
    "max_length",
    "pattern",
    "email",
    "url",
    "numeric",
    "cross_field_equals",
    "confirm_password",
    "conditional_on",
    "mexican_phone",
    "end_date_after_start",
    "composite_strength",
    "password_strength",
]
