"""Form controller — owns field values, errors, touched flags and submission.

Every handler except the awaited submit callback runs to completion
synchronously, so within one event loop no handler can observe another's
half-applied update. Field values are never logged.
"""

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import structlog

from formstate.config import get_settings
from formstate.form.state import FormPhase, FormSnapshot
from formstate.models.events import FieldBlurEvent, FieldChangeEvent, FieldEvent
from formstate.models.results import SubmitResult
from formstate.services.event_bus import FormEventBus
from formstate.validators.engine import ValidationEngine
from formstate.validators.models import ErrorMap, FieldKind, RuleTable
from formstate.validators.reference_data import TRUTHY_STRINGS

logger = structlog.get_logger()

SubmitHandler = Callable[[dict[str, Any]], Union[Any, Awaitable[Any]]]
SnapshotListener = Callable[[FormSnapshot], None]


class FormController:
    """Mutable state of one form instance.

    Args:
        initial_values: Starting value per field. Copied; reset() restores it.
        rules: Rule chain per field. Fields without one are always valid.
        kinds: Declared FieldKind per field. Undeclared fields get a kind
            inferred once from their initial value.
        engine: Prebuilt engine to use instead of one built from ``rules``.
        revalidate_dependents: Also re-validate touched fields whose rules
            read a changed field. Defaults to the REVALIDATE_DEPENDENTS setting.
    """

    def __init__(
        self,
        initial_values: Optional[Mapping[str, Any]] = None,
        rules: Optional[RuleTable] = None,
        kinds: Optional[Mapping[str, Union[FieldKind, str]]] = None,
        *,
        engine: Optional[ValidationEngine] = None,
        revalidate_dependents: Optional[bool] = None,
    ):
        self._initial: dict[str, Any] = dict(initial_values or {})
        self.engine = engine or ValidationEngine(rules)

        if revalidate_dependents is None:
            revalidate_dependents = get_settings().REVALIDATE_DEPENDENTS
        self.revalidate_dependents = revalidate_dependents

        declared = {name: FieldKind(kind) for name, kind in (kinds or {}).items()}
        fields = set(self._initial) | set(self.engine.rules) | set(declared)
        self.kinds: dict[str, FieldKind] = {
            name: declared.get(name) or FieldKind.infer(self._initial.get(name))
            for name in fields
        }

        self._values: dict[str, Any] = dict(self._initial)
        self._errors: ErrorMap = {}
        self._touched: dict[str, bool] = {}
        self._submitting = False
        self._phase = FormPhase.IDLE
        self._submit_token: Optional[object] = None
        self._bus: FormEventBus[FormSnapshot] = FormEventBus(source="form_controller")

    # ── State accessors ──

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> ErrorMap:
        return dict(self._errors)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._touched)

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def phase(self) -> FormPhase:
        return self._phase

    @property
    def is_valid(self) -> bool:
        """True when no current error entry holds a message."""
        return all(message is None for message in self._errors.values())

    def visible_error(self, name: str) -> Optional[str]:
        """Error to display for a field; untouched fields show nothing."""
        if not self._touched.get(name):
            return None
        return self._errors.get(name)

    def snapshot(self) -> FormSnapshot:
        return FormSnapshot(
            values=self.values,
            errors=self.errors,
            touched=self.touched,
            is_submitting=self._submitting,
            phase=self._phase,
        )

    # ── Field events ──

    def on_change(self, name: str, raw_value: Any) -> None:
        """User edited a field. Re-validates only if the field was touched."""
        self._write(name, self._coerce(name, raw_value))

    def on_blur(self, name: str) -> None:
        """User left a field. Marks it touched and validates it."""
        self._touched[name] = True
        self._validate(name)
        self._notify()

    def set_field_value(self, name: str, value: Any) -> None:
        """Programmatic write. No coercion; same touched-gated validation."""
        self._write(name, value)

    def set_field_error(self, name: str, message: Optional[str]) -> None:
        """Programmatic error, e.g. a server-side rejection for one field."""
        self._errors[name] = message
        self._notify()

    def dispatch(self, event: FieldEvent) -> None:
        """Route a field event model to the matching handler."""
        if isinstance(event, FieldChangeEvent):
            self.on_change(event.name, event.raw_value)
        elif isinstance(event, FieldBlurEvent):
            self.on_blur(event.name)
        else:
            raise TypeError(f"Unsupported field event: {type(event).__name__}")

    # ── Submission ──

    async def submit(self, on_valid: Optional[SubmitHandler] = None) -> SubmitResult:
        """Validate everything and, if valid, run the submit handler.

        Every rule-table field becomes touched so all errors are visible. The
        handler receives a copy of the values and may be sync or async. Any
        exception it raises is returned as a ``failure`` result.

        Returns:
            SubmitResult — ``rejected`` if a submission is already in flight
        """
        if self._submitting:
            logger.warning("submit_rejected", reason="submission_in_flight")
            return SubmitResult.rejected()

        self._phase = FormPhase.VALIDATING
        for name in self.engine.rules:
            self._touched[name] = True
        report = self.engine.validate_all(self._values)
        self._errors = dict(report.errors)

        if not report.passed:
            self._phase = FormPhase.IDLE
            self._notify()
            logger.info("submit_invalid", failed_fields=report.failed_fields)
            return SubmitResult.invalid(report.errors)

        if on_valid is None:
            self._phase = FormPhase.IDLE
            self._notify()
            return SubmitResult.success()

        token = object()
        self._submit_token = token
        self._submitting = True
        self._phase = FormPhase.SUBMITTING
        self._notify()

        try:
            data = on_valid(dict(self._values))
            if inspect.isawaitable(data):
                data = await data
        except Exception as e:
            logger.error("submit_failed", error=str(e), error_type=type(e).__name__)
            outcome = SubmitResult.failure(e)
        else:
            logger.info("submit_succeeded", fields=len(self._values))
            outcome = SubmitResult.success(data)
        finally:
            # A reset() during the await hands the flag to later submissions
            if self._submit_token is token:
                self._submit_token = None
                self._submitting = False
                self._phase = FormPhase.IDLE
                self._notify()

        return outcome

    def reset(self) -> None:
        """Restore initial values and clear errors, touched and submitting."""
        self._values = dict(self._initial)
        self._errors = {}
        self._touched = {}
        self._submitting = False
        self._submit_token = None
        self._phase = FormPhase.IDLE
        logger.debug("form_reset", fields=len(self._values))
        self._notify()

    # ── Change notification ──

    def subscribe(self, listener: SnapshotListener) -> None:
        """Receive a FormSnapshot after every state change."""
        self._bus.subscribe(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        self._bus.unsubscribe(listener)

    # ── Internals ──

    def _coerce(self, name: str, raw_value: Any) -> Any:
        kind = self.kinds.get(name, FieldKind.TEXT)
        if kind is FieldKind.CHECKBOX:
            if isinstance(raw_value, str):
                return raw_value.strip().lower() in TRUTHY_STRINGS
            return bool(raw_value)
        if raw_value is None:
            return ""
        return raw_value if isinstance(raw_value, str) else str(raw_value)

    def _write(self, name: str, value: Any) -> None:
        self._values[name] = value
        if self._touched.get(name):
            self._validate(name)
        if self.revalidate_dependents:
            for dependent in self.engine.dependents_of(name):
                if self._touched.get(dependent):
                    self._validate(dependent)
        self._notify()

    def _validate(self, name: str) -> None:
        self._errors[name] = self.engine.validate_field(name, self._values.get(name), self._values)

    def _notify(self) -> None:
        if self._bus.listener_count:
            self._bus.publish(self.snapshot())
