"""Ready-made form definitions for the account screens."""

from formstate.forms.login import login_form
from formstate.forms.registration import registration_form

__all__ = ["login_form", "registration_form"]
