"""Registration form — account details with cross-field and conditional rules.

The phone number is only checked against the Mexican format while the
country is Mexico; the confirmation must match the password.
"""

from formstate.form.controller import FormController
from formstate.validators.models import FieldKind
from formstate.validators.basic import email, min_length, required, url
from formstate.validators.advanced import StrengthConfig, confirm_password, mexican_phone, password_strength

COUNTRIES = ["Mexico", "USA", "Other"]

REGISTRATION_INITIAL_VALUES = {
    "name": "",
    "email": "",
    "password": "",
    "confirmPassword": "",
    "country": "",
    "phone": "",
    "website": "",
    "terms": False,
}

REGISTRATION_KINDS = {
    "country": FieldKind.SELECT,
    "terms": FieldKind.CHECKBOX,
}


def registration_rules() -> dict:
    """Rule table for the registration form. Built fresh per form instance."""
    return {
        "name": [required(), min_length(3)],
        "email": [required("Email is required"), email()],
        "password": [required(), password_strength(StrengthConfig(min_length=8))],
        "confirmPassword": [
            required("Please confirm your password"),
            confirm_password("Passwords must match"),
        ],
        "country": [required("Please select a country")],
        "phone": [mexican_phone()],
        "website": [url("Please enter a valid URL")],
        "terms": [required("You must accept the terms and conditions")],
    }


def registration_form(**kwargs) -> FormController:
    return FormController(
        REGISTRATION_INITIAL_VALUES,
        registration_rules(),
        REGISTRATION_KINDS,
        **kwargs,
    )
