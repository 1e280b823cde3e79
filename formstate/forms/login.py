"""Login form — username and password, both required."""

from formstate.form.controller import FormController
from formstate.validators.basic import required

LOGIN_INITIAL_VALUES = {
    "username": "",
    "password": "",
}


def login_rules() -> dict:
    return {
        "username": [required("Username is required")],
        "password": [required("Password is required")],
    }


def login_form(**kwargs) -> FormController:
    return FormController(LOGIN_INITIAL_VALUES, login_rules(), **kwargs)
