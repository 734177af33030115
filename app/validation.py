import re
from user import UserForm

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class ValidationError(ValueError):
    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(errors.values()))
        self.errors = errors


def validate_user_form(form: UserForm) -> dict[str, str]:
    """Return a mapping of field name to error message, empty when valid."""
    errors = {}
    if not form.first_name.strip():
        errors["first_name"] = "First name is required"
    if not form.last_name.strip():
        errors["last_name"] = "Last name is required"
    if not form.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(form.email):
        errors["email"] = "Email is invalid"
    return errors
