"""
Field validators - Pure rules for name, password and login.

All functions are total: they never raise and have no side effects,
so the form may call them on every keystroke.
"""

from dataclasses import dataclass

from . import messages

MIN_PASSWORD_LENGTH = 8
MIN_LOGIN_LENGTH = 3


@dataclass(frozen=True)
class PasswordCriteria:
    """Independent password requirements, each shown to the user separately."""

    has_min_length: bool = False
    has_upper_case: bool = False
    has_digit: bool = False

    @property
    def satisfied(self) -> bool:
        return self.has_min_length and self.has_upper_case and self.has_digit


def name_has_surname(value: str) -> bool:
    """True when the trimmed name has at least two space-separated tokens."""
    return " " in value.strip()


def validate_name(value: str) -> str | None:
    """
    Validate the display name.

    An empty name is not flagged, so no error shows before the user types.

    Returns:
        Error message, or None when the name is acceptable (or empty)
    """
    if value.strip() and not name_has_surname(value):
        return messages.NAME_NEEDS_SURNAME
    return None


def evaluate_password(value: str) -> PasswordCriteria:
    """Evaluate each password criterion against the current value."""
    return PasswordCriteria(
        has_min_length=len(value) >= MIN_PASSWORD_LENGTH,
        has_upper_case=any("A" <= char <= "Z" for char in value),
        has_digit=any("0" <= char <= "9" for char in value),
    )


def login_has_min_length(value: str, min_length: int = MIN_LOGIN_LENGTH) -> bool:
    """True when the login is long enough to be checked remotely."""
    return len(value.strip()) >= min_length
