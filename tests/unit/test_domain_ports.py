"""
Unit tests for domain ports and exceptions.

Tests verify:
- Shared enumerations are properly defined
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import json
import subprocess
from enum import Enum

import pytest

from src.domain.exceptions import (
    FormNotSubmittable,
    FormSessionNotFound,
    RegistrationError,
    TransportError,
)
from src.domain.ports import (
    AuthSession,
    AvailabilityResult,
    AvailabilityStatus,
    Field,
    Notifier,
    Severity,
    SubmissionState,
    Timer,
    Transport,
)


class TestAvailabilityStatusEnum:
    """Tests for AvailabilityStatus enum."""

    def test_values(self) -> None:
        assert [s.value for s in AvailabilityStatus] == ["idle", "checking", "available", "taken"]

    def test_json_serializable(self) -> None:
        """str mixin allows direct JSON serialization."""
        assert json.dumps(AvailabilityStatus.TAKEN) == '"taken"'

    def test_string_comparison(self) -> None:
        assert AvailabilityStatus.CHECKING == "checking"


class TestOtherEnums:
    def test_field_values(self) -> None:
        assert {f.value for f in Field} == {"name", "login", "password"}
        assert Field("login") is Field.LOGIN

    def test_availability_result_is_plain_enum(self) -> None:
        assert issubclass(AvailabilityResult, Enum)
        assert not issubclass(AvailabilityResult, str)
        assert {r.name for r in AvailabilityResult} == {"AVAILABLE", "TAKEN", "UNKNOWN"}

    def test_submission_state_values(self) -> None:
        assert {s.value for s in SubmissionState} == {"idle", "submitting"}

    def test_severity_values(self) -> None:
        assert {s.value for s in Severity} == {"success", "warning", "error"}


class TestProtocols:
    """Ports are structural: any object with the right methods satisfies them."""

    def test_transport_has_get_and_post(self) -> None:
        assert hasattr(Transport, "get")
        assert hasattr(Transport, "post")

    def test_notifier_has_notify(self) -> None:
        assert hasattr(Notifier, "notify")

    def test_timer_has_call_later(self) -> None:
        assert hasattr(Timer, "call_later")


class TestAuthSession:
    def test_starts_signed_out(self) -> None:
        session = AuthSession()
        assert session.token is None
        assert session.user_name is None

    def test_clear(self) -> None:
        session = AuthSession(token="jwt", user_name="Ana")
        session.clear()
        assert session == AuthSession()


class TestDomainExceptions:
    """Tests for domain exceptions."""

    @pytest.mark.parametrize("exc", [TransportError, FormNotSubmittable, FormSessionNotFound])
    def test_inherits_registration_error(self, exc: type[Exception]) -> None:
        assert issubclass(exc, RegistrationError)

    def test_transport_error_defaults(self) -> None:
        error = TransportError("connect failed")
        assert error.status_code is None
        assert error.payload is None
        assert error.server_message is None
        assert str(error) == "connect failed"

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"message": "Login já cadastrado"}, "Login já cadastrado"),
            ("Senha fraca", "Senha fraca"),
            ({"message": "  "}, None),
            ({"detail": "x"}, None),
            ("", None),
        ],
    )
    def test_server_message(self, payload: object, expected: str | None) -> None:
        error = TransportError("rejected", status_code=400, payload=payload)
        assert error.server_message == expected


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize("library", ["fastapi", "pydantic", "httpx", "starlette"])
    def test_no_from_imports_in_domain(self, library: str) -> None:
        result = subprocess.run(
            ["grep", "-r", f"from {library}", "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{library} import found: {result.stdout}"

    @pytest.mark.parametrize("library", ["fastapi", "pydantic", "httpx", "starlette"])
    def test_no_plain_imports_in_domain(self, library: str) -> None:
        result = subprocess.run(
            ["grep", "-r", f"import {library}", "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{library} import found: {result.stdout}"
