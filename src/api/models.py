"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.form import FormSnapshot
from src.domain.ports import AvailabilityStatus, SubmissionState
from src.domain.signin import SignInResult
from src.domain.submission import SubmitResult


class FieldUpdateRequest(BaseModel):
    """Request model for a single field edit."""

    value: str = Field(..., description="Current text of the input")


class PasswordCriteriaResponse(BaseModel):
    has_min_length: bool
    has_upper_case: bool
    has_digit: bool


class FieldErrorsResponse(BaseModel):
    name: str | None = None
    login: str | None = None
    password: str | None = None
    general: str | None = None


class FormStateResponse(BaseModel):
    """Everything a front end needs to render the registration form."""

    values: dict[str, str]
    errors: FieldErrorsResponse
    password_criteria: PasswordCriteriaResponse
    availability: AvailabilityStatus
    checking: bool
    login_message: str | None
    submission: SubmissionState
    valid: bool

    @classmethod
    def from_snapshot(cls, snapshot: FormSnapshot) -> "FormStateResponse":
        criteria = snapshot.password_criteria
        return cls(
            values=snapshot.values,
            errors=FieldErrorsResponse(**snapshot.errors.to_dict()),
            password_criteria=PasswordCriteriaResponse(
                has_min_length=criteria.has_min_length,
                has_upper_case=criteria.has_upper_case,
                has_digit=criteria.has_digit,
            ),
            availability=snapshot.availability,
            checking=snapshot.checking,
            login_message=snapshot.login_message,
            submission=snapshot.submission,
            valid=snapshot.valid,
        )


class FormSessionResponse(BaseModel):
    """Response model for an open form session."""

    id: str
    form: FormStateResponse


class SubmitResponse(BaseModel):
    """Response model for a submission attempt."""

    result: SubmitResult
    form: FormStateResponse | None = Field(
        None, description="Form state after a failed attempt; absent once the session ended"
    )


class SignInRequest(BaseModel):
    login: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SignInResponse(BaseModel):
    result: SignInResult
    message: str
    user_name: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
