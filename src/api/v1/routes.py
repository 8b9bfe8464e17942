"""
API v1 routes.

Defines REST endpoints for driving registration form sessions and
signing in against the remote auth authority.
"""

from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import (
    get_form_factory,
    get_form_registry,
    get_sign_in_service,
    get_submission_coordinator,
)
from src.api.models import (
    ErrorResponse,
    FieldUpdateRequest,
    FormSessionResponse,
    FormStateResponse,
    SignInRequest,
    SignInResponse,
    SubmitResponse,
)
from src.api.sessions import FormSessionRegistry
from src.domain.exceptions import FormNotSubmittable, FormSessionNotFound
from src.domain.form import RegistrationForm
from src.domain.ports import Field
from src.domain.signin import SignInResult, SignInService
from src.domain.submission import SubmissionCoordinator, SubmitResult

router = APIRouter(tags=["v1"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Form session not found"}}


def _get_form(registry: FormSessionRegistry, form_id: str) -> RegistrationForm:
    try:
        return registry.get(form_id)
    except FormSessionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form session not found",
        ) from None


@router.post(
    "/forms",
    response_model=FormSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a registration form session",
)
async def open_form(
    registry: FormSessionRegistry = Depends(get_form_registry),
    factory: Callable[[], RegistrationForm] = Depends(get_form_factory),
) -> FormSessionResponse:
    form_id, form = registry.open(factory)
    return FormSessionResponse(id=form_id, form=FormStateResponse.from_snapshot(form.snapshot()))


@router.get(
    "/forms/{form_id}",
    response_model=FormStateResponse,
    responses=_NOT_FOUND,
    summary="Read the current form state",
)
async def read_form(
    form_id: str,
    registry: FormSessionRegistry = Depends(get_form_registry),
) -> FormStateResponse:
    form = _get_form(registry, form_id)
    return FormStateResponse.from_snapshot(form.snapshot())


@router.put(
    "/forms/{form_id}/fields/{field}",
    response_model=FormStateResponse,
    responses={**_NOT_FOUND, 422: {"description": "Unknown field"}},
    summary="Apply an edit to one field",
    description="Runs local validation synchronously. Login edits of three or more "
    "characters schedule a debounced availability check; poll the form to see it resolve.",
)
async def update_field(
    form_id: str,
    field: Field,
    request_data: FieldUpdateRequest,
    registry: FormSessionRegistry = Depends(get_form_registry),
) -> FormStateResponse:
    form = _get_form(registry, form_id)
    form.set_field(field, request_data.value)
    return FormStateResponse.from_snapshot(form.snapshot())


@router.post(
    "/forms/{form_id}/submit",
    response_model=SubmitResponse,
    responses={
        **_NOT_FOUND,
        409: {"model": ErrorResponse, "description": "Form invalid or already submitting"},
    },
    summary="Submit the registration",
    description="On success the form session ends. On failure the mapped field "
    "errors are returned with the form state.",
)
async def submit_form(
    form_id: str,
    registry: FormSessionRegistry = Depends(get_form_registry),
    coordinator: SubmissionCoordinator = Depends(get_submission_coordinator),
) -> SubmitResponse:
    form = _get_form(registry, form_id)
    try:
        outcome = await coordinator.submit(form)
    except FormNotSubmittable as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from None

    if outcome.result is SubmitResult.SUCCESS:
        # The client may have abandoned the session while the POST was in flight
        registry.discard(form_id)
        return SubmitResponse(result=outcome.result)
    return SubmitResponse(
        result=outcome.result,
        form=FormStateResponse.from_snapshot(form.snapshot()),
    )


@router.delete(
    "/forms/{form_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Abandon a form session",
)
async def close_form(
    form_id: str,
    registry: FormSessionRegistry = Depends(get_form_registry),
) -> Response:
    try:
        registry.close(form_id)
    except FormSessionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form session not found",
        ) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/session/login",
    response_model=SignInResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Credentials rejected"},
        502: {"model": ErrorResponse, "description": "Auth authority unreachable"},
    },
    summary="Sign in and store the bearer token",
)
async def sign_in(
    request_data: SignInRequest,
    service: SignInService = Depends(get_sign_in_service),
) -> SignInResponse:
    outcome = await service.sign_in(request_data.login, request_data.password)

    if outcome.result is SignInResult.REJECTED:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=outcome.message)
    if outcome.result is SignInResult.TRANSPORT_FAILURE:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=outcome.message)
    return SignInResponse(
        result=outcome.result,
        message=outcome.message,
        user_name=outcome.user_name,
    )


@router.delete(
    "/session",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
)
async def sign_out(service: SignInService = Depends(get_sign_in_service)) -> Response:
    service.sign_out()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
