"""
SimpleForm Backend: Response Route Handlers
============================================

What:  The five CRUD routes over form submissions.
How:   Each handler validates (create/update only), issues exactly one store
       call, and wraps the result in a {message, data} envelope. Errors are
       raised as application exceptions and rendered by the global handlers.

Routes:
    POST   /responses        create
    GET    /responses        list (all records, insertion order)
    GET    /responses/{id}   get one
    PUT    /responses/{id}   full replacement of name/email/feedback/rating
    DELETE /responses/{id}   delete, returns the removed record
"""

import logging

from fastapi import APIRouter, Depends

from simpleform.dependencies import get_response_store
from simpleform.schemas.response import (
    ErrorResponse,
    ResponseEnvelope,
    ResponseIn,
    ResponseListEnvelope,
)
from simpleform.services.response_store import ResponseStore
from simpleform.services.validation import validate_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/responses", tags=["Responses"])

_NOT_FOUND = {404: {"description": "No response with this id", "model": ErrorResponse}}
_INVALID = {400: {"description": "Validation failed", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Storage error", "model": ErrorResponse}}


@router.post(
    "",
    response_model=ResponseEnvelope,
    responses={**_INVALID, **_SERVER_ERROR},
    summary="Create a response",
)
async def create_response(
    submission: ResponseIn,
    store: ResponseStore = Depends(get_response_store),
) -> ResponseEnvelope:
    fields = validate_submission(submission)
    created = await store.create(fields)
    return ResponseEnvelope(message="Response created!", data=created)


@router.get(
    "",
    response_model=ResponseListEnvelope,
    responses=_SERVER_ERROR,
    summary="List all responses",
)
async def list_responses(
    store: ResponseStore = Depends(get_response_store),
) -> ResponseListEnvelope:
    """Every stored response, oldest first. No pagination."""
    records = await store.list_all()
    return ResponseListEnvelope(message="All responses", data=records)


@router.get(
    "/{response_id}",
    response_model=ResponseEnvelope,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get one response",
)
async def get_response(
    response_id: str,
    store: ResponseStore = Depends(get_response_store),
) -> ResponseEnvelope:
    record = await store.get(response_id)
    return ResponseEnvelope(message="Response found", data=record)


@router.put(
    "/{response_id}",
    response_model=ResponseEnvelope,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Replace a response",
)
async def update_response(
    response_id: str,
    submission: ResponseIn,
    store: ResponseStore = Depends(get_response_store),
) -> ResponseEnvelope:
    """
    Replace name, email, feedback and rating of an existing response.

    This is a full replacement, not a patch: a rating left out of the body
    is cleared. `id` and `createdAt` are preserved.
    """
    fields = validate_submission(submission)
    updated = await store.replace(response_id, fields)
    return ResponseEnvelope(message="Response updated!", data=updated)


@router.delete(
    "/{response_id}",
    response_model=ResponseEnvelope,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a response",
)
async def delete_response(
    response_id: str,
    store: ResponseStore = Depends(get_response_store),
) -> ResponseEnvelope:
    deleted = await store.delete(response_id)
    return ResponseEnvelope(message="Response deleted!", data=deleted)
