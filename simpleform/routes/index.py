"""
SimpleForm Backend: Index Route
================================

What:  GET / describes the API and lists its resource routes.
"""

from fastapi import APIRouter

from simpleform.schemas.response import IndexResponse

router = APIRouter(tags=["Index"])

ENDPOINTS = {
    "POST /responses": "Create response",
    "GET /responses": "Get all responses",
    "GET /responses/:id": "Get one response",
    "PUT /responses/:id": "Update response",
    "DELETE /responses/:id": "Delete response",
}


@router.get("/", response_model=IndexResponse, summary="API index")
async def index() -> IndexResponse:
    return IndexResponse(message="Simple Form CRUD API", endpoints=dict(ENDPOINTS))
