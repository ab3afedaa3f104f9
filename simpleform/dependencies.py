"""
SimpleForm Backend: FastAPI Dependencies
=========================================

What:  Hands the process-wide ResponseStore to route handlers.
How:   The store lives on `app.state.store`, set either by `create_app(store=...)`
       or by the lifespan at startup. Handlers declare
       `store: ResponseStore = Depends(get_response_store)`.
"""

from fastapi import Request

from simpleform.exceptions import StorageError
from simpleform.services.response_store import ResponseStore


def get_response_store(request: Request) -> ResponseStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StorageError(message="Response store is not initialised")
    return store
