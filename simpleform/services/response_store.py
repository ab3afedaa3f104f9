"""
SimpleForm Backend: Response Store (Storage Adapter)
=====================================================

What:  Single-record CRUD over the `responses` table.
How:   Each method opens one session from the injected `Database`, issues one
       statement, and returns `ResponseOut` schemas. Missing rows become
       NotFoundError; SQLAlchemy and connection failures become StorageError.
Who:   Constructed once at startup and injected into route handlers via
       `simpleform.dependencies.get_response_store`.

Semantics:
    - create:   inserts with a generated id and created_at
    - list_all: every record, insertion order (created_at, then id)
    - get:      one record by id
    - replace:  overwrites name/email/feedback/rating; id and created_at kept
    - delete:   removes the row, returns its last content

    Identifiers that are not valid UUIDs cannot match any row, so they are
    reported as NotFoundError rather than as a server fault. Concurrent
    replaces of the same row are last-write-wins.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from simpleform.database import Database
from simpleform.exceptions import NotFoundError, StorageError
from simpleform.models.response import ResponseRecord
from simpleform.schemas.response import ResponseOut
from simpleform.services.validation import ResponseFields

logger = logging.getLogger(__name__)


def parse_response_id(raw_id: str) -> uuid.UUID:
    """Convert a path identifier to a UUID; malformed ids are not found."""
    try:
        return uuid.UUID(str(raw_id))
    except ValueError:
        raise NotFoundError(resource="Response", resource_id=str(raw_id)) from None


class ResponseStore:
    """Storage adapter for form submissions."""

    def __init__(self, database: Database):
        self.database = database

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        """
        Translate driver/ORM failures into StorageError.

        Connection failures raised by the driver before SQLAlchemy sees a
        connection (refused, unreachable host, timeout) arrive as OSError.
        """
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            original = getattr(e, "orig", None) or e
            logger.error("Storage failure while trying to %s: %s", action, original, exc_info=True)
            raise StorageError(
                message=f"Could not {action}: {original}",
                context={"error_type": type(e).__name__},
            ) from e

    async def create(self, fields: ResponseFields) -> ResponseOut:
        record = ResponseRecord(**fields.as_columns())
        with self._storage_errors("create response"):
            async with self.database.session() as session:
                session.add(record)
                await session.flush()
        logger.info("Response %s created", record.id)
        return ResponseOut.model_validate(record)

    async def list_all(self) -> List[ResponseOut]:
        query = select(ResponseRecord).order_by(
            ResponseRecord.created_at.asc(),
            ResponseRecord.id.asc(),
        )
        with self._storage_errors("list responses"):
            async with self.database.session() as session:
                result = await session.execute(query)
                records = list(result.scalars().all())
        return [ResponseOut.model_validate(record) for record in records]

    async def get(self, response_id: str) -> ResponseOut:
        key = parse_response_id(response_id)
        with self._storage_errors("fetch response"):
            async with self.database.session() as session:
                record = await session.get(ResponseRecord, key)
        if record is None:
            raise NotFoundError(resource="Response", resource_id=str(response_id))
        return ResponseOut.model_validate(record)

    async def replace(self, response_id: str, fields: ResponseFields) -> ResponseOut:
        """
        Full replacement of the writable fields.

        A rating left out of `fields` is stored as NULL; created_at is never
        refreshed.
        """
        key = parse_response_id(response_id)
        with self._storage_errors("update response"):
            async with self.database.session() as session:
                record = await session.get(ResponseRecord, key)
                if record is not None:
                    for column, value in fields.as_columns().items():
                        setattr(record, column, value)
                    await session.flush()
        if record is None:
            raise NotFoundError(resource="Response", resource_id=str(response_id))
        logger.info("Response %s updated", record.id)
        return ResponseOut.model_validate(record)

    async def delete(self, response_id: str) -> ResponseOut:
        key = parse_response_id(response_id)
        with self._storage_errors("delete response"):
            async with self.database.session() as session:
                record = await session.get(ResponseRecord, key)
                if record is not None:
                    # Snapshot before the row goes away.
                    deleted = ResponseOut.model_validate(record)
                    await session.delete(record)
        if record is None:
            raise NotFoundError(resource="Response", resource_id=str(response_id))
        logger.info("Response %s deleted", deleted.id)
        return deleted
