"""Shared API dependencies and request-parameter parsing."""

import re
from datetime import date

from fastapi import Query

from spendwise.config import settings
from spendwise.core.database import get_db
from spendwise.core.exceptions import InvalidIdentifierError, ValidationError
from spendwise.models.base import MAX_RECORD_ID, USER_ID_MAX_LENGTH

__all__ = ["get_db", "get_user_id", "resolve_user_id", "parse_identifier", "DateRange", "get_date_range"]

_ID_PATTERN = re.compile(r"[1-9][0-9]{0,9}")


def resolve_user_id(user_id: str | None) -> str:
    """Explicit owner if given, otherwise the configured placeholder user."""
    if user_id is not None and user_id.strip():
        return user_id.strip()
    return settings.default_user_id


def get_user_id(
    user_id: str | None = Query(None, alias="userId", max_length=USER_ID_MAX_LENGTH),
) -> str:
    return resolve_user_id(user_id)


def parse_identifier(raw: str, resource: str) -> int:
    """Turn a path segment into a record id, before any store access.

    Only positive base-10 integers that fit the INTEGER key columns are accepted.
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidIdentifierError(resource)
    value = int(raw)
    if value > MAX_RECORD_ID:
        raise InvalidIdentifierError(resource)
    return value


class DateRange:
    """Optional inclusive date bounds taken from ``startDate`` / ``endDate``."""

    def __init__(self, start: date | None = None, end: date | None = None):
        if start and end and start > end:
            raise ValidationError("startDate must be on or before endDate", field="startDate")
        self.start = start
        self.end = end


def get_date_range(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
) -> DateRange:
    return DateRange(start_date, end_date)
