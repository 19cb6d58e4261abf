"""Shared schema building blocks: camelCase base model, money type, envelope."""

from decimal import Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Kept as Decimal in Python, emitted as a JSON number.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class ErrorDetail(CamelModel):
    field: str
    message: str


class ApiResponse(CamelModel, Generic[T]):
    """Response envelope shared by every endpoint."""

    success: bool = True
    data: T | None = None
    error: str | None = None
    message: str | None = None
    pagination: Pagination | None = None
    details: list[ErrorDetail] | None = None


def envelope(data=None, *, message: str | None = None, pagination: dict | None = None, **extra) -> dict:
    """Build a success envelope holding only the keys that were provided.

    Routes pair this with ``response_model_exclude_unset=True`` so optional
    envelope members are omitted instead of serialized as ``null``.
    """
    body: dict = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if pagination is not None:
        body["pagination"] = pagination
    body.update(extra)
    return body
