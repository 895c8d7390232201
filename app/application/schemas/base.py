"""Shared pydantic configuration for the API DTOs."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base DTO — camelCase on the wire, snake_case in Python.

    Request bodies accept both spellings; responses are rendered by alias.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    """Body returned by delete endpoints."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for every 4xx/5xx raised by the API."""

    error: str
