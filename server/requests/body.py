"""Request body parsing that reports failures as plain messages."""

import json
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class MalformedBodyError(ValueError):
    """Raised when a request body is not valid JSON of the expected shape."""

    pass


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a ValidationError as 'field.path: message; ...'."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "body"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """
    Parse and validate a JSON request body.

    Args:
        request: Incoming request
        model: Pydantic model describing the expected shape

    Returns:
        Validated model instance

    Raises:
        MalformedBodyError: If the body is not JSON or does not match the model
    """
    raw = await request.body()
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedBodyError(f"Invalid JSON body: {e}") from e

    if not isinstance(data, dict):
        raise MalformedBodyError("Request body must be a JSON object")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedBodyError(describe_validation_error(e)) from e
