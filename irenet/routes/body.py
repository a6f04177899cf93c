"""
Irenet Backend — Request Body Parsing
=====================================

What:  FastAPI dependency factory that reads a request body into a Pydantic
       schema from either JSON or form data.
How:   Form bodies (application/x-www-form-urlencoded, multipart/form-data)
       go through Starlette's form parser; anything else is read as JSON.
       An empty body validates as `{}` so that missing fields are reported
       by the service presence check ("Missing required fields").

A body that is not valid JSON, is not an object, or has values of the
wrong type raises ValidationError (400) instead of FastAPI's 422.
"""

from typing import Any, Callable, Coroutine, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from irenet.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

INVALID_BODY = "Invalid request body"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_raw(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # Empty form values count as absent, like empty JSON strings
        return {key: value for key, value in form.items() if value != ""}

    body = await request.body()
    if not body.strip():
        return {}
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError(message=INVALID_BODY, context={"reason": str(e)})


def parsed_body(schema: Type[SchemaT]) -> Callable[[Request], Coroutine[Any, Any, SchemaT]]:
    """
    Build a dependency returning the request body as `schema`.

    Example usage in a route:
        @router.post("/users")
        async def create_user(payload: UserCreate = Depends(parsed_body(UserCreate))):
            ...
    """

    async def dependency(request: Request) -> SchemaT:
        raw = await _read_raw(request)
        try:
            return schema.model_validate(raw)
        except SchemaValidationError as e:
            raise ValidationError(
                message=INVALID_BODY,
                context={"errors": e.errors(include_url=False, include_context=False)},
            )

    return dependency
