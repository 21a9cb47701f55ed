"""
Server Time Endpoint Module.

Defines the single `/` route. Every request gets the current server time
in RFC 822 (numeric zone) format together with a fixed greeting, as JSON.
Neither the HTTP method nor the path below `/` is checked; every request
that reaches the router is answered the same way.
"""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from servertime.models.service_result import ServiceResult
from servertime.utils.timefmt import current_time

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(tags=["servertime"])


def encode_result(result: BaseModel) -> bytes:
    """Serialize a response record to compact UTF-8 JSON."""
    return result.model_dump_json().encode("utf-8")


def server_time() -> Response:
    """
    Report the current server time.

    Returns a JSON body with:
    - `FormattedTime`: current time as `DD Mon YY HH:MM +ZZZZ`.
    - `Greeting`: the static string `"Hi there"`.

    If the record cannot be serialized, responds with status 500 and the
    error text as a plain-text body.
    """
    result = ServiceResult(FormattedTime=current_time())

    try:
        body = encode_result(result)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.exception("Failed to serialize %s", type(result).__name__)
        return PlainTextResponse(str(e), status_code=500)

    logger.debug("Served server time %s", result.FormattedTime)
    return Response(content=body, media_type="application/json")


# operationId must be unique per method in the schema
for method in ALL_METHODS:
    router.add_api_route(
        "/",
        server_time,
        methods=[method],
        operation_id=f"server_time_{method.lower()}",
        summary="Server Time",
        response_description="Current server time and a greeting",
    )

router.add_api_route("/{path:path}", server_time, methods=ALL_METHODS, include_in_schema=False)
