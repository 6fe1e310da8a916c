"""
Function-style entry point: `handler(event, context)` takes the Alexa request
envelope as a dict and returns the response envelope as a dict.

Settings are loaded on first use and reused by warm invocations. Errors
propagate so the invocation fails.
"""
from typing import Any, Dict

from gamerelease.core.config import get_settings
from gamerelease.models.schemas import AlexaRequest
from gamerelease.services.dispatcher import dispatch
from gamerelease.services.logger import configure_logging, get_logger

log = get_logger(__name__)


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    req = AlexaRequest.model_validate(event)
    log.info(f"Invocation {req.request.request_id or '-'} type={req.request.type}")
    reply = dispatch(req, settings)
    return reply.to_alexa().model_dump(by_alias=True)
