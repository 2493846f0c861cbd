"""
Edge-function entry point for the omikuji service.

Deploys the same routes as the standalone server behind an API Gateway
(HTTP API v2 or REST API v1) style runtime:

- GET /             -> HTML page with a fresh draw
- GET /api/omikuji  -> {"result": "<label>"}
- anything else     -> 404 "Not Found"
"""

import random
from typing import Any, Dict, Optional

from .core.config import settings
from .core.logger import logger
from .services.fortune_service import RandomSource
from .services.omikuji_service import handle


def get_request_path(event: Dict[str, Any]) -> str:
    """Reads the request path from an HTTP API (v2) or REST API (v1) event."""
    return event.get("rawPath") or event.get("path") or "/"


def handler(event: Dict[str, Any], context: Any, rand: Optional[RandomSource] = None) -> Dict[str, Any]:
    """
    Main edge-function entry point.

    Args:
        event (dict): API Gateway request
        context: Runtime context (unused)
        rand: Uniform [0, 1) source, the module-level generator by default

    Returns:
        dict: API Gateway compatible response
    """
    path = get_request_path(event)
    envelope = handle(path, settings.fortune_labels_list, rand or random.random)
    logger.info(f'edge path="{path}" status={envelope.status_code}')
    return {
        "statusCode": envelope.status_code,
        "headers": envelope.headers,
        "body": envelope.body,
    }
