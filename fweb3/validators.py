"""
Inbound request checks and upstream envelope diagnostics
"""
import json
import logging
from typing import Optional

from fastapi import Request

from fweb3.config import Settings, settings as default_settings
from fweb3.exceptions import (
    MissingApiKeyError,
    MissingParamsError,
    MissingRequestError,
    UnsupportedMethodError,
)
from fweb3.models import ExplorerResponse

logger = logging.getLogger(__name__)


def validate_request(request: Optional[Request], settings: Optional[Settings] = None) -> bool:
    """
    Check an inbound game-state request before any upstream call.

    Checks run in a fixed order (request, method, wallet param, api key);
    the first failure is raised.
    """
    settings = settings or default_settings
    if request is None:
        raise MissingRequestError()
    if request.method != "GET":
        raise UnsupportedMethodError()
    if not request.query_params.get("wallet_address"):
        raise MissingParamsError()
    if not settings.POLYGON_API_KEY:
        raise MissingApiKeyError()
    return True


def check_status(response: ExplorerResponse, api_call: str, settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    if not settings.DEBUG or response.is_ok:
        return
    result = response.result
    if isinstance(result, list):
        result = [tx.model_dump(by_alias=True) for tx in result]
    payload = json.dumps(
        {"status": response.status, "message": response.message, "result": result},
        indent=2,
        default=str,
    )
    logger.debug(f"Bad Polygon API Response: {api_call}\n{payload}")
