# routers.py
import logging
from datetime import datetime

import aiohttp
from fastapi import APIRouter, HTTPException, Request

from fweb3 import __version__
from fweb3.exceptions import RequestValidationError
from fweb3.game_state import wallet_game_state
from fweb3.services.polygonscan import open_client
from fweb3.validators import validate_request

logger = logging.getLogger(__name__)

api_router = APIRouter()


@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
    }


# Every verb is routed here so the validator can reject non-GET requests itself
@api_router.api_route("/polygon", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def get_game_state(request: Request):
    """Get quest progress for ?wallet_address="""
    try:
        validate_request(request)
    except RequestValidationError as e:
        raise HTTPException(e.status_code, str(e))

    wallet_address = request.query_params["wallet_address"]
    try:
        async with open_client() as client:
            state = await wallet_game_state(wallet_address, client)
    except aiohttp.ClientError as e:
        logger.error(f"Polygon API request failed for {wallet_address}: {e}")
        raise HTTPException(502, f"Error fetching wallet data: {e}")

    return state.model_dump(by_alias=True)
