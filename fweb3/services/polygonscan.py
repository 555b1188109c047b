"""
Polygonscan data fetching service
Thin async wrappers over the explorer's account module. No paging, no retries.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import aiohttp

from fweb3.config import Settings, settings as default_settings
from fweb3.models import ExplorerResponse

logger = logging.getLogger(__name__)


class PolygonScanClient:
    """
    Fetches the raw envelopes the quest checks need:
    - wallet (native) transactions
    - fweb3 ERC20 transfers
    - game NFT and trophy transfers
    - fweb3 token balance
    """

    def __init__(self, session: aiohttp.ClientSession, settings: Optional[Settings] = None):
        self.session = session
        self.settings = settings or default_settings

    async def _get(self, params: Dict[str, str]) -> ExplorerResponse:
        query = {
            "module": "account",
            "apikey": self.settings.POLYGON_API_KEY or "",
            **params,
        }
        logger.debug(f"[polygonscan] {query['action']} for {query['address']}")
        async with self.session.get(self.settings.POLYGON_API_URL, params=query) as resp:
            resp.raise_for_status()
            data = await resp.json(content_type=None)
        return ExplorerResponse.model_validate(data)

    async def fetch_wallet_txs(self, wallet_address: str) -> ExplorerResponse:
        return await self._get({
            "action": "txlist",
            "address": wallet_address,
            "sort": "desc",
        })

    async def fetch_erc20_txs(self, wallet_address: str) -> ExplorerResponse:
        return await self._get({
            "action": "tokentx",
            "address": wallet_address,
            "contractaddress": self.settings.FWEB3_TOKEN_ADDRESS,
            "sort": "desc",
        })

    async def fetch_nfts_txs(self, wallet_address: str) -> ExplorerResponse:
        return await self._get({
            "action": "tokennfttx",
            "address": wallet_address,
            "contractaddress": self.settings.FWEB3_NFT_ADDRESS,
            "sort": "desc",
        })

    async def fetch_trophy_txs(self, wallet_address: str) -> ExplorerResponse:
        return await self._get({
            "action": "tokennfttx",
            "address": wallet_address,
            "contractaddress": self.settings.FWEB3_TROPHY_ADDRESS,
            "sort": "desc",
        })

    async def fetch_wallet_token_balance(self, wallet_address: str) -> ExplorerResponse:
        """Token balance, converted from base units to whole tokens."""
        response = await self._get({
            "action": "tokenbalance",
            "address": wallet_address,
            "contractaddress": self.settings.FWEB3_TOKEN_ADDRESS,
            "tag": "latest",
        })
        raw = response.balance
        if raw and raw.isdigit():
            whole = int(raw) // (10 ** self.settings.FWEB3_TOKEN_DECIMALS)
            response = response.model_copy(update={"result": str(whole)})
        return response


@asynccontextmanager
async def open_client(settings: Optional[Settings] = None) -> AsyncIterator[PolygonScanClient]:
    settings = settings or default_settings
    timeout = aiohttp.ClientTimeout(total=settings.HTTP_TIMEOUT)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield PolygonScanClient(session, settings)
