"""
Pytest fixtures for the quest validator. The explorer client is always mocked.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from fweb3.config import GAME_CONSTANTS, Settings
from fweb3.models import ExplorerResponse

WALLET = "0xAbC0000000000000000000000000000000000001"
TOKEN = 10 ** 18


def envelope(result=None, status: str = "1", message: str = "OK") -> ExplorerResponse:
    return ExplorerResponse.model_validate(
        {"status": status, "message": message, "result": result if result is not None else []}
    )


@pytest.fixture
def constants():
    return GAME_CONSTANTS


@pytest.fixture
def debug_settings():
    return Settings(POLYGON_API_KEY="test-key", DEBUG=True, _env_file=None)


@pytest.fixture
def make_client():
    """
    Build a mocked PolygonScanClient. Each keyword is the `result` list (or balance
    string) for that call; missing calls return an empty successful envelope.
    """

    def _make(wallet_txs=None, erc20_txs=None, nfts_txs=None, trophy_txs=None, balance="0"):
        client = AsyncMock()
        client.fetch_wallet_txs.return_value = envelope(wallet_txs)
        client.fetch_erc20_txs.return_value = envelope(erc20_txs)
        client.fetch_nfts_txs.return_value = envelope(nfts_txs)
        client.fetch_trophy_txs.return_value = envelope(trophy_txs)
        client.fetch_wallet_token_balance.return_value = envelope(balance)
        return client

    return _make
