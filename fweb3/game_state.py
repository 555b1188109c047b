"""
Quest game state
Combines the explorer fetches and task checks into one record per wallet
"""

import asyncio
import logging
from typing import Optional

from fweb3.config import GameConstants, GAME_CONSTANTS
from fweb3.models import ERC20Tasks, GameTaskState, WalletTxTasks
from fweb3.services.polygonscan import PolygonScanClient
from fweb3.validators import check_status
from fweb3 import tasks

logger = logging.getLogger(__name__)


async def wallet_balance(wallet_address: str, client: PolygonScanClient) -> str:
    response = await client.fetch_wallet_token_balance(wallet_address)
    check_status(response, "walletTokenBalance")
    return response.balance or "0"


async def check_has_minted_nft(
    wallet_address: str,
    client: PolygonScanClient,
    constants: GameConstants = GAME_CONSTANTS,
) -> bool:
    response = await client.fetch_nfts_txs(wallet_address)
    check_status(response, "nftsTxs")
    return tasks.has_minted_nft(response.transactions, constants)


async def check_wallet_tx_completed_items(
    wallet_address: str,
    client: PolygonScanClient,
    constants: GameConstants = GAME_CONSTANTS,
) -> WalletTxTasks:
    response = await client.fetch_wallet_txs(wallet_address)
    check_status(response, "walletTxs")
    txs = response.transactions
    return WalletTxTasks(
        has_used_fweb3_faucet=tasks.has_used_fweb3_faucet(txs, constants),
        has_used_faucet=tasks.has_used_matic_faucet(txs, constants),
        has_swapped_tokens=tasks.has_swapped_tokens(txs, constants),
        has_deployed_contract=tasks.has_deployed_contract(txs),
        has_voted_in_poll=tasks.has_voted_in_poll(txs, constants),
    )


async def check_erc20_completed_items(
    wallet_address: str,
    client: PolygonScanClient,
    constants: GameConstants = GAME_CONSTANTS,
) -> ERC20Tasks:
    response = await client.fetch_erc20_txs(wallet_address)
    check_status(response, "erc20Txs")
    txs = response.transactions
    return ERC20Tasks(
        has_sent_tokens=tasks.has_sent_tokens(txs, wallet_address, constants),
        has_burned_tokens=tasks.has_burned_tokens(txs, wallet_address, constants),
    )


def _has_enough_tokens(token_balance: str, constants: GameConstants) -> bool:
    try:
        return int(token_balance) >= constants.min_token_balance
    except ValueError:
        return False


async def check_has_won_game(
    wallet_address: str,
    client: PolygonScanClient,
    constants: GameConstants = GAME_CONSTANTS,
) -> Optional[GameTaskState]:
    """
    Return the completed game record if the wallet holds a minted trophy.

    Returns None (not a record with has_won_game=False) when no trophy
    transfer originates from the genesis address.
    """
    response = await client.fetch_trophy_txs(wallet_address)
    check_status(response, "trophyTxs")
    token_balance = await wallet_balance(wallet_address, client)
    trophy = tasks.first_mint(response.transactions, constants)

    if trophy is None:
        return None

    won = dict(constants.won_game_state)
    return GameTaskState(
        has_enough_tokens=won["has_enough_tokens"],
        has_used_faucet=won["has_used_faucet"],
        has_used_fweb3_faucet=won["has_used_fweb3_faucet"],
        has_swapped_tokens=won["has_swapped_tokens"],
        has_deployed_contract=won["has_deployed_contract"],
        has_voted_in_poll=won["has_voted_in_poll"],
        has_sent_tokens=won["has_sent_tokens"],
        has_burned_tokens=won["has_burned_tokens"],
        has_minted_nft=won["has_minted_nft"],
        has_won_game=True,
        token_balance=token_balance,
        trophy_id=trophy.token_id,
    )


async def current_wallet_game_state(
    wallet_address: str,
    client: PolygonScanClient,
    constants: GameConstants = GAME_CONSTANTS,
) -> GameTaskState:
    """Fetch and evaluate every open quest task for a wallet."""
    wallet_tasks, erc20_tasks, token_balance, minted = await asyncio.gather(
        check_wallet_tx_completed_items(wallet_address, client, constants),
        check_erc20_completed_items(wallet_address, client, constants),
        wallet_balance(wallet_address, client),
        check_has_minted_nft(wallet_address, client, constants),
    )

    return GameTaskState(
        has_used_fweb3_faucet=wallet_tasks.has_used_fweb3_faucet,
        has_used_faucet=wallet_tasks.has_used_faucet,
        has_swapped_tokens=wallet_tasks.has_swapped_tokens,
        has_deployed_contract=wallet_tasks.has_deployed_contract,
        has_voted_in_poll=wallet_tasks.has_voted_in_poll,
        has_sent_tokens=erc20_tasks.has_sent_tokens,
        has_burned_tokens=erc20_tasks.has_burned_tokens,
        has_enough_tokens=_has_enough_tokens(token_balance, constants),
        has_minted_nft=minted,
        has_won_game=False,
        token_balance=token_balance,
        trophy_id=None,
    )


async def wallet_game_state(
    wallet_address: str,
    client: PolygonScanClient,
    constants: GameConstants = GAME_CONSTANTS,
) -> GameTaskState:
    won = await check_has_won_game(wallet_address, client, constants)
    if won is not None:
        logger.info(f"Wallet {wallet_address} has won the game (trophy {won.trophy_id})")
        return won
    return await current_wallet_game_state(wallet_address, client, constants)
