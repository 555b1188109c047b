# tasks.py
from typing import Iterable, List, Optional

from fweb3.config import GameConstants
from fweb3.models import Transaction

Transactions = Optional[Iterable[Transaction]]


def _addr(address: Optional[str]) -> str:
    return (address or "").lower()


def _amount(tx: Transaction) -> Optional[int]:
    if not tx.value:
        return None
    try:
        return int(tx.value)
    except ValueError:
        return None


def _txs(txs: Transactions) -> List[Transaction]:
    return list(txs or [])


def has_used_fweb3_faucet(txs: Transactions, constants: GameConstants) -> bool:
    return any(_addr(tx.to) in constants.faucet_addresses for tx in _txs(txs))


def has_used_matic_faucet(txs: Transactions, constants: GameConstants) -> bool:
    return any(_addr(tx.from_address) in constants.faucet_addresses for tx in _txs(txs))


def has_swapped_tokens(txs: Transactions, constants: GameConstants) -> bool:
    return any(_addr(tx.to) == constants.swap_router_address for tx in _txs(txs))


def has_deployed_contract(txs: Transactions) -> bool:
    # Contract creations have no recipient
    return any(not tx.to for tx in _txs(txs))


def has_voted_in_poll(txs: Transactions, constants: GameConstants) -> bool:
    return any(_addr(tx.to) == constants.poll_address for tx in _txs(txs))


def has_sent_tokens(txs: Transactions, wallet_address: str, constants: GameConstants) -> bool:
    wallet = _addr(wallet_address)
    for tx in _txs(txs):
        amount = _amount(tx)
        if amount is None or _addr(tx.from_address) != wallet:
            continue
        if amount >= constants.sent_tokens_threshold:
            return True
    return False


def has_burned_tokens(txs: Transactions, wallet_address: str, constants: GameConstants) -> bool:
    wallet = _addr(wallet_address)
    for tx in _txs(txs):
        amount = _amount(tx)
        if amount is None or _addr(tx.from_address) != wallet:
            continue
        if _addr(tx.to) == constants.burn_address and amount > 0:
            return True
    return False


def has_minted_nft(txs: Transactions, constants: GameConstants) -> bool:
    return first_mint(txs, constants) is not None


def first_mint(txs: Transactions, constants: GameConstants) -> Optional[Transaction]:
    """
    Return the first transfer minted from the genesis address, if any.
    Used for both the game NFT and the trophy collection.
    """
    for tx in _txs(txs):
        if _addr(tx.from_address) == constants.genesis_address:
            return tx
    return None
