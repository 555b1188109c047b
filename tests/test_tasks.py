"""Tests for the pure quest task checks."""

from __future__ import annotations

import pytest

from fweb3 import tasks
from fweb3.models import Transaction

from conftest import TOKEN, WALLET

OTHER = "0x9999999999999999999999999999999999999999"


def tx(**fields) -> Transaction:
    fields.setdefault("from", OTHER)
    fields.setdefault("to", OTHER)
    return Transaction.model_validate(fields)


@pytest.mark.parametrize("txs", [None, []])
def test_empty_or_missing_lists_are_false(txs, constants):
    assert tasks.has_used_fweb3_faucet(txs, constants) is False
    assert tasks.has_used_matic_faucet(txs, constants) is False
    assert tasks.has_swapped_tokens(txs, constants) is False
    assert tasks.has_deployed_contract(txs) is False
    assert tasks.has_voted_in_poll(txs, constants) is False
    assert tasks.has_sent_tokens(txs, WALLET, constants) is False
    assert tasks.has_burned_tokens(txs, WALLET, constants) is False
    assert tasks.has_minted_nft(txs, constants) is False
    assert tasks.first_mint(txs, constants) is None


def test_faucet_checks_ignore_address_case(constants):
    faucet = constants.faucet_addresses[0]
    assert tasks.has_used_fweb3_faucet([tx(to=faucet.upper().replace("0X", "0x"))], constants)
    assert tasks.has_used_fweb3_faucet([tx(to=constants.faucet_addresses[1].upper())], constants)
    assert tasks.has_used_matic_faucet([tx(**{"from": constants.faucet_addresses[1].upper()})], constants)
    assert not tasks.has_used_matic_faucet([tx(to=faucet)], constants)
    assert not tasks.has_used_fweb3_faucet([tx(**{"from": faucet})], constants)


def test_swap_deploy_and_poll(constants):
    assert tasks.has_swapped_tokens([tx(to=constants.swap_router_address.upper())], constants)
    assert not tasks.has_swapped_tokens([tx()], constants)
    assert tasks.has_deployed_contract([tx(), tx(to="")])
    assert not tasks.has_deployed_contract([tx()])
    assert tasks.has_voted_in_poll([tx(to=constants.poll_address)], constants)
    assert not tasks.has_voted_in_poll([tx(to=constants.swap_router_address)], constants)


def test_sent_tokens_threshold_boundary(constants):
    sender = WALLET.upper().replace("0X", "0x")
    assert not tasks.has_sent_tokens([tx(**{"from": sender, "value": str(99 * TOKEN)})], WALLET, constants)
    assert tasks.has_sent_tokens([tx(**{"from": sender, "value": str(100 * TOKEN)})], WALLET, constants)
    # One base unit below the threshold must not round up
    assert not tasks.has_sent_tokens([tx(**{"from": WALLET, "value": str(100 * TOKEN - 1)})], WALLET, constants)


def test_sent_tokens_requires_wallet_sender_and_value(constants):
    assert not tasks.has_sent_tokens([tx(value=str(500 * TOKEN))], WALLET, constants)
    assert not tasks.has_sent_tokens([tx(**{"from": WALLET})], WALLET, constants)
    assert not tasks.has_sent_tokens([tx(**{"from": WALLET, "value": ""})], WALLET, constants)
    assert not tasks.has_sent_tokens([tx(**{"from": WALLET, "value": "lots"})], WALLET, constants)


def test_burned_tokens(constants):
    burn = constants.burn_address
    assert tasks.has_burned_tokens([tx(**{"from": WALLET, "to": burn.upper(), "value": "1"})], WALLET, constants)
    assert not tasks.has_burned_tokens([tx(**{"from": WALLET, "to": burn, "value": "0"})], WALLET, constants)
    assert not tasks.has_burned_tokens([tx(**{"from": WALLET, "to": OTHER, "value": "5"})], WALLET, constants)
    assert not tasks.has_burned_tokens([tx(**{"from": OTHER, "to": burn, "value": "5"})], WALLET, constants)


def test_first_mint_returns_first_match(constants):
    genesis = constants.genesis_address
    txs = [
        tx(tokenID="1"),
        tx(**{"from": genesis, "tokenID": "7"}),
        tx(**{"from": genesis, "tokenID": "9"}),
    ]
    assert tasks.first_mint(txs, constants).token_id == "7"
    assert tasks.has_minted_nft(txs, constants)
    assert not tasks.has_minted_nft([tx(tokenID="1")], constants)
