from dataclasses import replace

import pytest

from permchain.block import Block
from permchain.chain import create_genesis
from permchain.crypto import is_digest, sha256_text
from permchain.hashchain import HashChain
from permchain.tx import create_transaction


def _child(hasher, parent, validator="validator1", txs=()):
    block = Block.build(parent.index + 1, parent.hash, txs, validator=validator, reward=1)
    return hasher.seal(block)


def test_compute_is_deterministic():
    hasher = HashChain("header")
    block = Block(index=3, timestamp="2024-01-01T00:00:00+00:00", data="x", prev_hash="ab" * 32)
    assert hasher.compute(block) == hasher.compute(block)
    assert is_digest(hasher.compute(block))


def test_header_record_matches_text_concat():
    hasher = HashChain("header")
    block = Block(index=0, timestamp="t0", data="Genesis Block", prev_hash="")
    assert hasher.compute(block) == sha256_text("0t0Genesis Block")


def test_linkage_checks():
    hasher = HashChain("header")
    genesis = create_genesis(hasher)
    child = _child(hasher, genesis)
    assert hasher.is_valid(child, genesis)

    assert hasher.check(replace(child, index=5), genesis) == "bad_index"
    assert hasher.check(replace(child, prev_hash="00" * 32), genesis) == "bad_prev_hash"
    assert hasher.check(replace(child, data="tampered"), genesis) == "bad_hash"


def test_header_scope_ignores_transactions_and_validator():
    hasher = HashChain("header")
    genesis = create_genesis(hasher)
    child = _child(hasher, genesis, txs=[create_transaction("Alice", "Bob", 10)])
    forged = replace(child, transactions=(create_transaction("Alice", "Mallory", 90),), validator="mallory")
    assert hasher.is_valid(forged, genesis)


def test_full_scope_detects_transaction_and_validator_tampering():
    hasher = HashChain("full")
    genesis = create_genesis(hasher)
    child = _child(hasher, genesis, txs=[create_transaction("Alice", "Bob", 10)])
    assert hasher.is_valid(child, genesis)
    forged_txs = replace(child, transactions=(create_transaction("Alice", "Mallory", 90),))
    assert hasher.check(forged_txs, genesis) == "bad_hash"
    assert hasher.check(replace(child, validator="mallory"), genesis) == "bad_hash"
    assert hasher.check(replace(child, reward=100), genesis) == "bad_hash"


def test_verify_chain_reports_first_bad_block():
    hasher = HashChain()
    genesis = create_genesis(hasher)
    b1 = _child(hasher, genesis)
    b2 = _child(hasher, b1)
    assert hasher.verify_chain([genesis, b1, b2]) is None
    assert hasher.verify_chain([genesis, replace(b1, timestamp="later"), b2]) == 1
    assert hasher.verify_chain([replace(genesis, data="other"), b1, b2]) == 0
    assert hasher.verify_chain([]) is None


def test_unknown_scope_rejected():
    with pytest.raises(ValueError):
        HashChain("everything")


def test_scope_from_config(load_config_module):
    load_config_module(hash_scope="full")
    assert HashChain().scope == "full"
