import pytest

from permchain.errors import UnknownWallet
from permchain.wallet import TokenLedger, Wallet


def test_credit_creates_and_accumulates():
    tokens = TokenLedger()
    tokens.credit("validator1", 1)
    tokens.credit("validator1", 2)
    tokens.credit("idle", 0)
    assert tokens.balance("validator1") == 3
    assert tokens.wallet("idle") == Wallet("idle", 0)
    assert tokens.balance("nobody") == 0


def test_transfer_moves_exact_amount():
    tokens = TokenLedger()
    tokens.credit("Alice", 10)
    tokens.credit("Bob", 5)
    assert tokens.transfer("Alice", "Bob", 5)
    assert tokens.wallets() == {"Alice": 5, "Bob": 10}


def test_transfer_without_funds_is_noop():
    tokens = TokenLedger()
    tokens.credit("Alice", 3)
    assert not tokens.transfer("Alice", "Bob", 4)
    assert not tokens.transfer("Ghost", "Alice", 1)
    assert tokens.wallets() == {"Alice": 3}
    assert tokens.total() == 3


def test_transfer_to_new_wallet():
    tokens = TokenLedger()
    tokens.credit("Alice", 3)
    assert tokens.transfer("Alice", "Carol", 3)
    assert tokens.wallets() == {"Alice": 0, "Carol": 3}


@pytest.mark.parametrize("amount", [-1, 1.5, True])
def test_invalid_amounts(amount):
    tokens = TokenLedger()
    tokens.credit("Alice", 10)
    with pytest.raises(ValueError):
        tokens.credit("Alice", amount)
    with pytest.raises(ValueError):
        tokens.transfer("Alice", "Bob", amount)
    assert tokens.balance("Alice") == 10


def test_require_wallet():
    tokens = TokenLedger()
    with pytest.raises(UnknownWallet):
        tokens.require_wallet("Ghost")
    tokens.credit("Alice", 1)
    assert tokens.require_wallet("Alice").tokens == 1
    snap = tokens.wallets()
    snap["Alice"] = 99
    assert tokens.balance("Alice") == 1
