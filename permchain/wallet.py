"""Validator token balances, kept apart from account balances."""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import UnknownWallet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wallet:
    owner: str
    tokens: int = 0

    def to_dict(self) -> Dict[str, object]:
        return {"owner": self.owner, "tokens": self.tokens}


def _check_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError("token amount must be an integer")
    if amount < 0:
        raise ValueError("token amount must be >= 0")


class TokenLedger:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._wallets: Dict[str, Wallet] = {}

    def _credit(self, owner: str, amount: int) -> None:
        current = self._wallets.get(owner)
        tokens = current.tokens if current else 0
        self._wallets[owner] = Wallet(owner, tokens + amount)

    def credit(self, owner: str, amount: int) -> None:
        _check_amount(amount)
        with self._lock:
            self._credit(owner, amount)
        logger.debug("credited %d tokens to %s", amount, owner)

    def transfer(self, sender: str, recipient: str, amount: int) -> bool:
        _check_amount(amount)
        with self._lock:
            wallet = self._wallets.get(sender)
            if wallet is None or wallet.tokens < amount:
                logger.info(
                    "transfer of %d tokens from %s to %s failed: insufficient balance or invalid wallet",
                    amount,
                    sender,
                    recipient,
                )
                return False
            self._wallets[sender] = Wallet(sender, wallet.tokens - amount)
            self._credit(recipient, amount)
        logger.info("transferred %d tokens from %s to %s", amount, sender, recipient)
        return True

    def wallet(self, owner: str) -> Optional[Wallet]:
        with self._lock:
            return self._wallets.get(owner)

    def require_wallet(self, owner: str) -> Wallet:
        wallet = self.wallet(owner)
        if wallet is None:
            raise UnknownWallet(owner)
        return wallet

    def balance(self, owner: str) -> int:
        wallet = self.wallet(owner)
        return wallet.tokens if wallet else 0

    def wallets(self) -> Dict[str, int]:
        with self._lock:
            return {owner: w.tokens for owner, w in self._wallets.items()}

    def total(self) -> int:
        with self._lock:
            return sum(w.tokens for w in self._wallets.values())
