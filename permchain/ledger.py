"""Account balances and batch execution.

Each transaction in a batch succeeds or fails on its own; a failed
transaction leaves both accounts untouched and the rest of the batch
still runs.
"""

import logging
import threading
from dataclasses import dataclass
from decimal import MAX_PREC, Decimal, Inexact, localcontext
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from . import config
from .errors import INEXACT_AMOUNT, INSUFFICIENT_BALANCE, UNKNOWN_ACCOUNT, UnknownAccount
from .tx import Transaction
from .utils import parse_decimal

logger = logging.getLogger(__name__)


@dataclass
class Account:
    id: str
    balance: Decimal


@dataclass(frozen=True)
class TxResult:
    tx: Transaction
    ok: bool
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        data = self.tx.to_dict()
        data["ok"] = self.ok
        if self.reason:
            data["reason"] = self.reason
        return data


@dataclass(frozen=True)
class ExecutionReport:
    results: Tuple[TxResult, ...]
    balances: Mapping[str, Decimal]
    label: str = ""

    @property
    def succeeded(self) -> List[TxResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[TxResult]:
        return [r for r in self.results if not r.ok]

    @property
    def all_ok(self) -> bool:
        return all(r.ok for r in self.results)


class Ledger:
    def __init__(self, accounts: Optional[Mapping[str, object]] = None) -> None:
        if accounts is None:
            accounts = config.genesis_accounts()
        self._lock = threading.Lock()
        self._accounts: Dict[str, Account] = {}
        for account_id, balance in accounts.items():
            self.open_account(account_id, balance)

    def open_account(self, account_id: str, balance=0) -> Account:
        amount = parse_decimal(balance)
        if amount < 0:
            raise ValueError("balance must be >= 0")
        with self._lock:
            if account_id in self._accounts:
                raise ValueError(f"account {account_id!r} already exists")
            account = Account(id=account_id, balance=amount)
            self._accounts[account_id] = account
        return Account(id=account.id, balance=account.balance)

    def _apply(self, tx: Transaction) -> TxResult:
        sender = self._accounts.get(tx.sender)
        recipient = self._accounts.get(tx.recipient)
        if sender is None or recipient is None:
            return TxResult(tx, False, UNKNOWN_ACCOUNT)
        if sender.balance < tx.amount:
            return TxResult(tx, False, INSUFFICIENT_BALANCE)
        if sender is recipient:
            return TxResult(tx, True)
        # a rounded debit or credit would create or destroy value
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                debited = sender.balance - tx.amount
                credited = recipient.balance + tx.amount
            except Inexact:
                return TxResult(tx, False, INEXACT_AMOUNT)
        sender.balance = debited
        recipient.balance = credited
        return TxResult(tx, True)

    def execute(self, transactions: Iterable[Transaction], label: str = "") -> ExecutionReport:
        results = []
        if label:
            logger.debug("executing batch: %s", label)
        with self._lock:
            for tx in transactions:
                result = self._apply(tx)
                if result.ok:
                    logger.debug("transaction successful: %s", tx)
                else:
                    logger.debug("transaction failed (%s): %s", result.reason, tx)
                results.append(result)
            balances = self._balances()
        return ExecutionReport(results=tuple(results), balances=balances, label=label)

    def _balances(self) -> Dict[str, Decimal]:
        return {account_id: acc.balance for account_id, acc in self._accounts.items()}

    def balance(self, account_id: str) -> Decimal:
        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                raise UnknownAccount(account_id)
            return account.balance

    def balances(self) -> Dict[str, Decimal]:
        with self._lock:
            return self._balances()

    def accounts(self) -> List[Account]:
        with self._lock:
            return [Account(id=a.id, balance=a.balance) for a in self._accounts.values()]

    def total(self) -> Decimal:
        with self._lock, localcontext() as ctx:
            ctx.prec = MAX_PREC
            return sum((a.balance for a in self._accounts.values()), Decimal(0))

    def __contains__(self, account_id: str) -> bool:
        return account_id in self._accounts
