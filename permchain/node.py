import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .block import Block
from .chain import Chain
from .errors import UnauthorizedValidator
from .hashchain import HashChain
from .ledger import ExecutionReport, Ledger
from .producer import BlockProducer
from .tx import Transaction
from .validators import ValidatorRegistry
from .wallet import TokenLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitResult:
    status: str
    reason: Optional[str] = None
    report: Optional[ExecutionReport] = None
    block: Optional[Block] = None

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "reason": self.reason,
            "results": [r.to_dict() for r in self.report.results] if self.report else [],
            "block": self.block.to_dict() if self.block else None,
        }


class Node:
    """One process's ledger, validator set, token ledger and chain.

    ``submit`` generates and appends the block for a batch before executing
    it, all under a single writer lock. A batch is only executed once its
    block is on the chain, so a block rejected against a moved tail leaves
    the account balances untouched.
    """

    def __init__(
        self,
        accounts: Optional[Mapping[str, object]] = None,
        validators: Optional[Iterable[str]] = None,
        reward: Optional[int] = None,
        hash_scope: Optional[str] = None,
    ) -> None:
        self.hasher = HashChain(hash_scope)
        self.ledger = Ledger(accounts)
        self.registry = ValidatorRegistry(validators)
        self.tokens = TokenLedger()
        self.producer = BlockProducer(self.registry, self.hasher, reward)
        self.chain = Chain(self.hasher, self.tokens)
        self._lock = threading.Lock()

    def submit(self, transactions: Iterable[Transaction], validator: str, data: str = "") -> SubmitResult:
        txs = tuple(transactions)
        with self._lock:
            if not self.registry.is_authorized(validator):
                logger.warning("batch of %d transactions dropped: validator %r not authorized", len(txs), validator)
                return SubmitResult("unauthorized", UnauthorizedValidator.reason)
            tail = self.chain.tail
            block = self.producer.generate(tail, txs, validator, data)
            status, reason = self.chain.add_block(block, expected_tail=tail.hash)
            if status != "accepted":
                return SubmitResult(status, reason, None, block)
            report = self.ledger.execute(txs, label=data)
        return SubmitResult(status, reason, report, block)

    def snapshot(self) -> dict:
        return {
            "chain": self.chain.dump_chain(),
            "balances": {k: str(v) for k, v in self.ledger.balances().items()},
            "wallets": self.tokens.wallets(),
        }
