from dataclasses import dataclass, field, replace
from typing import Iterable, List, Tuple

from .tx import Transaction
from .utils import now_ts


@dataclass(frozen=True)
class Block:
    index: int
    timestamp: str
    data: str = ""
    hash: str = ""
    prev_hash: str = ""
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)
    validator: str = ""
    reward: int = 0

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("index must be >= 0")
        if self.reward < 0:
            raise ValueError("reward must be >= 0")
        object.__setattr__(self, "transactions", tuple(self.transactions))

    @property
    def is_genesis(self) -> bool:
        return self.index == 0 and self.prev_hash == ""

    @property
    def txids(self) -> List[str]:
        return [tx.txid for tx in self.transactions]

    def with_hash(self, block_hash: str) -> "Block":
        return replace(self, hash=block_hash)

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "timestamp": self.timestamp,
            "data": self.data,
            "hash": self.hash,
            "prev_hash": self.prev_hash,
            "transactions": [tx.to_dict() for tx in self.transactions],
            "validator": self.validator,
            "reward": self.reward,
        }

    @staticmethod
    def from_dict(data: dict) -> "Block":
        return Block(
            index=int(data["index"]),
            timestamp=str(data["timestamp"]),
            data=str(data.get("data", "")),
            hash=str(data.get("hash", "")),
            prev_hash=str(data.get("prev_hash", "")),
            transactions=tuple(Transaction.from_dict(t) for t in data.get("transactions", [])),
            validator=str(data.get("validator", "")),
            reward=int(data.get("reward", 0)),
        )

    @staticmethod
    def build(
        index: int,
        prev_hash: str,
        txs: Iterable[Transaction] = (),
        validator: str = "",
        reward: int = 0,
        data: str = "",
    ) -> "Block":
        """Unhashed block stamped with the current time."""
        return Block(
            index=index,
            timestamp=now_ts(),
            data=data,
            prev_hash=prev_hash,
            transactions=tuple(txs),
            validator=validator,
            reward=reward,
        )

    def __str__(self) -> str:
        return (
            f"Block #{self.index} {self.hash[:16]} "
            f"prev={self.prev_hash[:16] or '-'} txs={len(self.transactions)} "
            f"validator={self.validator or '-'} reward={self.reward}"
        )
