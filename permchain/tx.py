from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from .crypto import sha256
from .utils import json_dumps, parse_decimal


@dataclass(frozen=True)
class Transaction:
    sender: str
    recipient: str
    amount: Decimal

    def __post_init__(self) -> None:
        amount = parse_decimal(self.amount)
        if amount < 0:
            raise ValueError("amount must be >= 0")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "sender", str(self.sender))
        object.__setattr__(self, "recipient", str(self.recipient))

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.sender, "to": self.recipient, "amount": str(self.amount)}

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "Transaction":
        return Transaction(
            sender=str(data["from"]),
            recipient=str(data["to"]),
            amount=data["amount"],
        )

    @property
    def txid(self) -> str:
        return sha256(json_dumps(self.to_dict()).encode())

    def __str__(self) -> str:
        return f"{self.sender} -> {self.recipient} : {self.amount:.2f}"


def create_transaction(sender: str, recipient: str, amount) -> Transaction:
    return Transaction(sender=sender, recipient=recipient, amount=amount)
