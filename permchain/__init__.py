from .block import Block
from .chain import Chain
from .hashchain import HashChain
from .ledger import Ledger
from .node import Node
from .producer import BlockProducer
from .tx import Transaction
from .validators import ValidatorRegistry
from .wallet import TokenLedger, Wallet

__all__ = [
    "Block",
    "BlockProducer",
    "Chain",
    "HashChain",
    "Ledger",
    "Node",
    "TokenLedger",
    "Transaction",
    "ValidatorRegistry",
    "Wallet",
]
