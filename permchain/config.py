import json
import os
from decimal import Decimal
from typing import Dict, FrozenSet

from .utils import parse_decimal

HASH_SCOPES = ("header", "full")

BLOCK_REWARD = int(os.getenv("PERMCHAIN_BLOCK_REWARD", "1"))
VALIDATORS = os.getenv("PERMCHAIN_VALIDATORS", "validator1,validator2,validator3")
GENESIS_ACCOUNTS = os.getenv(
    "PERMCHAIN_GENESIS_ACCOUNTS", '{"Alice": "100", "Bob": "50", "Charlie": "20"}'
)
GENESIS_DATA = os.getenv("PERMCHAIN_GENESIS_DATA", "Genesis Block")
HASH_SCOPE = os.getenv("PERMCHAIN_HASH_SCOPE", "header").strip().lower()
LOG_LEVEL = os.getenv("PERMCHAIN_LOG_LEVEL", "WARNING").strip().upper()

if BLOCK_REWARD < 0:
    raise RuntimeError("PERMCHAIN_BLOCK_REWARD must be >= 0")
if HASH_SCOPE not in HASH_SCOPES:
    raise RuntimeError(f"PERMCHAIN_HASH_SCOPE must be one of {', '.join(HASH_SCOPES)}")


def validator_ids(raw: str = None) -> FrozenSet[str]:
    raw = VALIDATORS if raw is None else raw
    return frozenset(v.strip() for v in raw.split(",") if v.strip())


def genesis_accounts(raw: str = None) -> Dict[str, Decimal]:
    raw = GENESIS_ACCOUNTS if raw is None else raw
    try:
        alloc = json.loads(raw)
    except Exception as exc:
        raise RuntimeError("invalid genesis accounts") from exc
    if not isinstance(alloc, dict):
        raise RuntimeError("invalid genesis accounts format")
    accounts: Dict[str, Decimal] = {}
    for account_id, amount in alloc.items():
        try:
            balance = parse_decimal(amount)
        except ValueError as exc:
            raise RuntimeError(f"invalid balance for {account_id!r}") from exc
        if balance < 0:
            raise RuntimeError(f"negative balance for {account_id!r}")
        accounts[str(account_id)] = balance
    return accounts
