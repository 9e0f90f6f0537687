import json
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any


def json_dumps(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"))


def now_ts() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str)) and not isinstance(value, bool):
        try:
            amount = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"invalid amount: {value!r}") from exc
    elif isinstance(value, float):
        amount = Decimal(str(value))
    else:
        raise ValueError(f"invalid amount type: {type(value).__name__}")
    if not amount.is_finite():
        raise ValueError(f"invalid amount: {value!r}")
    return amount


def format_decimal(amount: Decimal) -> str:
    return f"{amount:.2f}"
