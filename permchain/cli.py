import argparse
import json
import logging
from typing import List

from . import config
from .node import Node
from .tx import Transaction, create_transaction
from .utils import format_decimal


def demo_transactions() -> List[Transaction]:
    return [
        create_transaction("Alice", "Bob", "10"),
        create_transaction("Bob", "Charlie", "5"),
    ]


def run_demo(validator: str = "validator1", hash_scope: str = None) -> dict:
    node = Node(hash_scope=hash_scope)
    result = node.submit(demo_transactions(), validator)
    if not result.accepted:
        raise SystemExit(f"Block rejected: {result.reason}")

    node.tokens.credit("Alice", 10)
    node.tokens.credit("Bob", 5)
    node.tokens.transfer("Alice", "Bob", 5)

    out = node.snapshot()
    out["balances"] = {k: format_decimal(v) for k, v in node.ledger.balances().items()}
    out["results"] = [r.to_dict() for r in result.report.results]
    out["valid"] = node.chain.verify()
    return out


def cmd_demo(args: argparse.Namespace) -> None:
    print(json.dumps(run_demo(args.validator, args.hash_scope), indent=2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="permchain")
    p.add_argument("--log-level", default=config.LOG_LEVEL)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="run the reference scenario and print the resulting state")
    s.add_argument("--validator", default="validator1")
    s.add_argument("--hash-scope", choices=list(config.HASH_SCOPES))
    s.set_defaults(func=cmd_demo)

    return p


def main(argv: List[str] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
