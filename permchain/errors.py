"""Failure taxonomy.

Every failure in the ledger core is local to one transaction, one block
proposal or one transfer. Most are reported as values (see
``ExecutionReport`` and ``Chain.add_block``); the classes here carry the
same reason codes for the call sites that raise.
"""

INSUFFICIENT_BALANCE = "insufficient_balance"
UNKNOWN_ACCOUNT = "unknown_account"
UNKNOWN_WALLET = "unknown_wallet"
UNAUTHORIZED_VALIDATOR = "unauthorized_validator"
BAD_INDEX = "bad_index"
BAD_PREV_HASH = "bad_prev_hash"
BAD_HASH = "bad_hash"
STALE_TAIL = "stale_tail"
INEXACT_AMOUNT = "inexact_amount"


class PermchainError(RuntimeError):
    reason = "error"

    def __init__(self, message: str = "", reason: str = "") -> None:
        if reason:
            self.reason = reason
        super().__init__(message or self.reason)


class InsufficientBalance(PermchainError):
    reason = INSUFFICIENT_BALANCE


class UnknownAccount(InsufficientBalance):
    reason = UNKNOWN_ACCOUNT

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"unknown account {account_id!r}")


class UnknownWallet(InsufficientBalance):
    reason = UNKNOWN_WALLET

    def __init__(self, owner: str) -> None:
        self.owner = owner
        super().__init__(f"no wallet for {owner!r}")


class UnauthorizedValidator(PermchainError):
    reason = UNAUTHORIZED_VALIDATOR

    def __init__(self, validator: str) -> None:
        self.validator = validator
        super().__init__(f"validator {validator!r} is not authorized")


class InvalidBlock(PermchainError):
    reason = BAD_HASH
