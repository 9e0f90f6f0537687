"""Block hashing and linkage checks.

The default ``header`` scope hashes ``index``, ``timestamp``, ``data`` and
``prev_hash`` only, so a block's transactions, validator and reward can be
altered without changing its hash. The ``full`` scope also commits to the
merkle root of the transaction ids, the validator and the reward.
"""

import logging
from typing import Optional, Sequence

from . import config
from .block import Block
from .crypto import sha256_text
from .errors import BAD_HASH, BAD_INDEX, BAD_PREV_HASH
from .merkle import merkle_root

logger = logging.getLogger(__name__)


class HashChain:
    def __init__(self, scope: Optional[str] = None) -> None:
        scope = (scope or config.HASH_SCOPE).strip().lower()
        if scope not in config.HASH_SCOPES:
            raise ValueError(f"unknown hash scope {scope!r}")
        self.scope = scope

    def _record(self, block: Block) -> str:
        record = f"{block.index}{block.timestamp}{block.data}{block.prev_hash}"
        if self.scope == "full":
            record += f"{merkle_root(block.txids)}{block.validator}{block.reward}"
        return record

    def compute(self, block: Block) -> str:
        return sha256_text(self._record(block))

    def seal(self, block: Block) -> Block:
        return block.with_hash(self.compute(block))

    def check(self, candidate: Block, predecessor: Block) -> Optional[str]:
        """Reason code for the first failed check, or None when linked correctly."""
        if predecessor.index + 1 != candidate.index:
            return BAD_INDEX
        if predecessor.hash != candidate.prev_hash:
            return BAD_PREV_HASH
        if self.compute(candidate) != candidate.hash:
            return BAD_HASH
        return None

    def is_valid(self, candidate: Block, predecessor: Block) -> bool:
        return self.check(candidate, predecessor) is None

    def verify_chain(self, blocks: Sequence[Block]) -> Optional[int]:
        """Position of the first bad block in ``blocks``, or None."""
        if not blocks:
            return None
        genesis = blocks[0]
        if not genesis.is_genesis or self.compute(genesis) != genesis.hash:
            return 0
        for pos in range(1, len(blocks)):
            reason = self.check(blocks[pos], blocks[pos - 1])
            if reason:
                logger.debug("block %d fails verification: %s", blocks[pos].index, reason)
                return pos
        return None
