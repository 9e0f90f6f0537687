import logging
import threading
from typing import List, Optional, Tuple

from . import config
from .block import Block
from .errors import STALE_TAIL, InvalidBlock
from .hashchain import HashChain
from .wallet import TokenLedger

logger = logging.getLogger(__name__)


def create_genesis(hasher: HashChain, data: Optional[str] = None) -> Block:
    label = config.GENESIS_DATA if data is None else data
    return hasher.seal(Block.build(index=0, prev_hash="", data=label))


class Chain:
    """Append-only sequence of accepted blocks.

    Appends go through ``add_block``, which validates the candidate against
    the current tail and credits the block's validator on acceptance.
    """

    def __init__(
        self,
        hasher: Optional[HashChain] = None,
        tokens: Optional[TokenLedger] = None,
        genesis: Optional[Block] = None,
    ) -> None:
        self.hasher = hasher or HashChain()
        self.tokens = tokens if tokens is not None else TokenLedger()
        self._lock = threading.Lock()
        if genesis is None:
            genesis = create_genesis(self.hasher)
        elif not genesis.is_genesis or self.hasher.compute(genesis) != genesis.hash:
            raise InvalidBlock("invalid genesis block")
        self._blocks: List[Block] = [genesis]
        logger.info("genesis block %s", genesis.hash)

    @property
    def genesis(self) -> Block:
        return self._blocks[0]

    @property
    def tail(self) -> Block:
        with self._lock:
            return self._blocks[-1]

    @property
    def height(self) -> int:
        with self._lock:
            return self._blocks[-1].index

    def __len__(self) -> int:
        return len(self._blocks)

    def blocks(self) -> Tuple[Block, ...]:
        with self._lock:
            return tuple(self._blocks)

    def get_block(self, index: int) -> Optional[Block]:
        with self._lock:
            if 0 <= index < len(self._blocks):
                return self._blocks[index]
        return None

    def add_block(self, block: Block, expected_tail: Optional[str] = None) -> Tuple[str, Optional[str]]:
        with self._lock:
            tail = self._blocks[-1]
            if expected_tail is not None and expected_tail != tail.hash:
                logger.warning("block %d built on stale tail %s", block.index, expected_tail[:16])
                return ("stale", STALE_TAIL)
            reason = self.hasher.check(block, tail)
            if reason:
                logger.warning("rejected block %d: %s", block.index, reason)
                return ("invalid", reason)
            self._blocks.append(block)
            if block.validator:
                self.tokens.credit(block.validator, block.reward)
        logger.info("block %d added by %s: %s", block.index, block.validator or "-", block.hash)
        return ("accepted", None)

    def append(self, block: Block) -> bool:
        status, _ = self.add_block(block)
        return status == "accepted"

    def require_append(self, block: Block) -> None:
        status, reason = self.add_block(block)
        if status != "accepted":
            raise InvalidBlock(f"block {block.index} rejected: {reason}", reason=reason)

    def verify(self) -> bool:
        return self.hasher.verify_chain(self.blocks()) is None

    def dump_chain(self) -> List[dict]:
        return [block.to_dict() for block in self.blocks()]
