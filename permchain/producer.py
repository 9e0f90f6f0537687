import logging
from typing import Iterable, Optional

from . import config
from .block import Block
from .errors import UnauthorizedValidator
from .hashchain import HashChain
from .tx import Transaction
from .validators import ValidatorRegistry

logger = logging.getLogger(__name__)


class BlockProducer:
    """Packages a transaction batch into a sealed candidate block.

    The producer neither executes transactions nor appends blocks; it only
    checks the validator against the registry, stamps the reward and
    computes the hash.
    """

    def __init__(
        self,
        registry: ValidatorRegistry,
        hasher: Optional[HashChain] = None,
        reward: Optional[int] = None,
    ) -> None:
        self.registry = registry
        self.hasher = hasher or HashChain()
        self._reward = reward
        if reward is not None and reward < 0:
            raise ValueError("reward must be >= 0")

    @property
    def reward(self) -> int:
        if self._reward is not None:
            return self._reward
        return config.BLOCK_REWARD

    def generate(
        self,
        previous: Block,
        transactions: Iterable[Transaction],
        validator: str,
        data: str = "",
    ) -> Block:
        if not self.registry.is_authorized(validator):
            logger.warning("rejecting block proposal from unauthorized validator %r", validator)
            raise UnauthorizedValidator(validator)
        block = Block.build(
            index=previous.index + 1,
            prev_hash=previous.hash,
            txs=transactions,
            validator=validator,
            reward=self.reward,
            data=data,
        )
        return self.hasher.seal(block)
