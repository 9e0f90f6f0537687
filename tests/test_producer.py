import pytest

from permchain.chain import create_genesis
from permchain.errors import UnauthorizedValidator
from permchain.hashchain import HashChain
from permchain.producer import BlockProducer
from permchain.tx import create_transaction
from permchain.validators import ValidatorRegistry


def _producer(**kwargs):
    return BlockProducer(ValidatorRegistry(["validator1"]), HashChain(), **kwargs)


def test_generate_links_to_previous():
    producer = _producer()
    genesis = create_genesis(producer.hasher)
    txs = [create_transaction("Alice", "Bob", 10)]
    block = producer.generate(genesis, txs, "validator1")
    assert block.index == 1
    assert block.prev_hash == genesis.hash
    assert block.transactions == tuple(txs)
    assert block.validator == "validator1"
    assert block.reward == 1
    assert block.hash == producer.hasher.compute(block)
    assert producer.hasher.is_valid(block, genesis)


def test_unauthorized_validator_produces_no_block():
    producer = _producer()
    genesis = create_genesis(producer.hasher)
    with pytest.raises(UnauthorizedValidator):
        producer.generate(genesis, [], "validator9")


def test_reward_override_and_config(load_config_module):
    genesis = create_genesis(HashChain())
    assert _producer(reward=7).generate(genesis, [], "validator1").reward == 7
    load_config_module(block_reward="3")
    assert _producer().generate(genesis, [], "validator1").reward == 3
    with pytest.raises(ValueError):
        _producer(reward=-1)
