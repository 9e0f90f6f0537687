import pytest

from permchain.errors import UnauthorizedValidator
from permchain.validators import ValidatorRegistry


def test_membership():
    registry = ValidatorRegistry(["validator1", "validator2"])
    assert registry.is_authorized("validator1")
    assert "validator2" in registry
    assert not registry.is_authorized("validator3")
    assert not registry.is_authorized("")
    assert len(registry) == 2


def test_require():
    registry = ValidatorRegistry(["validator1"])
    registry.require("validator1")
    with pytest.raises(UnauthorizedValidator) as exc:
        registry.require("mallory")
    assert exc.value.reason == "unauthorized_validator"
    assert exc.value.validator == "mallory"


def test_defaults_from_config(load_config_module):
    assert ValidatorRegistry().validators() == frozenset({"validator1", "validator2", "validator3"})
    load_config_module(validators=" alpha, beta ,,")
    assert ValidatorRegistry().validators() == frozenset({"alpha", "beta"})
