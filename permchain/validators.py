from typing import FrozenSet, Iterable, Optional

from . import config
from .errors import UnauthorizedValidator


class ValidatorRegistry:
    """Fixed whitelist of validator ids allowed to propose blocks."""

    def __init__(self, validators: Optional[Iterable[str]] = None) -> None:
        if validators is None:
            validators = config.validator_ids()
        self._validators: FrozenSet[str] = frozenset(validators)

    def is_authorized(self, validator: str) -> bool:
        return validator in self._validators

    def require(self, validator: str) -> None:
        if not self.is_authorized(validator):
            raise UnauthorizedValidator(validator)

    def validators(self) -> FrozenSet[str]:
        return self._validators

    def __contains__(self, validator: str) -> bool:
        return self.is_authorized(validator)

    def __len__(self) -> int:
        return len(self._validators)
