"""
Definition of the interface that every identifier validator must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from hungarian_validators.data_models.base_model import (
    ValidationOptions,
    ValidationResult,
)

OptionsLike = Optional[Union[ValidationOptions, Dict[str, Any]]]


class IdentifierValidatorI(ABC):
    """
    Abstract base class for all identifier validators.

    Sub-classes set :attr:`name` (the key under which the validator is
    registered) and implement :meth:`validate`, which must never raise for
    malformed identifiers - failures are reported in the returned result.
    """

    name: str = ""

    @abstractmethod
    def validate(self, value: str, options: OptionsLike = None) -> ValidationResult:
        """
        Validate *value* and return the verdict.

        Parameters
        ----------
        value: str
            The raw identifier as typed by the user.
        options: ValidationOptions | dict | None
            Per-call configuration, see :class:`ValidationOptions`.

        Returns
        -------
        ValidationResult
            ``is_valid`` plus the localized message of the first failing check.
        """
        raise NotImplementedError

    def is_valid(self, value: str) -> bool:
        return self.validate(value).is_valid
