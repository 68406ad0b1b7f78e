"""
Package that contains the concrete identifier validators.
"""

from hungarian_validators.core.validator_interface import IdentifierValidatorI
from hungarian_validators.exceptions import UnknownValidatorError
from hungarian_validators.validators.ss_number import SSNumberValidator
from hungarian_validators.validators.tax_number import (
    TaxNumberValidator,
    TaxNumberBirthDateValidator,
)

ALL_VALIDATORS = {
    TaxNumberValidator.name: TaxNumberValidator(),
    SSNumberValidator.name: SSNumberValidator(),
}


def get_validator(name: str) -> IdentifierValidatorI:
    """
    Return the registered validator called *name*.

    Raises
    ------
    UnknownValidatorError
        If no validator is registered under *name*.
    """
    try:
        return ALL_VALIDATORS[name]
    except KeyError:
        raise UnknownValidatorError(
            f"Unknown validator {name!r}, available: {sorted(ALL_VALIDATORS)}"
        ) from None
