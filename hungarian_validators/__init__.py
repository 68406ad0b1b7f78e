"""
Validators for Hungarian national identifiers.

The public API consists of:
- validate_tax_number / validate_tax_number_birth_date (adóazonosító jel)
- validate_ss_number (TAJ szám)
- calculate_days_since_1867 (birth date encoding used by tax numbers)
- the shared ValidationResult / ValidationOptions models
"""

from hungarian_validators.data_models.base_model import (
    ValidationOptions,
    ValidationResult,
)
from hungarian_validators.data_models.constants import ErrorKind
from hungarian_validators.exceptions import (
    HungarianValidatorsError,
    InvalidDateFormatError,
    InvalidTaxNumberError,
    UnknownValidatorError,
)
from hungarian_validators.utils.dates import calculate_days_since_1867
from hungarian_validators.validators import ALL_VALIDATORS, get_validator
from hungarian_validators.validators.ss_number import (
    SSNumberValidator,
    compute_ss_number_check_digit,
    validate_ss_number,
)
from hungarian_validators.validators.tax_number import (
    TaxNumberValidator,
    TaxNumberBirthDateValidator,
    birth_date_from_tax_number,
    compute_tax_number_check_digit,
    validate_tax_number,
    validate_tax_number_birth_date,
)

__all__ = [
    "ValidationOptions",
    "ValidationResult",
    "ErrorKind",
    "HungarianValidatorsError",
    "InvalidDateFormatError",
    "InvalidTaxNumberError",
    "UnknownValidatorError",
    "calculate_days_since_1867",
    "ALL_VALIDATORS",
    "get_validator",
    "SSNumberValidator",
    "compute_ss_number_check_digit",
    "validate_ss_number",
    "TaxNumberValidator",
    "TaxNumberBirthDateValidator",
    "birth_date_from_tax_number",
    "compute_tax_number_check_digit",
    "validate_tax_number",
    "validate_tax_number_birth_date",
]
