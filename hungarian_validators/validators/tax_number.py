"""
Validation of the Hungarian personal tax number (adóazonosító jel).

Structure of the 10 digits:

1. digit 1 - always ``8`` for private individuals,
2. digits 2-6 - birth date as days elapsed since 1867-01-01,
3. digits 7-9 - sequence number distinguishing people born on the same day,
4. digit 10 - check digit: the sum of the first nine digits weighted by
   their 1-based position, ``mod 11``.  A remainder of 10 cannot be
   represented, so no tax number is issued for such a prefix.
"""

import datetime
from typing import Optional

from hungarian_validators.core.validator_interface import (
    IdentifierValidatorI,
    OptionsLike,
)
from hungarian_validators.data_models.base_model import (
    ValidationOptions,
    ValidationResult,
)
from hungarian_validators.data_models.constants import (
    ErrorKind,
    IdentifierTypes,
    TAX_NUMBER_LENGTH,
    TAX_NUMBER_PRIVATE_PERSON_DIGIT,
    TAX_NUMBER_CHECKSUM_MODULUS,
    TAX_NUMBER_BIRTH_DATE_SLICE,
    TAX_NUMBER_MIN_BIRTH_DAYS,
    TAX_NUMBER_MAX_BIRTH_DAYS,
)
from hungarian_validators.data_models.messages import get_message
from hungarian_validators.exceptions import InvalidTaxNumberError
from hungarian_validators.utils.dates import (
    DateLike,
    calculate_days_since_1867,
    date_from_days_since_1867,
)
from hungarian_validators.utils.logger import prepare_logger
from hungarian_validators.utils.normalize import (
    is_ascii_digits,
    to_digits,
    trim_input,
)

logger = prepare_logger(__name__)


def compute_tax_number_check_digit(first_nine: str) -> Optional[int]:
    """
    Compute the check digit for the first nine digits of a tax number.

    Parameters
    ----------
    first_nine: str
        Exactly nine ASCII digits.

    Returns
    -------
    int | None
        The expected 10th digit, or ``None`` when the weighted sum leaves a
        remainder of 10 and therefore no valid check digit exists.
    """
    if not is_ascii_digits(first_nine, TAX_NUMBER_LENGTH - 1):
        raise ValueError("Expected exactly 9 digits")

    digits = to_digits(first_nine)
    weighted_sum = sum(d * (i + 1) for i, d in enumerate(digits))
    remainder = weighted_sum % TAX_NUMBER_CHECKSUM_MODULUS

    if remainder == 10:
        return None
    return remainder


def validate_tax_number(
    tax_number: str, options: OptionsLike = None
) -> ValidationResult:
    """
    Validate a tax number's format, checksum and birth date encoding.

    Checks run in order and the first failing one decides the message:
    length, leading digit, unrepresentable checksum, checksum digit,
    birth date encoding.
    """
    language = ValidationOptions.resolve(options).language

    cleaned = trim_input(tax_number)

    if not is_ascii_digits(cleaned, TAX_NUMBER_LENGTH):
        return _fail(language, ErrorKind.INVALID_LENGTH)

    digits = to_digits(cleaned)

    if digits[0] != TAX_NUMBER_PRIVATE_PERSON_DIGIT:
        return _fail(language, ErrorKind.INVALID_FIRST_DIGIT)

    check_digit = compute_tax_number_check_digit(cleaned[:9])
    if check_digit is None:
        return _fail(language, ErrorKind.INVALID_CHECKSUM)
    if check_digit != digits[9]:
        return _fail(language, ErrorKind.INVALID_CHECKSUM_DIGIT)

    days_since_1867 = int(cleaned[TAX_NUMBER_BIRTH_DATE_SLICE])
    if not TAX_NUMBER_MIN_BIRTH_DAYS <= days_since_1867 <= TAX_NUMBER_MAX_BIRTH_DAYS:
        return _fail(language, ErrorKind.INVALID_BIRTH_DATE_ENCODING)

    return ValidationResult.ok()


def validate_tax_number_birth_date(
    tax_number: str, birth_date: DateLike, options: OptionsLike = None
) -> ValidationResult:
    """
    Validate a tax number and check that it encodes *birth_date*.

    When the basic validation fails its result is returned unchanged,
    whatever the birth date is.  A malformed birth date string raises
    :class:`~hungarian_validators.exceptions.InvalidDateFormatError`.
    """
    language = ValidationOptions.resolve(options).language

    basic_validation = validate_tax_number(tax_number, options)
    if not basic_validation.is_valid:
        return basic_validation

    days_from_tax_number = int(trim_input(tax_number)[TAX_NUMBER_BIRTH_DATE_SLICE])
    days_from_birth_date = calculate_days_since_1867(birth_date)

    if days_from_tax_number != days_from_birth_date:
        return _fail(language, ErrorKind.BIRTH_DATE_MISMATCH)

    return ValidationResult.ok()


def birth_date_from_tax_number(
    tax_number: str, options: OptionsLike = None
) -> datetime.date:
    """
    Decode the birth date stored in a valid tax number.

    Raises
    ------
    InvalidTaxNumberError
        If the tax number does not pass :func:`validate_tax_number`.
    """
    result = validate_tax_number(tax_number, options)
    if not result.is_valid:
        raise InvalidTaxNumberError(result)

    days = int(trim_input(tax_number)[TAX_NUMBER_BIRTH_DATE_SLICE])
    return date_from_days_since_1867(days)


def _fail(language: str, kind: str) -> ValidationResult:
    logger.debug("Tax number rejected: %s", kind)
    return ValidationResult.fail(
        get_message(language, IdentifierTypes.TAX_NUMBER, kind)
    )


class TaxNumberValidator(IdentifierValidatorI):
    """
    Object wrapper around :func:`validate_tax_number`.
    """

    name = IdentifierTypes.TAX_NUMBER

    def validate(self, value: str, options: OptionsLike = None) -> ValidationResult:
        return validate_tax_number(value, options)


class TaxNumberBirthDateValidator(IdentifierValidatorI):
    """
    Validates tax numbers against a birth date fixed at construction time.

    Useful when the same person's tax number is checked on several forms,
    e.g. ``TaxNumberBirthDateValidator("1980-01-01").validate("8412720008")``.
    """

    name = "tax_number_birth_date"

    def __init__(self, birth_date: DateLike):
        self.birth_date = birth_date

    def validate(self, value: str, options: OptionsLike = None) -> ValidationResult:
        return validate_tax_number_birth_date(value, self.birth_date, options)
