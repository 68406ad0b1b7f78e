"""
Validation of the Hungarian social security number (TAJ szám).

Rules based on Act XX of 1996:

1. exactly 9 digits, separators such as spaces or dashes are ignored,
2. digits 1-8 form a sequence number,
3. digit 9 is the check digit: digits in odd positions (1st, 3rd, 5th, 7th)
   are multiplied by 3, digits in even positions (2nd, 4th, 6th, 8th) by 7,
   and the sum ``mod 10`` must equal the 9th digit.
"""

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
    SS_NUMBER_LENGTH,
    SS_NUMBER_ODD_POSITION_WEIGHT,
    SS_NUMBER_EVEN_POSITION_WEIGHT,
    SS_NUMBER_CHECKSUM_MODULUS,
)
from hungarian_validators.data_models.messages import get_message
from hungarian_validators.utils.logger import prepare_logger
from hungarian_validators.utils.normalize import (
    clean_numeric_input,
    is_ascii_digits,
    to_digits,
)

logger = prepare_logger(__name__)


def compute_ss_number_check_digit(first_eight: str) -> int:
    """
    Compute the TAJ check digit for the first eight digits.

    The weights alternate 3, 7, 3, 7, ... starting at the first digit.
    """
    if not is_ascii_digits(first_eight, SS_NUMBER_LENGTH - 1):
        raise ValueError("Expected exactly 8 digits")

    weighted_sum = 0
    for i, d in enumerate(to_digits(first_eight)):
        if i % 2 == 0:
            weighted_sum += d * SS_NUMBER_ODD_POSITION_WEIGHT
        else:
            weighted_sum += d * SS_NUMBER_EVEN_POSITION_WEIGHT

    return weighted_sum % SS_NUMBER_CHECKSUM_MODULUS


def validate_ss_number(ss_number: str, options: OptionsLike = None) -> ValidationResult:
    """
    Validate a TAJ number.

    All non-digit characters are removed first, so ``"111-111 110"`` and
    ``"111111110"`` give the same result.
    """
    language = ValidationOptions.resolve(options).language

    cleaned = clean_numeric_input(ss_number)

    if not is_ascii_digits(cleaned, SS_NUMBER_LENGTH):
        return _fail(language, ErrorKind.INVALID_LENGTH)

    if compute_ss_number_check_digit(cleaned[:8]) != int(cleaned[8]):
        return _fail(language, ErrorKind.INVALID_CHECKSUM)

    return ValidationResult.ok()


def _fail(language: str, kind: str) -> ValidationResult:
    logger.debug("TAJ number rejected: %s", kind)
    return ValidationResult.fail(get_message(language, IdentifierTypes.SS_NUMBER, kind))


class SSNumberValidator(IdentifierValidatorI):
    name = IdentifierTypes.SS_NUMBER

    def validate(self, value: str, options: OptionsLike = None) -> ValidationResult:
        return validate_ss_number(value, options)
