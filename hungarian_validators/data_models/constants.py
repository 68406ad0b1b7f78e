import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "HU_VALIDATORS_"


# Log level of the package logger
LOG_LEVEL = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "WARNING")
    .strip()
    .upper()
)

# Error messages are returned in Hungarian unless the caller asks otherwise
DEFAULT_LANGUAGE = "hu"


class Languages:
    HU = "hu"
    EN = "en"


class IdentifierTypes:
    TAX_NUMBER = "tax_number"
    SS_NUMBER = "ss_number"


class ErrorKind:
    INVALID_LENGTH = "invalidLength"
    INVALID_FIRST_DIGIT = "invalidFirstDigit"
    INVALID_CHECKSUM = "invalidChecksum"
    INVALID_CHECKSUM_DIGIT = "invalidChecksumDigit"
    INVALID_BIRTH_DATE_ENCODING = "invalidBirthDateEncoding"
    BIRTH_DATE_MISMATCH = "birthDateMismatch"


# -------------------------------------------------------------------
# Tax number (adóazonosító jel)
# -------------------------------------------------------------------
TAX_NUMBER_LENGTH = 10
# First digit of a tax number issued to a private individual
TAX_NUMBER_PRIVATE_PERSON_DIGIT = 8
TAX_NUMBER_CHECKSUM_MODULUS = 11
# Positions 2-6 hold the birth date as days since the epoch
TAX_NUMBER_BIRTH_DATE_SLICE = slice(1, 6)
# Covers 1867 to roughly 2250
TAX_NUMBER_MIN_BIRTH_DAYS = 0
TAX_NUMBER_MAX_BIRTH_DAYS = 100000

# -------------------------------------------------------------------
# Social security number (TAJ)
# -------------------------------------------------------------------
SS_NUMBER_LENGTH = 9
SS_NUMBER_ODD_POSITION_WEIGHT = 3
SS_NUMBER_EVEN_POSITION_WEIGHT = 7
SS_NUMBER_CHECKSUM_MODULUS = 10
