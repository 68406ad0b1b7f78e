"""
Localized error messages.

The catalog is a read-only nested mapping
``language -> identifier type -> error kind -> message``.  It is built once
at import time and wrapped in :class:`types.MappingProxyType`, so callers
cannot modify the wording returned by the validators.
"""

from types import MappingProxyType

from hungarian_validators.data_models.constants import (
    ErrorKind,
    Languages,
    IdentifierTypes,
)


_TAX_NUMBER_HU = {
    ErrorKind.INVALID_LENGTH: "Az adóazonosító pontosan 10 számjegyből kell álljon",
    ErrorKind.INVALID_FIRST_DIGIT: "Az első számjegynek 8-nak kell lennie "
    "magánszemélyek esetében",
    ErrorKind.INVALID_CHECKSUM: "Az adóazonosító ellenőrző számjegye érvénytelen",
    ErrorKind.INVALID_CHECKSUM_DIGIT: "Az adóazonosító ellenőrző számjegye "
    "nem megfelelő",
    ErrorKind.INVALID_BIRTH_DATE_ENCODING: "Az adóazonosító születési dátum "
    "kódolása érvénytelen",
    ErrorKind.BIRTH_DATE_MISMATCH: "Az adóazonosító születési dátuma nem egyezik "
    "meg a megadott születési dátummal",
}

_TAX_NUMBER_EN = {
    ErrorKind.INVALID_LENGTH: "Tax number must be exactly 10 digits",
    ErrorKind.INVALID_FIRST_DIGIT: "First digit must be 8 for private individuals",
    ErrorKind.INVALID_CHECKSUM: "Tax number checksum is invalid",
    ErrorKind.INVALID_CHECKSUM_DIGIT: "Tax number checksum digit is incorrect",
    ErrorKind.INVALID_BIRTH_DATE_ENCODING: "Tax number birth date encoding "
    "is invalid",
    ErrorKind.BIRTH_DATE_MISMATCH: "Tax number birth date does not match "
    "the provided birth date",
}

_SS_NUMBER_HU = {
    ErrorKind.INVALID_LENGTH: "A TAJ szám pontosan 9 számjegyből kell álljon",
    ErrorKind.INVALID_CHECKSUM: "A TAJ szám ellenőrző számjegye érvénytelen",
}

_SS_NUMBER_EN = {
    ErrorKind.INVALID_LENGTH: "TAJ number must be exactly 9 digits",
    ErrorKind.INVALID_CHECKSUM: "TAJ number checksum is invalid",
}


ERROR_MESSAGES = MappingProxyType(
    {
        Languages.HU: MappingProxyType(
            {
                IdentifierTypes.TAX_NUMBER: MappingProxyType(_TAX_NUMBER_HU),
                IdentifierTypes.SS_NUMBER: MappingProxyType(_SS_NUMBER_HU),
            }
        ),
        Languages.EN: MappingProxyType(
            {
                IdentifierTypes.TAX_NUMBER: MappingProxyType(_TAX_NUMBER_EN),
                IdentifierTypes.SS_NUMBER: MappingProxyType(_SS_NUMBER_EN),
            }
        ),
    }
)


def get_message(language: str, identifier_type: str, kind: str) -> str:
    """
    Look up the message for *kind* in the given language.

    Parameters
    ----------
    language : str
        ``"hu"`` or ``"en"``.
    identifier_type : str
        One of :class:`IdentifierTypes`.
    kind : str
        One of :class:`ErrorKind`.

    Returns
    -------
    str
        The localized, human-readable message.
    """
    return ERROR_MESSAGES[language][identifier_type][kind]
