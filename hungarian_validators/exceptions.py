"""
Custom exception hierarchy for the Hungarian validators library.

Identifier validation never raises: every failure is reported through a
:class:`~hungarian_validators.data_models.base_model.ValidationResult`.
The exceptions below signal integration errors instead (an unparseable date
literal, an unknown validator name, or decoding a tax number that does not
pass validation).  All of them inherit from :class:`HungarianValidatorsError`.
"""


class HungarianValidatorsError(Exception):
    """Base exception for all library-specific errors."""

    pass


class InvalidDateFormatError(HungarianValidatorsError, ValueError):
    """Raised when a date string is not in the ``YYYY-MM-DD`` format."""

    pass


class UnknownValidatorError(HungarianValidatorsError, KeyError):
    """Raised when a validator is requested by a name that is not registered."""

    pass


class InvalidTaxNumberError(HungarianValidatorsError, ValueError):
    """
    Raised when a tax number has to be decoded but does not pass validation.

    The failing :class:`ValidationResult` is kept on :attr:`result`, so the
    caller still has access to the localized message.
    """

    def __init__(self, result):
        super().__init__(result.error)
        self.result = result
