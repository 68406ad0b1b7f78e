"""
Base model definitions for the Hungarian validators library.

This module contains the two Pydantic models shared by every validator:

* ``ValidationOptions`` - read-only per-call configuration (currently only
  the language of the error messages).
* ``ValidationResult`` - the immutable verdict returned by each validator.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from hungarian_validators.data_models.constants import DEFAULT_LANGUAGE, Languages


class ValidationOptions(BaseModel):
    """
    Configuration options accepted by every validator.

    Attributes
    ----------

    language: "hu" | "en", Default "hu", Language of the returned
    error message.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: Literal[Languages.HU, Languages.EN] = DEFAULT_LANGUAGE

    @classmethod
    def resolve(
        cls, options: Optional[Union["ValidationOptions", Dict[str, Any]]] = None
    ) -> "ValidationOptions":
        """
        Build options from whatever the caller passed in.

        ``None`` gives the defaults, a ``dict`` is validated into a new model
        (keys set to ``None`` count as missing) and an existing instance is
        returned as is.  An unsupported language
        raises :class:`pydantic.ValidationError`.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        # An explicit None falls back to the default, like a missing key
        return cls.model_validate({k: v for k, v in options.items() if v is not None})


class ValidationResult(BaseModel):
    """
    Outcome of a single validation call.

    Attributes
    ----------
    is_valid : bool
        ``True`` when every check passed.
    error : str | None
        Localized message of the first failing check.  Present if and only
        if ``is_valid`` is ``False``.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: Optional[str] = None

    @model_validator(mode="after")
    def _error_only_when_invalid(self) -> "ValidationResult":
        if self.is_valid and self.error is not None:
            raise ValueError("a valid result cannot carry an error message")
        if not self.is_valid and not self.error:
            raise ValueError("an invalid result requires an error message")
        return self

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=message)

    def __bool__(self) -> bool:
        return self.is_valid
