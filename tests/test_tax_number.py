"""Tests for the tax number (adóazonosító jel) validator."""

import datetime
import logging

import pytest

from hungarian_validators import (
    InvalidTaxNumberError,
    TaxNumberBirthDateValidator,
    TaxNumberValidator,
    ValidationOptions,
    birth_date_from_tax_number,
    compute_tax_number_check_digit,
    validate_tax_number,
    validate_tax_number_birth_date,
)
from hungarian_validators.validators import tax_number

# 8 | 41272 (1980-01-01) | 000 | check digit 8
VALID_TAX_NUMBER = "8412720008"
# Weighted sum of the first nine digits is 98, remainder 10
UNREPRESENTABLE_PREFIX = "841272030"


class TestValidateTaxNumber:
    def test_valid_numbers(self):
        assert validate_tax_number(VALID_TAX_NUMBER).is_valid
        assert validate_tax_number("8412720016").is_valid
        assert validate_tax_number("8000000008").is_valid

    def test_valid_result_has_no_error(self):
        result = validate_tax_number(VALID_TAX_NUMBER)
        assert result.error is None

    def test_surrounding_whitespace_is_trimmed(self):
        assert validate_tax_number(f"  {VALID_TAX_NUMBER}\n").is_valid

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "123456789",
            "12345678901",
            "84127 20008",
            "8412-720008",
            "84127200O8",
            "８４１２７２０００８",
        ],
    )
    def test_invalid_length(self, value):
        result = validate_tax_number(value, {"language": "en"})
        assert not result.is_valid
        assert result.error == "Tax number must be exactly 10 digits"

    @pytest.mark.parametrize("value", ["7123456789", "9123456789", "0412720008"])
    def test_invalid_first_digit(self, value):
        result = validate_tax_number(value, {"language": "en"})
        assert not result.is_valid
        assert result.error == "First digit must be 8 for private individuals"

    @pytest.mark.parametrize("last_digit", "0123456789")
    def test_remainder_ten_is_always_invalid(self, last_digit):
        result = validate_tax_number(
            UNREPRESENTABLE_PREFIX + last_digit, {"language": "en"}
        )
        assert not result.is_valid
        assert result.error == "Tax number checksum is invalid"

    def test_wrong_check_digit(self):
        result = validate_tax_number("8412720009", {"language": "en"})
        assert not result.is_valid
        assert result.error == "Tax number checksum digit is incorrect"

    def test_birth_date_encoding_out_of_range(self, monkeypatch):
        monkeypatch.setattr(tax_number, "TAX_NUMBER_MAX_BIRTH_DAYS", 40000)
        result = validate_tax_number(VALID_TAX_NUMBER, {"language": "en"})
        assert not result.is_valid
        assert result.error == "Tax number birth date encoding is invalid"

    def test_first_failure_wins(self):
        # Wrong first digit and wrong checksum: the first digit is reported
        result = validate_tax_number("7412720009", {"language": "en"})
        assert result.error == "First digit must be 8 for private individuals"

    def test_hungarian_is_default(self):
        result = validate_tax_number("123456789")
        assert not result.is_valid
        assert "számjegyből" in result.error
        assert result == validate_tax_number("123456789", {"language": "hu"})

    def test_accepts_options_model(self):
        result = validate_tax_number(
            "8412720009", ValidationOptions(language="en")
        )
        assert result.error == "Tax number checksum digit is incorrect"

    def test_hungarian_messages(self):
        assert (
            validate_tax_number("8412720009").error
            == "Az adóazonosító ellenőrző számjegye nem megfelelő"
        )
        assert (
            validate_tax_number(UNREPRESENTABLE_PREFIX + "0").error
            == "Az adóazonosító ellenőrző számjegye érvénytelen"
        )

    def test_idempotent(self):
        assert validate_tax_number("8412720009") == validate_tax_number("8412720009")
        assert validate_tax_number(VALID_TAX_NUMBER) == validate_tax_number(
            VALID_TAX_NUMBER
        )

    def test_rejection_is_logged_without_identifier(self, caplog):
        caplog.set_level(logging.DEBUG, logger=tax_number.logger.name)
        validate_tax_number("8412720009")
        assert "invalidChecksumDigit" in caplog.text
        assert "8412720009" not in caplog.text


class TestComputeTaxNumberCheckDigit:
    def test_check_digit(self):
        assert compute_tax_number_check_digit("841272000") == 8
        assert compute_tax_number_check_digit("841272001") == 6
        assert compute_tax_number_check_digit("800000000") == 8

    def test_no_check_digit_for_remainder_ten(self):
        assert compute_tax_number_check_digit(UNREPRESENTABLE_PREFIX) is None

    @pytest.mark.parametrize("value", ["84127200", "8412720001", "84127200a"])
    def test_rejects_malformed_prefix(self, value):
        with pytest.raises(ValueError):
            compute_tax_number_check_digit(value)


class TestValidateTaxNumberBirthDate:
    def test_matching_birth_date_string(self):
        assert validate_tax_number_birth_date(VALID_TAX_NUMBER, "1980-01-01").is_valid

    def test_matching_birth_date_object(self):
        assert validate_tax_number_birth_date(
            VALID_TAX_NUMBER, datetime.date(1980, 1, 1)
        ).is_valid
        assert validate_tax_number_birth_date(
            "8485770005", datetime.datetime(2000, 1, 1)
        ).is_valid

    def test_timestamp_birth_date_string(self):
        assert validate_tax_number_birth_date(
            VALID_TAX_NUMBER, "1980-01-01T00:00:00Z"
        ).is_valid

    def test_epoch_birth_date(self):
        assert validate_tax_number_birth_date("8000000008", "1867-01-01").is_valid

    def test_mismatch(self):
        result = validate_tax_number_birth_date(
            VALID_TAX_NUMBER, "1980-01-02", {"language": "en"}
        )
        assert not result.is_valid
        assert (
            result.error
            == "Tax number birth date does not match the provided birth date"
        )

    def test_mismatch_hungarian(self):
        result = validate_tax_number_birth_date(VALID_TAX_NUMBER, "1980-01-02")
        assert result.error == (
            "Az adóazonosító születési dátuma nem egyezik meg "
            "a megadott születési dátummal"
        )

    @pytest.mark.parametrize(
        "value", ["123456789", "7123456789", "8412720009", "8412720300"]
    )
    @pytest.mark.parametrize("birth_date", ["1980-01-01", "not-a-date", "x"])
    def test_basic_failure_returned_unchanged(self, value, birth_date):
        for options in (None, {"language": "en"}):
            assert validate_tax_number_birth_date(
                value, birth_date, options
            ) == validate_tax_number(value, options)

    def test_malformed_birth_date_raises(self):
        with pytest.raises(ValueError):
            validate_tax_number_birth_date(VALID_TAX_NUMBER, "1980/01/01")


class TestBirthDateFromTaxNumber:
    def test_decodes_birth_date(self):
        assert birth_date_from_tax_number(VALID_TAX_NUMBER) == datetime.date(
            1980, 1, 1
        )
        assert birth_date_from_tax_number("8000000008") == datetime.date(1867, 1, 1)

    def test_invalid_tax_number_raises(self):
        with pytest.raises(InvalidTaxNumberError) as exc_info:
            birth_date_from_tax_number("8412720009", {"language": "en"})
        assert not exc_info.value.result.is_valid
        assert str(exc_info.value) == "Tax number checksum digit is incorrect"


class TestTaxNumberValidators:
    def test_tax_number_validator(self):
        validator = TaxNumberValidator()
        assert validator.name == "tax_number"
        assert validator.is_valid(VALID_TAX_NUMBER)
        assert validator.validate("8412720009") == validate_tax_number("8412720009")

    def test_birth_date_validator(self):
        validator = TaxNumberBirthDateValidator("1980-01-01")
        assert validator.validate(VALID_TAX_NUMBER).is_valid
        assert not validator.validate("8000000008").is_valid
        assert not TaxNumberBirthDateValidator("1980-01-02").is_valid(
            VALID_TAX_NUMBER
        )
