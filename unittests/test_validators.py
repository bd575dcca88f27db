import datetime as dt
import decimal
from uuid import UUID, uuid4

import pytest
from typeguard import TypeCheckError

from validus import ConfigurationError, Failure, Success, ValidationErrors, validators
from validus.validators import CollectionValidator, ComparisonValidator, EqualityValidator


def invalid(field: str) -> str:
    return f"{field} is invalid"


def failure(field: str) -> Failure:
    return Failure(ValidationErrors.create(field, [invalid(field)]))


class TestEqualityValidator:
    def test_equals(self):
        validate = EqualityValidator[str]().equals("yes", invalid)
        assert validate("Answer", "yes") == Success("yes")
        assert validate("Answer", "no") == failure("Answer")

    def test_not_equals(self):
        validate = EqualityValidator[int]().not_equals(0, invalid)
        assert validate("Count", 1) == Success(1)
        assert validate("Count", 0) == failure("Count")


class TestComparisonValidator:
    def test_delegates_equality(self):
        family: ComparisonValidator[int] = ComparisonValidator(int)
        assert isinstance(family.equality, EqualityValidator)
        assert family.equals(3, invalid)("Count", 3) == Success(3)
        assert family.not_equals(3, invalid)("Count", 3) == failure("Count")

    @pytest.mark.parametrize(
        "family, low, high, inside, outside",
        [
            pytest.param(validators.Int, 1, 10, 10, 11, id="int"),
            pytest.param(validators.Int16, -5, 5, -5, -6, id="int16"),
            pytest.param(validators.Int64, 0, 2**40, 2**39, 2**41, id="int64"),
            pytest.param(validators.Float, 0.5, 1.5, 1.0, 1.6, id="float"),
            pytest.param(
                validators.Decimal,
                decimal.Decimal("0.10"),
                decimal.Decimal("0.20"),
                decimal.Decimal("0.15"),
                decimal.Decimal("0.21"),
                id="decimal",
            ),
            pytest.param(
                validators.DateTime,
                dt.datetime(2024, 1, 1),
                dt.datetime(2024, 12, 31),
                dt.datetime(2024, 6, 1),
                dt.datetime(2025, 1, 1),
                id="datetime",
            ),
            pytest.param(
                validators.DateTimeOffset,
                dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc),
                dt.datetime(2024, 12, 31, tzinfo=dt.timezone.utc),
                dt.datetime(2024, 6, 1, tzinfo=dt.timezone(dt.timedelta(hours=2))),
                dt.datetime(2023, 12, 31, 23, tzinfo=dt.timezone.utc),
                id="datetime-offset",
            ),
            pytest.param(
                validators.TimeSpan,
                dt.timedelta(minutes=1),
                dt.timedelta(hours=1),
                dt.timedelta(minutes=30),
                dt.timedelta(seconds=59),
                id="timespan",
            ),
        ],
    )
    def test_between(self, family, low, high, inside, outside):
        validate = family.between(low, high, invalid)
        assert validate("Value", inside) == Success(inside)
        assert validate("Value", low) == Success(low)
        assert validate("Value", high) == Success(high)
        assert validate("Value", outside) == failure("Value")

    def test_greater_than(self):
        validate = validators.Int.greater_than(0, invalid)
        assert validate("Age", 1) == Success(1)
        assert validate("Age", 0) == failure("Age")

    def test_less_than(self):
        validate = validators.Float.less_than(1.0, invalid)
        assert validate("Ratio", 0.99) == Success(0.99)
        assert validate("Ratio", 1.0) == failure("Ratio")

    def test_operand_of_wrong_type_fails_at_construction(self):
        with pytest.raises(ConfigurationError) as error_info:
            validators.Int.greater_than("0", invalid)  # type: ignore[arg-type]
        assert isinstance(error_info.value.__cause__, TypeCheckError)
        assert "greater_than.min_value" in str(error_info.value)

    def test_inverted_bounds_fail_at_construction(self):
        with pytest.raises(ConfigurationError):
            validators.Int.between(10, 1, invalid)


class TestStringValidator:
    def test_equals(self):
        assert validators.String.equals("a", invalid)("Code", "a") == Success("a")
        with pytest.raises(ConfigurationError):
            validators.String.equals(1, invalid)  # type: ignore[arg-type]

    def test_between_len(self):
        validate = validators.String.between_len(3, 64, invalid)
        assert validate("Name", "Al") == failure("Name")
        assert validate("Name", "Alice") == Success("Alice")

    def test_equals_len(self):
        validate = validators.String.equals_len(2, invalid)
        assert validate("Country", "DE") == Success("DE")
        assert validate("Country", "DEU") == failure("Country")

    def test_greater_than_len(self):
        validate = validators.String.greater_than_len(2, invalid)
        assert validate("Name", "abc") == Success("abc")
        assert validate("Name", "ab") == failure("Name")

    def test_less_than_len(self):
        validate = validators.String.less_than_len(3, invalid)
        assert validate("Name", "ab") == Success("ab")
        assert validate("Name", "abc") == failure("Name")

    @pytest.mark.parametrize("value", ["", " ", "\t \n"])
    def test_empty_means_whitespace_only(self, value):
        assert validators.String.empty(invalid)("Comment", value) == Success(value)
        assert validators.String.not_empty(invalid)("Comment", value) == failure("Comment")

    def test_not_empty(self):
        assert validators.String.not_empty(invalid)("Comment", " x ") == Success(" x ")
        assert validators.String.empty(invalid)("Comment", " x ") == failure("Comment")

    def test_pattern(self):
        validate = validators.String.pattern(r"\d{5}", invalid)
        assert validate("Zip", "12345") == Success("12345")
        assert validate("Zip", "123456") == failure("Zip")

    def test_invalid_pattern_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            validators.String.pattern("[", invalid)


class TestGuidValidator:
    def test_empty(self):
        nil = UUID(int=0)
        assert validators.Guid.empty(invalid)("Id", nil) == Success(nil)
        assert validators.Guid.not_empty(invalid)("Id", nil) == failure("Id")

    def test_not_empty(self):
        value = uuid4()
        assert validators.Guid.not_empty(invalid)("Id", value) == Success(value)
        assert validators.Guid.empty(invalid)("Id", value) == failure("Id")

    def test_equals(self):
        value = uuid4()
        assert validators.Guid.equals(value, invalid)("Id", value) == Success(value)
        assert validators.Guid.not_equals(value, invalid)("Id", value) == failure("Id")


class TestCollectionValidator:
    def test_length_members_count_elements(self):
        family = validators.Collection
        assert family.between_len(1, 2, invalid)("Tags", ["a", "b"]) == Success(["a", "b"])
        assert family.between_len(1, 2, invalid)("Tags", []) == failure("Tags")
        assert family.equals_len(2, invalid)("Tags", ("a", "b")) == Success(("a", "b"))
        assert family.greater_than_len(2, invalid)("Tags", {"a", "b"}) == failure("Tags")
        assert family.less_than_len(2, invalid)("Tags", ["a"]) == Success(["a"])

    def test_empty(self):
        assert validators.Collection.empty(invalid)("Tags", []) == Success([])
        assert validators.Collection.empty(invalid)("Tags", [1]) == failure("Tags")
        assert validators.Collection.not_empty(invalid)("Tags", [1]) == Success([1])
        assert validators.Collection.not_empty(invalid)("Tags", []) == failure("Tags")

    def test_exists(self):
        validate = validators.Collection.exists(lambda tag: tag.startswith("#"), invalid)
        assert validate("Tags", ["a", "#b"]) == Success(["a", "#b"])
        assert validate("Tags", ["a", "b"]) == failure("Tags")

    def test_equals(self):
        family: CollectionValidator[int] = CollectionValidator(int)
        assert family.equals([1, 2], invalid)("Numbers", [1, 2]) == Success([1, 2])
        assert family.not_equals([1, 2], invalid)("Numbers", [1, 2]) == failure("Numbers")
        with pytest.raises(ConfigurationError):
            family.equals(["1"], invalid)


class TestTemporalDomains:
    def test_offset_family_rejects_naive_operands(self):
        with pytest.raises(ConfigurationError):
            validators.DateTimeOffset.greater_than(dt.datetime(2024, 1, 1), invalid)

    def test_naive_family_rejects_aware_operands(self):
        with pytest.raises(ConfigurationError):
            validators.DateTime.less_than(dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc), invalid)
        with pytest.raises(ConfigurationError):
            validators.DateTime.equals(dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc), invalid)

    def test_naive_value_fails_offset_rule_without_raising(self):
        validate = validators.DateTimeOffset.greater_than(dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc), invalid)
        assert validate("Start", dt.datetime(2025, 1, 1)) == failure("Start")
        assert validate("Start", dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)) == Success(
            dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)
        )

    def test_aware_value_fails_naive_rule_without_raising(self):
        validate = validators.DateTime.between(dt.datetime(2024, 1, 1), dt.datetime(2024, 12, 31), invalid)
        assert validate("Start", dt.datetime(2024, 6, 1, tzinfo=dt.timezone.utc)) == failure("Start")
        assert validate("Start", dt.datetime(2024, 6, 1)) == Success(dt.datetime(2024, 6, 1))


class TestDecimalOperands:
    def test_int_operand(self):
        validate = validators.Decimal.greater_than(0, invalid)
        assert validate("Price", decimal.Decimal("0.01")) == Success(decimal.Decimal("0.01"))
        assert validate("Price", decimal.Decimal("0")) == failure("Price")

    def test_float_operand_is_rejected(self):
        with pytest.raises(ConfigurationError):
            validators.Decimal.greater_than(0.5, invalid)
