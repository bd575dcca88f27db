import logging

from validus import Default, Failure, Success, ValidationErrors, Validator


def _must_be_positive(field: str) -> str:
    return f"{field} must be positive"


def _must_be_even(field: str) -> str:
    return f"{field} must be even"


validate_positive = Validator.create(_must_be_positive, lambda value: value > 0, name="positive")
validate_even = Validator.create(_must_be_even, lambda value: value % 2 == 0, name="even")


class TestCreate:
    def test_success_returns_value(self):
        assert validate_positive("Age", 4) == Success(4)

    def test_failure_reports_message_for_field(self):
        assert validate_positive("Age", -1) == Failure(ValidationErrors.create("Age", ["Age must be positive"]))

    def test_reusable(self):
        assert validate_positive("A", 1) == Success(1)
        assert validate_positive("B", -1) == Failure(ValidationErrors.create("B", ["B must be positive"]))
        assert validate_positive("A", 1) == Success(1)

    def test_failure_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="validus")
        validate_positive("Age", -1)
        assert "positive" in caplog.text
        assert "Age" in caplog.text

    def test_name(self):
        assert str(validate_positive) == "Validator(positive)"


class TestCompose:
    def test_both_succeed(self):
        assert validate_positive.compose(validate_even)("Age", 4) == Success(4)

    def test_first_fails(self):
        assert (validate_positive & validate_even)("Age", -2) == Failure(
            ValidationErrors.create("Age", ["Age must be positive"])
        )

    def test_second_fails(self):
        assert (validate_positive & validate_even)("Age", 3) == Failure(
            ValidationErrors.create("Age", ["Age must be even"])
        )

    def test_both_fail_merges_first_validator_first(self):
        assert (validate_positive & validate_even)("Age", -3) == Failure(
            ValidationErrors.create("Age", ["Age must be positive", "Age must be even"])
        )
        assert (validate_even & validate_positive)("Age", -3) == Failure(
            ValidationErrors.create("Age", ["Age must be even", "Age must be positive"])
        )

    def test_compose_with_itself_on_success(self):
        assert (validate_positive & validate_positive)("Age", 1) == validate_positive("Age", 1)

    def test_compose_with_itself_duplicates_message(self):
        assert (validate_positive & validate_positive)("Age", -1) == Failure(
            ValidationErrors.create("Age", ["Age must be positive", "Age must be positive"])
        )

    def test_length_and_pattern_both_report(self):
        validate_name = Default.String.between_len(3, 64) & Default.String.pattern(r"[A-Z][a-z]+")
        result = validate_name("Name", "a")
        assert result == Failure(
            ValidationErrors.create(
                "Name", ["Name must be between 3 and 64 characters", "Name must match pattern [A-Z][a-z]+"]
            )
        )
        assert validate_name("Name", "Alice") == Success("Alice")
