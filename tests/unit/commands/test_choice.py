import pytest
from pydantic import ValidationError

from slashschema.commands import Choice
from slashschema.exceptions import ParsingError


class TestChoiceFromData:
    def test_numeric_value(self) -> None:
        choice = Choice.from_data({"name": "N", "value": 5})

        assert choice.name == "N"
        assert choice.as_int == 5
        assert choice.as_str == "5"
        assert choice.is_int is True

    def test_textual_value(self) -> None:
        choice = Choice.from_data({"name": "N", "value": "five"})

        assert choice.as_int == 0
        assert choice.as_str == "five"
        assert choice.is_int is False

    def test_numeric_text_stays_textual(self) -> None:
        choice = Choice.from_data({"name": "N", "value": "5"})

        assert choice.as_int == 0
        assert choice.value == "5"

    def test_negative_value_rendering(self) -> None:
        assert Choice.from_data({"name": "N", "value": -42}).as_str == "-42"

    def test_whole_number_decodes_as_integer(self) -> None:
        choice = Choice.from_data({"name": "N", "value": 5.0})

        assert choice.value == 5
        assert choice.is_int is True
        assert choice.as_int == 5
        assert choice.as_str == "5"

    def test_fractional_number_keeps_decimal_text(self) -> None:
        choice = Choice.from_data({"name": "Half", "value": 0.5})

        assert choice.value == "0.5"
        assert choice.is_int is False
        assert choice.as_int == 0
        assert choice.as_str == "0.5"
        assert choice.to_data() == {"name": "Half", "value": "0.5"}

    @pytest.mark.parametrize("value", [True, None, [1], {"a": 1}, 2**63])
    def test_rejects_other_value_shapes(self, value: object) -> None:
        with pytest.raises(ParsingError) as exc_info:
            Choice.from_data({"name": "N", "value": value})

        assert exc_info.value.key == "value"
        assert isinstance(exc_info.value.cause, ValidationError)

    def test_rejects_missing_name(self) -> None:
        with pytest.raises(ParsingError) as exc_info:
            Choice.from_data({"value": 1})

        assert exc_info.value.key == "name"

    def test_does_not_apply_length_limits(self) -> None:
        choice = Choice.from_data({"name": "n" * 500, "value": ""})

        assert len(choice.name) == 500


class TestChoiceDirect:
    def test_from_int_pair(self) -> None:
        choice = Choice(name="One", value=1)

        assert (choice.as_int, choice.as_str) == (1, "1")

    def test_from_string_pair(self) -> None:
        choice = Choice(name="One", value="one")

        assert (choice.as_int, choice.as_str) == (0, "one")

    def test_is_frozen(self) -> None:
        choice = Choice(name="One", value=1)

        with pytest.raises(ValidationError):
            choice.name = "Two"  # pyright: ignore[reportAttributeAccessIssue]

    def test_to_data_keeps_origin_value(self) -> None:
        assert Choice(name="One", value=1).to_data() == {"name": "One", "value": 1}
        assert Choice(name="One", value="1").to_data() == {"name": "One", "value": "1"}

    def test_equality_and_hash(self) -> None:
        assert Choice(name="One", value=1) == Choice(name="One", value=1)
        assert Choice(name="One", value=1) != Choice(name="One", value="1")
        assert len({Choice(name="One", value=1), Choice(name="One", value=1)}) == 1
