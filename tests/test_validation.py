import pytest

from climbsafe.utils.validation import (
    EMPTY_INPUT_MESSAGE,
    LETTERS_ONLY_MESSAGE,
    is_alpha,
    validate_fields,
)


def test_letters_only_fields_pass():
    assert validate_fields("alice", "secret", "AliceSmith", "bob") is None


@pytest.mark.parametrize("value", ["alice@x", "alice smith", "R2D2", "o'neil", "5551234"])
def test_non_letters_are_rejected(value):
    assert not is_alpha(value)
    assert validate_fields("alice", value) == LETTERS_ONLY_MESSAGE


def test_empty_field_reports_empty_before_letters():
    assert validate_fields("alice@x", "") == EMPTY_INPUT_MESSAGE


def test_accented_and_non_latin_letters_count_as_letters():
    assert validate_fields("Zoé", "Ørsted", "名前") is None


@pytest.mark.parametrize("value", [1234, 12.5, True, ["alice"], {"a": "b"}])
def test_non_string_values_fail_letters_check(value):
    assert not is_alpha(value)
    assert validate_fields("alice", value) == LETTERS_ONLY_MESSAGE


def test_missing_value_reports_empty():
    assert validate_fields("alice", None) == EMPTY_INPUT_MESSAGE
