"""
File: validation.py
Purpose: Shared input gate applied before any guide operation reaches the registry.
"""

EMPTY_INPUT_MESSAGE = "The input must not be empty."
LETTERS_ONLY_MESSAGE = "The input must only contain letters."


def is_alpha(value):
    """
    True when the value is a string of letters only (no digits, spaces or punctuation).

    Any Unicode letter counts, so accented names such as "Zoé" pass.
    """
    return isinstance(value, str) and value.isalpha()


def validate_fields(*fields):
    """
    Checks every field is non-empty and letters only.

    Returns None when all fields pass, otherwise the message to show the user.
    Emptiness is checked first so an empty field reports as empty. Missing
    fields (None) count as empty; any other non-string value fails the letters check.
    """
    if any(field is None or field == '' for field in fields):
        return EMPTY_INPUT_MESSAGE
    if not all(is_alpha(field) for field in fields):
        return LETTERS_ONLY_MESSAGE
    return None
