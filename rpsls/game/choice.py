"""
Helpers for converting choices to and from their external forms.
"""
from typing import List, Union

from rpsls.utils.constants import Choice, CHOICE_NAMES, INPUT_KEYS
from rpsls.game.errors import InvalidChoiceError


def all_choices() -> List[Choice]:
    """Return the five choices in enumeration order."""
    return list(Choice)


def choice_name(choice: Choice) -> str:
    """Return the display name of a choice."""
    return CHOICE_NAMES[choice]


def parse_choice(value: Union[str, Choice]) -> Choice:
    """
    Convert user or config input to a Choice.

    Accepts a Choice, a menu key ('1'-'5'), or a choice name in any case
    ('rock', 'Spock').

    Args:
        value: The raw value to convert

    Returns:
        The matching Choice

    Raises:
        InvalidChoiceError: If the value does not name one of the five choices
    """
    if isinstance(value, Choice):
        return value
    if not isinstance(value, str):
        raise InvalidChoiceError(f"Invalid choice: {value!r}")

    key = value.strip()
    if key in INPUT_KEYS:
        return INPUT_KEYS[key]
    try:
        return Choice(key.lower())
    except ValueError:
        raise InvalidChoiceError(f"Invalid choice: {value!r}") from None
