"""Interaction events fed into the input controller.

Pointer and keyboard input are normalized into two frozen event types:
``Click`` for a star click and ``KeyPress`` for a keyboard command. Raw
keyboard identifiers (either ``KeyboardEvent.key`` values such as ``"+"`` or
``KeyboardEvent.code`` values such as ``"Digit3"``) are mapped by
``parse_key``.
"""

from __future__ import annotations

from dataclasses import dataclass

from starbar.core.rating.enums import KeyCommand


@dataclass(frozen=True)
class Click:
    """Pointer click on the star at 1-based ``star_index``."""

    star_index: int


@dataclass(frozen=True)
class KeyPress:
    """Keyboard command. ``digit`` is set only for SET_DIGIT."""

    command: KeyCommand
    digit: int | None = None

    def __post_init__(self) -> None:
        if self.command is KeyCommand.SET_DIGIT and self.digit is None:
            raise ValueError("SET_DIGIT requires a digit")


InteractionEvent = Click | KeyPress


_KEY_COMMANDS: dict[str, KeyCommand] = {
    "+": KeyCommand.INCREMENT,
    "Plus": KeyCommand.INCREMENT,
    "NumpadAdd": KeyCommand.INCREMENT,
    "ArrowRight": KeyCommand.INCREMENT,
    "ArrowUp": KeyCommand.INCREMENT,
    "-": KeyCommand.DECREMENT,
    "−": KeyCommand.DECREMENT,  # Unicode minus sign
    "Minus": KeyCommand.DECREMENT,
    "NumpadSubtract": KeyCommand.DECREMENT,
    "ArrowDown": KeyCommand.DECREMENT,
    "ArrowLeft": KeyCommand.DECREMENT,
    "Backspace": KeyCommand.RESET,
    "Delete": KeyCommand.RESET,
}

_DIGIT_PREFIXES = ("Digit", "Numpad")


def _parse_digit(key: str) -> int | None:
    for prefix in _DIGIT_PREFIXES:
        if key.startswith(prefix):
            key = key[len(prefix) :]
            break

    if len(key) == 1 and key in "0123456789":
        return int(key)
    return None


def parse_key(key: str) -> KeyPress | None:
    """Map a raw key identifier to a keyboard command.

    Args:
        key: ``KeyboardEvent.key`` or ``KeyboardEvent.code`` value

    Returns:
        KeyPress for a recognized key, None for anything else

    Example:
        >>> parse_key("ArrowUp")
        KeyPress(command=<KeyCommand.INCREMENT: 'increment'>, digit=None)
        >>> parse_key("Digit0").command
        <KeyCommand.RESET: 'reset'>
        >>> parse_key("Tab") is None
        True
    """
    command = _KEY_COMMANDS.get(key)
    if command is not None:
        return KeyPress(command)

    digit = _parse_digit(key)
    if digit is None:
        return None
    if digit == 0:
        return KeyPress(KeyCommand.RESET)
    return KeyPress(KeyCommand.SET_DIGIT, digit)
