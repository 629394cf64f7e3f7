"""Rating enums - star states, key commands and display vocabulary."""

from enum import Enum


class StarVisualState(str, Enum):
    """Render state of a single star in the row.

    Attributes:
        EMPTY: Outline only, drawn with the neutral stroke.
        HALF: Left half filled with the row color.
        FILLED: Fully filled with the row color.
    """

    EMPTY = "empty"
    HALF = "half"
    FILLED = "filled"


class KeyCommand(str, Enum):
    """Rating commands produced by keyboard input."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    RESET = "reset"
    SET_DIGIT = "set_digit"  # Carries the digit on the event


class StarSize(str, Enum):
    """Glyph size of the star row."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class LabelPosition(str, Enum):
    """Where the label sits relative to the stars."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Direction(str, Enum):
    """Text direction of the star row. NONE inherits from the page."""

    NONE = ""
    LTR = "ltr"
    RTL = "rtl"
