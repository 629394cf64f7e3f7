"""Star-rating core: visual state resolution and input handling."""

from starbar.core.rating.enums import (
    Direction,
    KeyCommand,
    LabelPosition,
    StarSize,
    StarVisualState,
)
from starbar.core.rating.events import Click, InteractionEvent, KeyPress, parse_key
from starbar.core.rating.input import compute_next_rating
from starbar.core.rating.models import (
    MAX_STARS,
    ColorBand,
    InteractionPolicy,
    RatingChangeEvent,
    RatingConfig,
    RenderedRow,
    StarRender,
)
from starbar.core.rating.presentation import container_classes, format_label
from starbar.core.rating.resolver import RatingResolver, resolve_color, resolve_star
from starbar.core.rating.widget import RatingListener, StarRatingWidget

__all__ = [
    # Resolution
    "resolve_star",
    "resolve_color",
    "RatingResolver",
    # Input
    "compute_next_rating",
    "parse_key",
    "Click",
    "KeyPress",
    "InteractionEvent",
    # Models
    "MAX_STARS",
    "ColorBand",
    "InteractionPolicy",
    "RatingConfig",
    "RatingChangeEvent",
    "RenderedRow",
    "StarRender",
    # Enums
    "Direction",
    "KeyCommand",
    "LabelPosition",
    "StarSize",
    "StarVisualState",
    # Presentation
    "container_classes",
    "format_label",
    # Host
    "RatingListener",
    "StarRatingWidget",
]
