"""Presentation state for the widget container and label."""

from __future__ import annotations

from starbar.core.rating.enums import Direction
from starbar.core.rating.models import RatingConfig
from starbar.core.rating.resolver import HALF_STAR_THRESHOLD
from starbar.core.utils.math import format_number, split_rating

RATING_PLACEHOLDER = "${rating}"
_SPACE_PREFIX = "space-"


def container_classes(config: RatingConfig, rating: float | None = None) -> str:
    """Build the CSS class string of the rating container.

    Example:
        >>> config = RatingConfig(rating=3.63, show_half_stars=True, size="large",
        ...                       label_position="bottom")
        >>> container_classes(config)
        'rating value-3 half large label-bottom space-small'
    """
    if rating is None:
        rating = config.rating

    whole, fraction = split_rating(rating)
    classes = ["rating", f"value-{whole}"]

    if config.show_half_stars and fraction >= HALF_STAR_THRESHOLD:
        classes.append("half")
    classes.append(config.size.value)
    if config.disabled:
        classes.append("disabled")
    if config.read_only:
        classes.append("read-only")
    classes.append(f"label-{config.label_position.value}")
    if config.direction is not Direction.NONE:
        classes.append(f"direction-{config.direction.value}")

    spacing = config.space_between
    if not spacing.startswith(_SPACE_PREFIX):
        spacing = _SPACE_PREFIX + spacing
    classes.append(spacing)

    return " ".join(classes)


def format_label(config: RatingConfig, rating: float | None = None) -> str | None:
    """Interpolate the label template, or None when the label is hidden."""
    if config.label_hidden:
        return None
    if rating is None:
        rating = config.rating
    return config.label_text.replace(RATING_PLACEHOLDER, format_number(rating))
