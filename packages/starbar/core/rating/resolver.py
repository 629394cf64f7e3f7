"""Rating resolution - maps a rating to per-star visual states and a fill color.

The resolver handles:
1. Star state: EMPTY, HALF or FILLED for a 1-based star index
2. Row color: static color, or the color band selected by the whole rating
3. Full rows: one StarRender per star with a single color lookup
"""

from __future__ import annotations

import logging

from starbar.core.rating.enums import StarVisualState
from starbar.core.rating.models import RatingConfig, StarRender
from starbar.core.utils.math import split_rating

logger = logging.getLogger(__name__)

HALF_STAR_THRESHOLD = 0.5


def resolve_star(rating: float, star_index: int, show_half_stars: bool) -> StarVisualState:
    """Resolve the visual state of one star.

    Args:
        rating: Current rating (may be fractional)
        star_index: 1-based star position
        show_half_stars: Whether a half star may be shown

    Returns:
        FILLED for stars within the whole part, HALF for the star right after
        it when half stars are on and the fraction is at least 0.5, else EMPTY

    Example:
        >>> resolve_star(3.63, 4, show_half_stars=True)
        <StarVisualState.HALF: 'half'>
    """
    whole, fraction = split_rating(rating)

    if star_index <= whole:
        return StarVisualState.FILLED
    if show_half_stars and star_index == whole + 1 and fraction >= HALF_STAR_THRESHOLD:
        return StarVisualState.HALF
    return StarVisualState.EMPTY


def resolve_color(rating: float, config: RatingConfig) -> str:
    """Resolve the fill color shared by all filled and half stars of a render.

    A static color wins over banding. Otherwise the band with the greatest
    threshold not above the whole rating applies.

    Args:
        rating: Current rating (only the whole part is used)
        config: Widget configuration holding the static color and bands

    Returns:
        CSS color string
    """
    if config.static_color:
        return config.static_color

    whole, _ = split_rating(rating)
    bands = config.bands

    # Threshold-0 band is guaranteed by RatingConfig validation
    color = bands[0].color
    for band in bands:
        if band.threshold_rating > whole:
            break
        color = band.color
    return color


class RatingResolver:
    """Resolves complete star rows for a widget configuration.

    Example:
        resolver = RatingResolver(config)
        stars = resolver.resolve_row()           # uses config.rating
        preview = resolver.resolve_row(rating=4)  # e.g. hover preview
    """

    def __init__(self, config: RatingConfig):
        """Initialize with the configuration to resolve against.

        Args:
            config: Widget configuration
        """
        self.config = config

    def resolve_row(self, rating: float | None = None) -> list[StarRender]:
        """Resolve every star of the row.

        Args:
            rating: Rating to render, defaults to ``config.rating``

        Returns:
            One StarRender per star index, in order
        """
        if rating is None:
            rating = self.config.rating

        color = resolve_color(rating, self.config)
        stars: list[StarRender] = []
        for index in range(1, self.config.star_count + 1):
            state = resolve_star(rating, index, self.config.show_half_stars)
            fill = None if state is StarVisualState.EMPTY else color
            stars.append(StarRender(index=index, state=state, fill_color=fill))

        logger.debug(
            "Resolved row rating=%s stars=%d color=%s states=%s",
            rating,
            self.config.star_count,
            color,
            [s.state.value for s in stars],
        )
        return stars

    def resolve_color(self, rating: float | None = None) -> str:
        """Row color for ``rating`` (defaults to ``config.rating``)."""
        return resolve_color(self.config.rating if rating is None else rating, self.config)
