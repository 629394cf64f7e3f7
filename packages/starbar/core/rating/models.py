"""Rating models - widget configuration, interaction policy and render output.

RatingConfig mirrors the inbound property set of the widget host. Field names
are snake_case in Python; the camelCase names used by the host markup
(``numberOfStars``, ``showHalfStars``, ``staticColor``...) are accepted as
aliases so a host payload validates unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from starbar.core.rating.enums import Direction, LabelPosition, StarSize, StarVisualState
from starbar.core.utils.math import clamp

MAX_STARS = 15
MIN_STARS = 1

DEFAULT_COLOR = "#a2a4a7"
NEGATIVE_COLOR = "#c23934"
OK_COLOR = "#ffb75d"
POSITIVE_COLOR = "#04844b"

# Whole-rating thresholds of the derived bands
NEGATIVE_THRESHOLD = 1
OK_THRESHOLD = 3
POSITIVE_THRESHOLD = 5


class ColorBand(BaseModel):
    """Threshold-to-color association for filled stars.

    A band applies when the whole-number rating is at least ``threshold_rating``
    and no band with a higher threshold also applies.
    """

    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    threshold_rating: float = Field(
        ge=0.0, allow_inf_nan=False, description="Lowest whole rating using this color"
    )
    color: str = Field(min_length=1, description="CSS color (name or hex)")


class InteractionPolicy(BaseModel):
    """Interaction guard flags. Either flag turns every interaction into a no-op."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    disabled: bool = False
    read_only: bool = False

    @property
    def locked(self) -> bool:
        """True when no interaction may change the rating."""
        return self.disabled or self.read_only


class RatingConfig(BaseModel):
    """Configuration of one star-rating widget.

    Immutable; hosts apply property changes by validating a new instance
    (see ``StarRatingWidget.update``).

    Example:
        >>> config = RatingConfig.model_validate({"rating": 3.6, "numberOfStars": 20})
        >>> config.star_count
        15
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    rating: float = Field(default=0.0, ge=0.0, allow_inf_nan=False, description="Current rating")
    number_of_stars: int = Field(
        default=5, description=f"Requested star count, clamped to [{MIN_STARS}, {MAX_STARS}]"
    )
    show_half_stars: bool = Field(default=False, description="Allow a half star after the whole part")

    # Colors
    static_color: str | None = Field(
        default=None, description="Single fill color, overrides banding when set"
    )
    color_default: str = Field(default=DEFAULT_COLOR, min_length=1)
    color_negative: str = Field(default=NEGATIVE_COLOR, min_length=1)
    color_ok: str = Field(default=OK_COLOR, min_length=1)
    color_positive: str = Field(default=POSITIVE_COLOR, min_length=1)
    color_bands: list[ColorBand] | None = Field(
        default=None,
        description="Explicit bands; derived from the color_* fields when omitted",
    )

    # Display
    size: StarSize = StarSize.MEDIUM
    label_text: str = Field(default="", description="Label template, ${rating} is substituted")
    label_position: LabelPosition = LabelPosition.LEFT
    label_hidden: bool = False
    direction: Direction = Direction.NONE
    space_between: str = Field(default="small", min_length=1)
    hover_enabled: bool = False

    # Interaction
    disabled: bool = False
    read_only: bool = False

    @field_validator("number_of_stars")
    @classmethod
    def clamp_number_of_stars(cls, v: int) -> int:
        """Silently clamp the requested star count to the supported range."""
        return clamp(v, MIN_STARS, MAX_STARS)

    @field_validator("color_bands")
    @classmethod
    def validate_color_bands(cls, v: list[ColorBand] | None) -> list[ColorBand] | None:
        """Sort bands ascending and require a unique threshold-0 default band."""
        if v is None:
            return None

        bands = sorted(v, key=lambda band: band.threshold_rating)
        thresholds = [band.threshold_rating for band in bands]

        if not thresholds or thresholds[0] != 0:
            raise ValueError("color_bands must contain a band at threshold 0")
        if len(set(thresholds)) != len(thresholds):
            raise ValueError(f"color_bands thresholds must be unique, got {thresholds}")

        return bands

    @property
    def star_count(self) -> int:
        """Effective number of stars in the row."""
        return self.number_of_stars

    @property
    def bands(self) -> tuple[ColorBand, ...]:
        """Color bands sorted ascending by threshold."""
        if self.color_bands is not None:
            return tuple(self.color_bands)

        return (
            ColorBand(threshold_rating=0, color=self.color_default),
            ColorBand(threshold_rating=NEGATIVE_THRESHOLD, color=self.color_negative),
            ColorBand(threshold_rating=OK_THRESHOLD, color=self.color_ok),
            ColorBand(threshold_rating=POSITIVE_THRESHOLD, color=self.color_positive),
        )

    @property
    def policy(self) -> InteractionPolicy:
        """Interaction guard derived from the disabled/read-only flags."""
        return InteractionPolicy(disabled=self.disabled, read_only=self.read_only)


@dataclass(frozen=True)
class StarRender:
    """Resolved state of one star.

    ``fill_color`` is the row color for FILLED and HALF stars and None for
    EMPTY stars, which the presentation layer strokes in a neutral color.
    """

    index: int
    state: StarVisualState
    fill_color: str | None


@dataclass(frozen=True)
class RenderedRow:
    """Everything the presentation layer needs for one render of the widget."""

    stars: tuple[StarRender, ...]
    color: str
    class_name: str
    label: str | None

    @property
    def states(self) -> list[StarVisualState]:
        """Visual states in star order."""
        return [star.state for star in self.stars]


@dataclass(frozen=True)
class RatingChangeEvent:
    """Change notification payload, emitted once per accepted interaction."""

    value: float
    previous: float
