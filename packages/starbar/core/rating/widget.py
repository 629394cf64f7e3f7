"""Star-rating widget host - owns the rating and coordinates the core.

The widget keeps the only mutable state (current rating, configuration,
hover preview) and drives the pure core functions:

1. An interaction arrives (click or key-down)
2. ``compute_next_rating`` produces a candidate or None
3. On a change the rating is stored and the row recomputed
4. Listeners receive one ``RatingChangeEvent``

The widget is not re-entrant: listeners run after the new state is stored,
one interaction at a time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from starbar.core.rating.events import Click, InteractionEvent, parse_key
from starbar.core.rating.input import compute_next_rating
from starbar.core.rating.models import RatingChangeEvent, RatingConfig, RenderedRow
from starbar.core.rating.presentation import container_classes, format_label
from starbar.core.rating.resolver import RatingResolver
from starbar.core.utils.logging import get_logger
from starbar.core.utils.math import clamp

RatingListener = Callable[[RatingChangeEvent], None]


class StarRatingWidget:
    """Interactive star-rating widget.

    Example:
        widget = StarRatingWidget(RatingConfig(rating=3, number_of_stars=6))
        widget.add_listener(lambda event: print(event.value))

        widget.key_down("ArrowUp")   # prints 4.0
        widget.click(6)              # prints 6.0
        widget.key_down("ArrowUp")   # at max, no notification

        row = widget.render()
    """

    def __init__(self, config: RatingConfig | None = None, widget_id: str | None = None):
        """Initialize the widget.

        Args:
            config: Widget configuration, defaults to RatingConfig()
            widget_id: Host name for the widget, attached to its log records
        """
        if widget_id:
            self._logger = get_logger(__name__, widget_id=widget_id)
        else:
            self._logger = get_logger(__name__)
        self._config = config or RatingConfig()
        self._resolver = RatingResolver(self._config)
        self._listeners: list[RatingListener] = []
        self._hover_index: int | None = None
        self._row = self._resolver.resolve_row()

    @property
    def config(self) -> RatingConfig:
        """Current configuration (rating included)."""
        return self._config

    @property
    def rating(self) -> float:
        """Current rating."""
        return self._config.rating

    @property
    def interactive(self) -> bool:
        """False when the widget is disabled or read-only."""
        return not self._config.policy.locked

    def update(self, **changes: Any) -> RatingConfig:
        """Apply host property changes.

        Property changes come from the host and never notify listeners.

        Args:
            **changes: RatingConfig fields (snake_case or camelCase names)

        Returns:
            The new configuration

        Raises:
            ValidationError: If the resulting configuration is invalid
        """
        self._set_config(RatingConfig.model_validate({**self._config.model_dump(), **changes}))
        return self._config

    def add_listener(self, listener: RatingListener) -> None:
        """Register a change listener."""
        self._listeners.append(listener)

    def remove_listener(self, listener: RatingListener) -> None:
        """Unregister a change listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def click(self, star_index: int) -> float | None:
        """Handle a click on the 1-based ``star_index``."""
        return self.dispatch(Click(star_index))

    def key_down(self, key: str) -> float | None:
        """Handle a key-down with a raw key or code identifier."""
        event = parse_key(key)
        if event is None:
            self._logger.debug("Ignoring unmapped key %r", key)
            return None
        return self.dispatch(event)

    def dispatch(self, event: InteractionEvent) -> float | None:
        """Run one interaction through the input controller.

        Args:
            event: Click or KeyPress

        Returns:
            The new rating if it changed, else None
        """
        previous = self.rating
        new_rating = compute_next_rating(
            previous, event, self._config.star_count, self._config.policy
        )
        if new_rating is None:
            return None

        self._set_config(self._config.model_copy(update={"rating": new_rating}))
        self._logger.debug("Rating changed %s -> %s", previous, new_rating)

        change = RatingChangeEvent(value=new_rating, previous=previous)
        for listener in list(self._listeners):
            listener(change)
        return new_rating

    def hover(self, star_index: int) -> None:
        """Preview ``star_index`` as the rating while the pointer is over it.

        Has no effect unless hover is enabled and the widget is interactive.
        """
        if not (self._config.hover_enabled and self.interactive):
            return
        self._hover_index = clamp(star_index, 0, self._config.star_count)
        self._row = self._resolver.resolve_row(float(self._hover_index))

    def clear_hover(self) -> None:
        """End the hover preview."""
        if self._hover_index is None:
            return
        self._hover_index = None
        self._row = self._resolver.resolve_row()

    def render(self) -> RenderedRow:
        """Presentation state of the current render."""
        shown = self.rating if self._hover_index is None else float(self._hover_index)
        return RenderedRow(
            stars=tuple(self._row),
            color=self._resolver.resolve_color(shown),
            class_name=container_classes(self._config, shown),
            label=format_label(self._config, shown),
        )

    def _set_config(self, config: RatingConfig) -> None:
        self._config = config
        self._resolver = RatingResolver(config)
        self._hover_index = None
        self._row = self._resolver.resolve_row()
