"""Slideshow business logic - platform agnostic.

A slideshow shows one slide at a time from an ordered, immutable collection
and cycles through it with wraparound at both ends.

Example:
    from src.core.slideshow import Slideshow

    show = Slideshow(["X", "Y", "Z"])
    show.previous()
    show.current_slide  # "Z"
    view = show.render()
    [dot.active for dot in view.indicators]  # [False, False, True]
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from src.core.errors import SlideIndexError

T = TypeVar("T")


@dataclass(frozen=True)
class SlideshowState(Generic[T]):
    """Position of a slideshow over its slides."""

    slides: tuple[T, ...]
    current_index: int = 0

    @property
    def total_slides(self) -> int:
        return len(self.slides)

    @property
    def is_empty(self) -> bool:
        return not self.slides

    @property
    def current_slide(self) -> T | None:
        if 0 <= self.current_index < len(self.slides):
            return self.slides[self.current_index]
        return None


@dataclass(frozen=True)
class SlideIndicator:
    """One indicator dot; clicking it jumps to ``index``."""

    index: int
    active: bool


@dataclass(frozen=True)
class SlideshowView(Generic[T]):
    """Everything a client needs to draw a slideshow."""

    slide: T | None
    current_index: int | None
    total_slides: int
    prev_index: int | None
    next_index: int | None
    controls_enabled: bool
    indicators: list[SlideIndicator] = field(default_factory=list)


class SlideshowController(Generic[T]):
    """Pure transitions over SlideshowState.

    An empty slideshow has no valid position, so next and previous leave it
    unchanged instead of computing a modulo by zero.
    """

    def next_slide(self, state: SlideshowState[T]) -> SlideshowState[T]:
        """Move to the next slide, wrapping from last to first."""
        if state.is_empty:
            return state
        return SlideshowState(
            slides=state.slides,
            current_index=(state.current_index + 1) % state.total_slides,
        )

    def prev_slide(self, state: SlideshowState[T]) -> SlideshowState[T]:
        """Move to the previous slide, wrapping from first to last."""
        if state.is_empty:
            return state
        total = state.total_slides
        return SlideshowState(
            slides=state.slides,
            current_index=(state.current_index - 1 + total) % total,
        )

    def go_to_index(self, state: SlideshowState[T], index: int) -> SlideshowState[T]:
        """Jump to a specific slide.

        Raises:
            SlideIndexError: If index is outside [0, total_slides).
        """
        if not 0 <= index < state.total_slides:
            raise SlideIndexError(index, state.total_slides)
        return SlideshowState(slides=state.slides, current_index=index)

    def render(self, state: SlideshowState[T]) -> SlideshowView[T]:
        """Build the view for the current position."""
        if state.is_empty:
            return SlideshowView(
                slide=None,
                current_index=None,
                total_slides=0,
                prev_index=None,
                next_index=None,
                controls_enabled=False,
            )
        return SlideshowView(
            slide=state.current_slide,
            current_index=state.current_index,
            total_slides=state.total_slides,
            prev_index=self.prev_slide(state).current_index,
            next_index=self.next_slide(state).current_index,
            controls_enabled=True,
            indicators=[
                SlideIndicator(index=i, active=i == state.current_index)
                for i in range(state.total_slides)
            ],
        )


class Slideshow(Generic[T]):
    """A slideshow instance that owns its own position.

    Instances never share state; two slideshows over the same slides move
    independently.
    """

    def __init__(
        self,
        slides: Sequence[T],
        controller: SlideshowController[T] | None = None,
    ) -> None:
        self._state: SlideshowState[T] = SlideshowState(slides=tuple(slides))
        self._controller: SlideshowController[T] = controller or SlideshowController()

    @property
    def state(self) -> SlideshowState[T]:
        return self._state

    @property
    def current_index(self) -> int | None:
        """Current position, or None when there are no slides."""
        if self._state.is_empty:
            return None
        return self._state.current_index

    @property
    def current_slide(self) -> T | None:
        return self._state.current_slide

    @property
    def total_slides(self) -> int:
        return self._state.total_slides

    def next(self) -> None:
        self._state = self._controller.next_slide(self._state)

    def previous(self) -> None:
        self._state = self._controller.prev_slide(self._state)

    def jump(self, index: int) -> None:
        """Jump straight to ``index``; the position is unchanged on error."""
        self._state = self._controller.go_to_index(self._state, index)

    def render(self) -> SlideshowView[T]:
        return self._controller.render(self._state)

    def __len__(self) -> int:
        return self._state.total_slides

    def __repr__(self) -> str:
        return (
            f"Slideshow(total_slides={self._state.total_slides}, "
            f"current_index={self.current_index})"
        )
