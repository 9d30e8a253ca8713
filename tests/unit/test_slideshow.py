"""Tests for slideshow business logic."""

import pytest

from src.core.errors import SlideIndexError
from src.core.slideshow import (
    SlideIndicator,
    Slideshow,
    SlideshowController,
    SlideshowState,
)


class TestSlideshowState:
    def test_empty_slideshow(self):
        state: SlideshowState[str] = SlideshowState(slides=())
        assert state.total_slides == 0
        assert state.is_empty
        assert state.current_slide is None

    def test_single_slide(self):
        state: SlideshowState[str] = SlideshowState(slides=("a",))
        assert state.current_slide == "a"
        assert not state.is_empty

    def test_starts_at_first_slide(self):
        state: SlideshowState[str] = SlideshowState(slides=("a", "b", "c"))
        assert state.current_index == 0
        assert state.current_slide == "a"

    def test_is_immutable(self):
        state: SlideshowState[str] = SlideshowState(slides=("a", "b"))
        with pytest.raises(AttributeError):
            state.current_index = 1  # type: ignore[misc]


class TestSlideshowController:
    def test_next_slide(self):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b", "c"))
        new_state = controller.next_slide(state)
        assert new_state.current_index == 1
        assert new_state.current_slide == "b"

    def test_next_at_end_wraps_to_first(self):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b", "c"), current_index=2)
        assert controller.next_slide(state).current_index == 0

    def test_prev_slide(self):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b", "c"), current_index=2)
        assert controller.prev_slide(state).current_index == 1

    def test_prev_at_start_wraps_to_last(self):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b", "c"))
        assert controller.prev_slide(state).current_index == 2

    def test_transitions_return_new_state(self):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b"))
        controller.next_slide(state)
        assert state.current_index == 0

    def test_go_to_valid_index(self):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b", "c"))
        assert controller.go_to_index(state, 2).current_index == 2

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_go_to_invalid_index_raises(self, index):
        controller: SlideshowController[str] = SlideshowController()
        state = SlideshowState(slides=("a", "b", "c"))
        with pytest.raises(SlideIndexError) as exc_info:
            controller.go_to_index(state, index)
        assert exc_info.value.index == index
        assert exc_info.value.total_slides == 3

    def test_empty_next_and_prev_are_noops(self):
        controller: SlideshowController[str] = SlideshowController()
        state: SlideshowState[str] = SlideshowState(slides=())
        assert controller.next_slide(state) is state
        assert controller.prev_slide(state) is state

    def test_empty_go_to_index_raises(self):
        controller: SlideshowController[str] = SlideshowController()
        with pytest.raises(SlideIndexError, match="empty"):
            controller.go_to_index(SlideshowState(slides=()), 0)

    def test_render_marks_current_indicator(self):
        controller: SlideshowController[str] = SlideshowController()
        view = controller.render(SlideshowState(slides=("a", "b", "c"), current_index=1))
        assert view.slide == "b"
        assert view.current_index == 1
        assert view.total_slides == 3
        assert view.prev_index == 0
        assert view.next_index == 2
        assert view.controls_enabled
        assert view.indicators == [
            SlideIndicator(index=0, active=False),
            SlideIndicator(index=1, active=True),
            SlideIndicator(index=2, active=False),
        ]

    def test_render_controls_wrap_at_the_edges(self):
        controller: SlideshowController[str] = SlideshowController()
        first = controller.render(SlideshowState(slides=("a", "b", "c")))
        last = controller.render(SlideshowState(slides=("a", "b", "c"), current_index=2))
        assert first.prev_index == 2
        assert last.next_index == 0

    def test_render_empty(self):
        controller: SlideshowController[str] = SlideshowController()
        view = controller.render(SlideshowState(slides=()))
        assert view.slide is None
        assert view.current_index is None
        assert view.total_slides == 0
        assert view.prev_index is None
        assert view.next_index is None
        assert not view.controls_enabled
        assert view.indicators == []


class TestSlideshowWraparound:
    @pytest.mark.parametrize("total", [2, 3, 5, 8])
    def test_next_cycles_through_every_position(self, total):
        for start in range(total):
            show = Slideshow(list(range(total)))
            show.jump(start)
            for k in range(1, total + 1):
                show.next()
                assert show.current_index == (start + k) % total
            assert show.current_index == start

    @pytest.mark.parametrize("total", [2, 3, 5, 8])
    def test_previous_cycles_through_every_position(self, total):
        for start in range(total):
            show = Slideshow(list(range(total)))
            show.jump(start)
            for k in range(1, total + 1):
                show.previous()
                assert show.current_index == (start - k + total) % total
            assert show.current_index == start

    @pytest.mark.parametrize("total", [1, 2, 4])
    def test_next_then_previous_restores_index(self, total):
        for start in range(total):
            show = Slideshow(list(range(total)))
            show.jump(start)
            show.next()
            show.previous()
            assert show.current_index == start
            show.previous()
            show.next()
            assert show.current_index == start

    def test_jump_is_independent_of_prior_state(self):
        show = Slideshow(["a", "b", "c", "d"])
        for before in range(4):
            for target in range(4):
                show.jump(before)
                show.jump(target)
                assert show.current_index == target
                assert show.current_slide == "abcd"[target]

    def test_single_slide_never_moves(self):
        show = Slideshow(["only"])
        for _ in range(3):
            show.next()
            assert show.current_index == 0
            show.previous()
            assert show.current_index == 0


class TestSlideshow:
    def test_advances_and_wraps(self):
        show = Slideshow(["X", "Y", "Z"])
        observed = []
        for _ in range(3):
            show.next()
            observed.append(show.current_index)
        assert observed == [1, 2, 0]

    def test_previous_from_start_wraps_to_last(self):
        show = Slideshow(["X", "Y", "Z"])
        show.previous()
        assert show.current_index == 2
        assert show.current_slide == "Z"

    def test_jump_to_last_then_next_wraps(self):
        show = Slideshow(["A", "B", "C", "D"])
        show.jump(3)
        assert show.current_index == 3
        show.next()
        assert show.current_index == 0

    def test_empty_renders_without_active_slide(self):
        show: Slideshow[str] = Slideshow([])
        show.next()
        show.previous()
        view = show.render()
        assert show.current_index is None
        assert show.current_slide is None
        assert view.slide is None
        assert view.indicators == []
        assert len(show) == 0

    def test_failed_jump_keeps_position(self):
        show = Slideshow(["a", "b", "c"])
        show.next()
        with pytest.raises(SlideIndexError):
            show.jump(7)
        assert show.current_index == 1

    def test_instances_are_independent(self):
        slides = ["a", "b", "c"]
        good = Slideshow(slides)
        bad = Slideshow(slides)
        good.next()
        good.next()
        bad.previous()
        assert good.current_index == 2
        assert bad.current_index == 2
        good.next()
        assert good.current_index == 0
        assert bad.current_index == 2

    def test_later_changes_to_source_list_are_ignored(self):
        slides = ["a", "b"]
        show = Slideshow(slides)
        slides.append("c")
        assert show.total_slides == 2

    def test_render_reflects_position(self):
        show = Slideshow(["a", "b", "c"])
        show.previous()
        view = show.render()
        assert view.slide == "c"
        assert [dot.active for dot in view.indicators] == [False, False, True]

    def test_repr(self):
        show = Slideshow(["a", "b"])
        assert repr(show) == "Slideshow(total_slides=2, current_index=0)"
