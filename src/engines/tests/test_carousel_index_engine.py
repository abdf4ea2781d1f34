import pytest

from src.engines.carousel_index_engine import (
    CarouselWindow,
    compute_window,
    default_window,
    rotate_left,
    rotate_right,
)


@pytest.mark.parametrize("size", range(2, 9))
def test_rotation_is_invertible_and_in_range(size):
    for center in range(size):
        left = rotate_left(center, size)
        back = rotate_right(left.center, size)
        assert back.center == center

        right = rotate_right(center, size)
        assert rotate_left(right.center, size).center == center

        for window in (left, right, back):
            assert all(0 <= index < size for index in (window.left, window.center, window.right))


def test_rotate_left_wraps_around():
    assert rotate_left(0, 5) == CarouselWindow(left=3, center=4, right=0)


def test_rotate_right_wraps_around():
    assert rotate_right(4, 5) == CarouselWindow(left=4, center=0, right=1)


def test_filmstrip_navigate_right_from_one():
    assert compute_window("filmstrip", 1, 5, "filmstrip_right") == CarouselWindow(1, 2, 3)


def test_left_actions_rotate_left():
    assert compute_window("default", 2, 5, "manual_left").center == 1
    assert compute_window("filmstrip", 2, 5, "filmstrip_left").center == 1


def test_unknown_action_rotates_right():
    assert compute_window("default", 2, 5, "something_else").center == 3


def test_default_windows():
    assert default_window("default", 5) == CarouselWindow(4, 0, 1)
    assert compute_window("default", 0, 3) == CarouselWindow(2, 0, 1)


def test_filmstrip_default_window_is_not_bounded_by_size():
    # Kept as-is: the fixed window ignores how many images are available
    assert default_window("filmstrip", 2) == CarouselWindow(0, 1, 2)
