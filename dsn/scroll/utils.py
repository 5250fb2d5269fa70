"""
All sizes and positions are scalars, measured in pixels along a single axis. The tools below apply to either axis.

Scroll positions are always rounded to ints. Measuring a scroll position cuts off fractional pixels rather than rounding
them; without explicit rounding, repeated relative moves would drift.

## Fractions

Scroll positions may also be expressed as fractions of the scroll range: floats in the domain [0, 1], or None (meaning:
scrolling is impossible, because the viewport is at least as large as the document).
"""
from math import floor, isinf, isnan

from dsn.scroll.structure import IGNORE_AXIS


def max_scroll_position(document_size, viewport_size):
    """
    The largest position the top (or left) of the viewport can be scrolled to.

    >>> max_scroll_position(500, 200)
    300

    If the viewport is larger than the document, no scrolling is possible:
    >>> max_scroll_position(15, 1000)
    0
    """
    return max(0, int(document_size - viewport_size))


def limit_to_scroll_range(position, maximum):
    """
    Returns a position inside the scroll range, given a position that's potentially outside it.

    In-bounds, no effect is achieved by bounding; this includes both edges of the range:
    >>> limit_to_scroll_range(250, 300)
    250
    >>> limit_to_scroll_range(300, 300)
    300
    >>> limit_to_scroll_range(0, 300)
    0

    >>> limit_to_scroll_range(-100, 300)
    0
    >>> limit_to_scroll_range(400, 300)
    300
    """
    position = min(position, maximum)
    position = max(position, 0)
    return position


def round_half_up(value):
    """
    Rounds to the nearest int; halves are rounded up (towards positive infinity), not to the nearest even number.

    >>> round_half_up(2.5)
    3
    >>> round_half_up(-2.5)
    -2
    >>> round_half_up(99.4)
    99

    Ints are returned as they are, however large:
    >>> round_half_up(10 ** 400) == 10 ** 400
    True
    """
    if isinstance(value, int):
        return value
    return int(floor(value + 0.5))


def is_number(value):
    """
    >>> is_number(12.5)
    True

    Booleans are ints as far as Python is concerned, but not as far as we are:
    >>> is_number(False)
    False

    >>> is_number(float("nan"))
    False

    Ints are never infinite, even when they are too large to be a float:
    >>> is_number(10 ** 400)
    True
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return not (isnan(value) or isinf(value))
    return False


def is_undefined_position_value(value):
    """
    A position value is considered undefined when it's None, False or an empty string. For single values only, not for
    mappings.

    >>> [is_undefined_position_value(v) for v in (None, False, "")]
    [True, True, True]

    Zero is a perfectly well defined position (although it compares equal to False):
    >>> [is_undefined_position_value(v) for v in (0, 0.0, "0")]
    [False, False, False]
    """
    return value is None or value is False or (isinstance(value, str) and value == "")


def is_ignorable_position_value(value):
    """
    >>> is_ignorable_position_value(IGNORE_AXIS)
    True
    """
    return value is IGNORE_AXIS or is_undefined_position_value(value)


def fraction_for_position(position, maximum):
    """
    >>> fraction_for_position(150, 300)
    0.5

    >>> fraction_for_position(0, 0) is None
    True
    """
    if maximum <= 0:
        return None

    return position / maximum


def position_for_fraction(fraction, maximum):
    """
    The position is truncated, just like a measurement of the scroll position would be:

    >>> position_for_fraction(0.5, 301)
    150

    >>> position_for_fraction(None, 300)
    0
    """
    if fraction is None:
        # If scrolling is impossible, we're at the top.
        return 0

    return int(maximum * fraction)
