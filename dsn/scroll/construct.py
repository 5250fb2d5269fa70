import logging
from collections.abc import Mapping

from dsn.scroll.axes import canonicalize_axis_keys, other_axis
from dsn.scroll.errors import AmbiguousAxis, AxisKeywordMismatch, InvalidPositionValue
from dsn.scroll.probe import last_queued_target
from dsn.scroll.structure import (
    Coordinates,
    HORIZONTAL,
    IGNORE_AXIS,
    IGNORED_COORDINATES,
    MODE_APPEND,
    MODE_MERGE,
    PerAxisPosition,
    PrimitivePosition,
    SINGLE_AXES,
    VERTICAL,
)
from dsn.scroll.utils import is_ignorable_position_value, is_number, limit_to_scroll_range, round_half_up

logger = logging.getLogger(__name__)

# keyword => (axis it belongs to, whether it means the end of the scroll range)
POSITION_KEYWORDS = {
    "left": (HORIZONTAL, False),
    "right": (HORIZONTAL, True),
    "top": (VERTICAL, False),
    "bottom": (VERTICAL, True),
}


def position_for_input(raw_position):
    """Classifies raw input as either a PerAxisPosition (for mappings) or a PrimitivePosition (anything else)."""
    if isinstance(raw_position, Mapping):
        return PerAxisPosition(canonicalize_axis_keys(raw_position))

    return PrimitivePosition(raw_position)


def start_position(container, axis, mode, range_probe, queue_view, queue_id):
    """The position a relative move starts from: the current position, unless the move is appended to (or merged with)
    pending moves; in that case the position those moves arrive at."""
    position = IGNORE_AXIS

    if mode in (MODE_APPEND, MODE_MERGE):
        position = last_queued_target(queue_view, queue_id, axis)

    if position is IGNORE_AXIS:
        position = range_probe.current_position(container, axis)

    return position


def _resolve_string(value, container, axis, range_probe):
    """Resolves units and keywords; returns a number, or the (remaining) string if that's impossible.

    Numbers read from the string itself are always finite; the number returned may still be infinite when a percentage
    overflows."""
    if value.endswith("px"):
        return _parse_number(value[:-2], value)

    if value.endswith("%"):
        return _parse_number(value[:-1], value) * range_probe.max_position(container, axis) / 100

    if value in POSITION_KEYWORDS:
        keyword_axis, at_end = POSITION_KEYWORDS[value]
        if keyword_axis != axis:
            raise AxisKeywordMismatch(value, axis)

        return range_probe.max_position(container, axis) if at_end else 0

    number = _float_or_none(value)
    return value if number is None else number


def _float_or_none(text):
    # float() also reads "1_000", "nan" and "inf"; none of these is a position
    if "_" in text:
        return None

    try:
        number = float(text)
    except ValueError:
        return None

    return number if is_number(number) else None


def _parse_number(text, value):
    number = _float_or_none(text)
    if number is None:
        raise InvalidPositionValue(value)
    return number


def resolve_primitive(value, container, options, range_probe, queue_view):
    """Resolves a single value on the single axis given by options.axis. The other axis is set to IGNORE_AXIS."""
    axis = options.axis

    # We need a precise statement of the axis here; "both" won't do.
    if axis not in SINGLE_AXES:
        raise AmbiguousAxis(axis)

    original_value = value
    base_position = 0
    sign = 1

    if isinstance(value, str):
        value = value.lower()

        prefix = value[:2]
        if prefix in ("+=", "-="):
            value = value[2:]
            sign = 1 if prefix == "+=" else -1
            base_position = start_position(
                container, axis, options.mode, range_probe, queue_view, options.queue_id)

        value = _resolve_string(value, container, axis, range_probe)
        numeric = not isinstance(value, str)

    else:
        numeric = is_number(value)

    if numeric:
        # Bounding first, so that overflowing values (infinite floats, ints too large for a float) end up at the edges
        # of the range. The bounds are ints, so the result is the same as rounding first.
        position = limit_to_scroll_range(base_position + sign * value, range_probe.max_position(container, axis))
        resolved = round_half_up(position)

    elif is_ignorable_position_value(value):
        # In merge mode, an axis which isn't scrolled takes over the target of the queue (if any)
        if options.mode == MODE_MERGE:
            resolved = last_queued_target(queue_view, options.queue_id, axis)
        else:
            resolved = IGNORE_AXIS

    else:
        raise InvalidPositionValue(original_value)

    return IGNORED_COORDINATES.with_axis(axis, resolved)


def resolve_per_axis(position, container, options, range_probe, queue_view):
    """Resolves each axis of a PerAxisPosition independently. Axes excluded by options.axis are not scrolled (but they
    may inherit the queue's target in merge mode)."""
    resolved = {}

    for axis in SINGLE_AXES:
        if options.axis == other_axis(axis):
            if options.mode == MODE_MERGE:
                resolved[axis] = last_queued_target(queue_view, options.queue_id, axis)
            else:
                resolved[axis] = IGNORE_AXIS
            continue

        value = position.get(axis)
        if isinstance(value, Mapping):
            raise InvalidPositionValue(value)

        resolved[axis] = resolve_primitive(
            value, container, options.pinned_to(axis), range_probe, queue_view).for_axis(axis)

    return Coordinates(resolved[HORIZONTAL], resolved[VERTICAL])


def resolve_position(raw_position, container, options, range_probe, queue_view):
    """
    Returns the Coordinates for a raw position: a number, a string or a mapping of axis names to either of those. The
    options must be resolved already (see resolve_options); the raw position is left untouched.
    """
    position = position_for_input(raw_position)

    if isinstance(position, PerAxisPosition):
        coordinates = resolve_per_axis(position, container, options, range_probe, queue_view)

    elif isinstance(position, PrimitivePosition):
        coordinates = resolve_primitive(position.value, container, options, range_probe, queue_view)

    else:
        raise Exception("Unknown type of position (programming error): %s" % position)

    logger.debug("Resolved %r with %r to %r", raw_position, options, coordinates)
    return coordinates
