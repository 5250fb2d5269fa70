from collections.abc import Mapping

from dsn.scroll.axes import canonicalize_axis_keys, canonicalize_axis_name
from dsn.scroll.errors import InvalidScrollMode
from dsn.scroll.structure import (
    BOTH_AXES,
    DEFAULT_AXIS,
    DEFAULT_MODE,
    DEFAULT_QUEUE_ID,
    HORIZONTAL,
    MODE_APPEND,
    MODE_MERGE,
    MODES,
    ScrollOptions,
    VERTICAL,
)
from dsn.scroll.utils import is_ignorable_position_value

# Keys with a meaning of their own; anything else ends up in ScrollOptions.extra
OPTION_KEYS = ("axis", "queue_id", "queue", "mode", "append", "merge")


def default_axis_for_position(position):
    """
    The axis that's implied by the shape of a (not yet resolved) position.

    >>> default_axis_for_position({"x": 10, "y": 20})
    'both'
    >>> default_axis_for_position({"x": 10, "y": None})
    'horizontal'
    >>> default_axis_for_position("Bottom")
    'vertical'
    >>> default_axis_for_position("right")
    'horizontal'
    >>> default_axis_for_position(100)
    'vertical'
    """
    if isinstance(position, Mapping):
        position = canonicalize_axis_keys(position)
        has_x = not is_ignorable_position_value(position.get(HORIZONTAL))
        has_y = not is_ignorable_position_value(position.get(VERTICAL))

        if has_x and has_y:
            return BOTH_AXES
        if has_x:
            return HORIZONTAL
        return VERTICAL

    if isinstance(position, str):
        position = position.lower()

        if position in ("top", "bottom"):
            return VERTICAL
        if position in ("left", "right"):
            return HORIZONTAL

    return DEFAULT_AXIS


def scroll_mode_for_options(options):
    """
    An explicit mode takes precedence; otherwise the flags `append` and `merge` are looked at, in that order.

    >>> scroll_mode_for_options({"merge": True})
    'merge'
    >>> scroll_mode_for_options({"append": True, "merge": True})
    'append'
    >>> scroll_mode_for_options({})
    'replace'
    """
    if options.get("mode") is not None:
        mode = options["mode"]
        if not isinstance(mode, str) or mode.lower() not in MODES:
            raise InvalidScrollMode(mode)
        return mode.lower()

    if options.get("append"):
        return MODE_APPEND
    if options.get("merge"):
        return MODE_MERGE
    return DEFAULT_MODE


def resolve_options(raw_options=None, position=None):
    """Returns ScrollOptions for the raw options (a mapping, or None), with the defaults filled in.

    The position is only used to derive the default axis; it may be omitted when there's no position to speak of (e.g.
    when stopping a scroll). The raw options are not touched.
    """
    options = canonicalize_axis_keys(raw_options) if raw_options else {}

    axis = default_axis_for_position(position)
    if options.get("axis") is not None:
        axis = canonicalize_axis_name(options["axis"])

    if options.get("queue_id") is not None:
        queue_id = options["queue_id"]
    elif options.get("queue") is not None:
        queue_id = options["queue"]
    else:
        queue_id = DEFAULT_QUEUE_ID

    extra = {key: value for key, value in options.items() if key not in OPTION_KEYS}

    return ScrollOptions(axis, queue_id, scroll_mode_for_options(options), extra)
