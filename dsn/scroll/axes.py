"""
Axis names.

There's a canonical name for each axis, and one for both axes together; next to those, a number of aliases is
recognized. Aliases are resolved as early as possible (i.e. when options or positions come in); anything downstream only
ever deals with the canonical names.
"""
from dsn.scroll.errors import AmbiguousAxis, InvalidAxisName
from dsn.scroll.structure import BOTH_AXES, HORIZONTAL, VERTICAL


ALIASES = {
    "vertical": VERTICAL,
    "v": VERTICAL,
    "y": VERTICAL,
    "top": VERTICAL,

    "horizontal": HORIZONTAL,
    "h": HORIZONTAL,
    "x": HORIZONTAL,
    "left": HORIZONTAL,

    "both": BOTH_AXES,
    "vh": BOTH_AXES,
    "hv": BOTH_AXES,
    "xy": BOTH_AXES,
    "yx": BOTH_AXES,
    "all": BOTH_AXES,
}


def canonicalize_axis_name(name):
    """
    Returns the canonical name for any of the recognized axis names.

    >>> canonicalize_axis_name("y")
    'vertical'
    >>> canonicalize_axis_name("left")
    'horizontal'
    >>> canonicalize_axis_name("xy")
    'both'

    Canonical names are recognized as themselves:
    >>> canonicalize_axis_name("horizontal")
    'horizontal'

    Anything else is an error; aliases are not case-insensitive:
    >>> canonicalize_axis_name("z")
    Traceback (most recent call last):
    ...
    dsn.scroll.errors.InvalidAxisName: Invalid axis name 'z'

    >>> canonicalize_axis_name("Y")
    Traceback (most recent call last):
    ...
    dsn.scroll.errors.InvalidAxisName: Invalid axis name 'Y'
    """
    if not isinstance(name, str) or name not in ALIASES:
        raise InvalidAxisName(name)

    return ALIASES[name]


def canonicalize_axis_keys(mapping):
    """
    Returns a copy of a mapping, with any keys that are axis names replaced by their canonical names. Other keys are
    left as they are.

    >>> sorted(canonicalize_axis_keys({"y": 100, "x": "50%", "duration": 200}).items())
    [('duration', 200), ('horizontal', '50%'), ('vertical', 100)]

    The mapping itself is left alone:
    >>> original = {"v": 1}
    >>> canonicalize_axis_keys(original)
    {'vertical': 1}
    >>> original
    {'v': 1}
    """
    result = {}
    for key, value in mapping.items():
        if isinstance(key, str) and key in ALIASES:
            result[ALIASES[key]] = value
        else:
            result[key] = value

    return result


def other_axis(axis):
    """
    >>> other_axis("vertical")
    'horizontal'
    """
    if axis == HORIZONTAL:
        return VERTICAL
    if axis == VERTICAL:
        return HORIZONTAL
    raise AmbiguousAxis(axis)
