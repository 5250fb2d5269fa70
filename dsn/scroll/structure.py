from collections import namedtuple


HORIZONTAL = "horizontal"
VERTICAL = "vertical"
BOTH_AXES = "both"

SINGLE_AXES = (HORIZONTAL, VERTICAL)

MODE_REPLACE = "replace"
MODE_APPEND = "append"
MODE_MERGE = "merge"

MODES = (MODE_REPLACE, MODE_APPEND, MODE_MERGE)

DEFAULT_AXIS = VERTICAL
DEFAULT_QUEUE_ID = "internal.scroll"
DEFAULT_MODE = MODE_REPLACE


class IgnoreAxis(object):
    """The type of IGNORE_AXIS; there is exactly one instance of it, compare using `is`."""

    def __repr__(self):
        return "IGNORE_AXIS"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


IGNORE_AXIS = IgnoreAxis()


class Coordinates(namedtuple('Coordinates', ('horizontal', 'vertical'))):
    """A fully resolved scroll target. Each value is an int within the scroll range, or IGNORE_AXIS."""

    __slots__ = ()

    def for_axis(self, axis):
        return getattr(self, axis)

    def with_axis(self, axis, value):
        return self._replace(**{axis: value})


IGNORED_COORDINATES = Coordinates(IGNORE_AXIS, IGNORE_AXIS)


class ScrollOptions(object):

    def __init__(self, axis, queue_id, mode, extra=None):
        """`axis` is the canonical name of the axis (or both axes) the scroll applies to; `queue_id` names the queue
        whose pending movements may serve as a base; `mode` is one of MODES. `extra` holds any options which have no
        meaning for the resolution itself but which are passed on untouched (e.g. the duration of an animation)."""
        self.axis = axis
        self.queue_id = queue_id
        self.mode = mode
        self.extra = dict(extra) if extra else {}

    def __repr__(self):
        return "ScrollOptions(%s, %s, %s)" % (self.axis, self.queue_id, self.mode)

    def __eq__(self, other):
        if not isinstance(other, ScrollOptions):
            return False
        return (self.axis, self.queue_id, self.mode, self.extra) == (
            other.axis, other.queue_id, other.mode, other.extra)

    def pinned_to(self, axis):
        """A copy of the options, restricted to a single axis."""
        return ScrollOptions(axis, self.queue_id, self.mode, self.extra)


class Position(object):
    """A requested scroll position, as classified from the raw input; use PrimitivePosition or PerAxisPosition."""

    def __init__(self, *args, **kwargs):
        raise TypeError("Position is Abstract; use PrimitivePosition or PerAxisPosition instead")


class PrimitivePosition(Position):
    """A single value (number or string, or an 'undefined' value) which applies to one axis."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return "PrimitivePosition(%r)" % (self.value,)


class PerAxisPosition(Position):
    """A value per axis; the mapping is keyed by canonical axis names."""

    def __init__(self, values):
        self.values = values

    def __repr__(self):
        return "PerAxisPosition(%r)" % (self.values,)

    def get(self, axis):
        return self.values.get(axis)
