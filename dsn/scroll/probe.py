"""
The two things a scroll resolution needs to know about the world outside of it: the dimensions of the container that's
being scrolled (a RangeProbe) and the scroll movements which are still pending (a QueueView). Both are only read.
"""
from collections.abc import Mapping

from dsn.scroll.errors import AmbiguousAxis
from dsn.scroll.structure import BOTH_AXES, Coordinates, HORIZONTAL, IGNORE_AXIS, SINGLE_AXES, VERTICAL
from dsn.scroll.utils import max_scroll_position


class RangeProbe(object):
    """Measures containers. `axis` is always either HORIZONTAL or VERTICAL."""

    def current_position(self, container, axis):
        raise NotImplementedError()

    def max_position(self, container, axis):
        raise NotImplementedError()


class QueueView(object):
    """A view on the pending scroll targets of each queue; `snapshot` returns them oldest first."""

    def snapshot(self, queue_id):
        raise NotImplementedError()


class EmptyQueueView(QueueView):
    """For when no queue exists (or when it should be disregarded)."""

    def snapshot(self, queue_id):
        return ()


class ScrollSurface(object):
    def __init__(self, document_width, document_height, viewport_width, viewport_height, scroll_left=0, scroll_top=0):
        """A plain measurable surface: a document shown through a (smaller) viewport, scrolled to some position."""
        self.document_width = document_width
        self.document_height = document_height
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.scroll_left = scroll_left
        self.scroll_top = scroll_top

    def __repr__(self):
        return "ScrollSurface(%sx%s in %sx%s at %s, %s)" % (
            self.document_width, self.document_height, self.viewport_width, self.viewport_height,
            self.scroll_left, self.scroll_top)


class SurfaceProbe(RangeProbe):
    """
    >>> surface = ScrollSurface(800, 2000, 300, 1000, scroll_top=100)
    >>> probe = SurfaceProbe()
    >>> probe.max_position(surface, VERTICAL), probe.current_position(surface, VERTICAL)
    (1000, 100)
    >>> probe.max_position(surface, HORIZONTAL), probe.current_position(surface, HORIZONTAL)
    (500, 0)
    """

    def current_position(self, container, axis):
        if axis == HORIZONTAL:
            return int(container.scroll_left)
        if axis == VERTICAL:
            return int(container.scroll_top)
        raise AmbiguousAxis(axis)

    def max_position(self, container, axis):
        if axis == HORIZONTAL:
            return max_scroll_position(container.document_width, container.viewport_width)
        if axis == VERTICAL:
            return max_scroll_position(container.document_height, container.viewport_height)
        raise AmbiguousAxis(axis)


def _entry_target(entry, axis):
    if entry is None:
        return IGNORE_AXIS

    if isinstance(entry, Coordinates):
        value = entry.for_axis(axis)
    elif isinstance(entry, Mapping):
        value = entry.get(axis)
    else:
        return IGNORE_AXIS

    return IGNORE_AXIS if value is None else value


def last_queued_target(queue_view, queue_id, axis=BOTH_AXES):
    """
    Returns the position which all queued scroll movements eventually arrive at. Queue entries may target a single axis
    only; the axes are therefore looked up independently of each other.

    >>> class ListQueueView(QueueView):
    ...     def __init__(self, entries):
    ...         self.entries = entries
    ...     def snapshot(self, queue_id):
    ...         return self.entries
    ...
    >>> view = ListQueueView([{VERTICAL: 50}, Coordinates(80, IGNORE_AXIS)])
    >>> last_queued_target(view, "q")
    Coordinates(horizontal=80, vertical=50)

    When asked for a single axis, the value is returned as such:
    >>> last_queued_target(view, "q", VERTICAL)
    50

    Without any info for an axis, the result is IGNORE_AXIS:
    >>> last_queued_target(EmptyQueueView(), "q", HORIZONTAL)
    IGNORE_AXIS
    """
    last = {HORIZONTAL: IGNORE_AXIS, VERTICAL: IGNORE_AXIS}

    for entry in queue_view.snapshot(queue_id):
        for a in SINGLE_AXES:
            target = _entry_target(entry, a)
            if target is not IGNORE_AXIS:
                last[a] = target

    if axis == BOTH_AXES:
        return Coordinates(last[HORIZONTAL], last[VERTICAL])

    if axis not in SINGLE_AXES:
        raise AmbiguousAxis(axis)

    return last[axis]
