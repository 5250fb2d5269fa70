"""
Kivy's ScrollView expresses its scroll position as fractions (scroll_x, scroll_y) of the scrollable range rather than in
pixels; moreover, scroll_y runs from the bottom (0) to the top (1). The probe below translates that into pixel offsets
measured from the left and the top, which is what the dsn 'scroll' expects.
"""
from kivy.uix.scrollview import ScrollView

from utils import pmts

from dsn.scroll.errors import AmbiguousAxis
from dsn.scroll.probe import RangeProbe
from dsn.scroll.structure import Coordinates, HORIZONTAL, IGNORE_AXIS, VERTICAL
from dsn.scroll.utils import fraction_for_position, max_scroll_position, position_for_fraction

X = 0
Y = 1


class ScrollViewProbe(RangeProbe):

    def max_position(self, container, axis):
        pmts(container, ScrollView)

        if axis == HORIZONTAL:
            return max_scroll_position(container.viewport_size[X], container.width)
        if axis == VERTICAL:
            return max_scroll_position(container.viewport_size[Y], container.height)
        raise AmbiguousAxis(axis)

    def current_position(self, container, axis):
        maximum = self.max_position(container, axis)

        if axis == HORIZONTAL:
            return position_for_fraction(container.scroll_x, maximum)

        return position_for_fraction(1 - container.scroll_y, maximum)


def apply_coordinates(scroll_view, coordinates):
    """Jumps to the coordinates (no animation); axes set to IGNORE_AXIS are left as they are."""
    pmts(coordinates, Coordinates)
    probe = ScrollViewProbe()

    if coordinates.horizontal is not IGNORE_AXIS:
        fraction = fraction_for_position(coordinates.horizontal, probe.max_position(scroll_view, HORIZONTAL))
        if fraction is not None:
            scroll_view.scroll_x = fraction

    if coordinates.vertical is not IGNORE_AXIS:
        fraction = fraction_for_position(coordinates.vertical, probe.max_position(scroll_view, VERTICAL))
        if fraction is not None:
            scroll_view.scroll_y = 1 - fraction
