class ScrollResolutionError(ValueError):
    """Base for all errors raised while resolving scroll positions and options. These signal programming errors on the
    side of the caller (invalid input); nothing is retried or recovered."""


class InvalidAxisName(ScrollResolutionError):
    def __init__(self, name):
        super(InvalidAxisName, self).__init__("Invalid axis name %r" % (name,))
        self.name = name


class AmbiguousAxis(ScrollResolutionError):
    def __init__(self, axis):
        super(AmbiguousAxis, self).__init__(
            "Axis not defined, or not defined unambiguously, with current value %r" % (axis,))
        self.axis = axis


class AxisKeywordMismatch(ScrollResolutionError):
    def __init__(self, keyword, axis):
        super(AxisKeywordMismatch, self).__init__(
            "Desired position %r is inconsistent with axis %r" % (keyword, axis))
        self.keyword = keyword
        self.axis = axis


class InvalidPositionValue(ScrollResolutionError):
    def __init__(self, value):
        super(InvalidPositionValue, self).__init__("Invalid position argument %r" % (value,))
        self.value = value


class InvalidScrollMode(ScrollResolutionError):
    def __init__(self, mode):
        super(InvalidScrollMode, self).__init__("Invalid scroll mode %r" % (mode,))
        self.mode = mode
