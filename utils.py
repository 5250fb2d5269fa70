def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__,
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def int_or_str(s):
    """
    >>> int_or_str("-40"), int_or_str("40%")
    (-40, '40%')
    """
    try:
        return int(s)
    except ValueError:
        return s


def parse_pairs(text, separator):
    """
    Parses whitespace separated `key<separator>value` pairs; values which are ints are returned as such. Tokens without
    the separator are skipped.

    >>> sorted(parse_pairs("axis=x  mode=append duration=400", "=").items())
    [('axis', 'x'), ('duration', 400), ('mode', 'append')]

    Only the first separator counts:
    >>> parse_pairs("v:+=100 h:right", ":")
    {'v': '+=100', 'h': 'right'}

    >>> parse_pairs("", "=")
    {}
    """
    result = {}
    for token in text.split():
        key, found, value = token.partition(separator)
        if found:
            result[key] = int_or_str(value)
    return result
