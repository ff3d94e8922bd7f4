from collections import namedtuple


class Interval(namedtuple("Interval", "l, r")):
    """Inclusive range [l, r] of leaf positions."""
    __slots__ = ()

    def half_open(self):
        return self.l, self.r + 1
