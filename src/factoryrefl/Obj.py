#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for all reflection objects.

    Subclasses define toStr() and equals(); the Python operators delegate to
    those so reflection objects behave as values.
    """

    def equals(self, that):
        return self is that

    def hash(self):
        return hash(self.toStr())

    def compare(self, that):
        """Compare this object to that for ordering.

        Returns -1 if this < that, 0 if equal, 1 if this > that.
        """
        if self is that:
            return 0
        if that is None:
            return 1
        if self.equals(that):
            return 0
        my_str = self.toStr()
        that_str = that.toStr() if isinstance(that, Obj) else str(that)
        if my_str < that_str:
            return -1
        if my_str > that_str:
            return 1
        return 0

    def __lt__(self, other):
        return self.compare(other) < 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __gt__(self, other):
        return self.compare(other) > 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    def toStr(self):
        return f"{type(self).__name__}@{id(self):x}"

    def __str__(self):
        return self.toStr()

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hash()

    def __repr__(self):
        return f"{type(self).__name__}({self.toStr()})"
