#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def toStr(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def __str__(self):
        return self.toStr()


class ArgErr(Err):
    """Argument error"""
    pass


class ReflectionErr(Err):
    """Lookup error - a requested class, method or parameter is not available.

    Callers may recover from this error. The "if exists" factories convert it
    to None; everything else lets it propagate.
    """
    pass


class UnknownTypeErr(ReflectionErr):
    """Unknown type error - class does not exist or cannot fully load"""
    pass


class UnknownSlotErr(ReflectionErr):
    """Unknown slot error - thrown when method lookup fails"""
    pass


class UnknownParamErr(ReflectionErr):
    """Unknown parameter error - thrown when parameter lookup fails"""
    pass


class UnreachableErr(Err):
    """Consistency violation.

    Raised when an operation that must succeed for already validated input
    fails anyway. This is never a ReflectionErr, so it is never converted to
    None.
    """
    pass
