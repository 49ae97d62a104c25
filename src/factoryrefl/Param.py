#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import typing

from .Obj import Obj
from . import TypeRef


class Param(Obj):
    """Method or function parameter metadata for reflection.

    Represents a single parameter, including:
    - name: Parameter name
    - position: Index among the explicit parameters (self/cls excluded)
    - type: Declared annotation, evaluated where possible
    - optionality: default value or variadic
    """

    def __init__(self, func, parameter, position, annotation=None, method=None):
        """Create a Param object.

        Args:
            func: Plain function declaring the parameter
            parameter: inspect.Parameter
            position: Position among the explicit parameters
            annotation: Evaluated annotation, or None if not annotated
            method: Owning Method, or None for a free function
        """
        self._func = func
        self._parameter = parameter
        self._position = position
        self._type = annotation
        self._method = method

    @staticmethod
    def listOf(func, method=None, declaring=None, skipFirst=False):
        """Build the Params of a function.

        Args:
            func: Plain function
            method: Owning Method, if any
            declaring: Declaring class, used to evaluate forward references
            skipFirst: True to drop the implicit self/cls parameter
        """
        hints = TypeRef.hints(func, declaring)
        parameters = list(inspect.signature(func).parameters.values())
        if skipFirst and parameters:
            parameters = parameters[1:]
        return [Param(func, p, i, hints.get(p.name), method) for i, p in enumerate(parameters)]

    def name(self):
        return self._parameter.name

    def position(self):
        return self._position

    def kind(self):
        return self._parameter.kind

    def type(self):
        """Get the declared annotation, or None."""
        return self._type

    def hasType(self):
        return self._type is not None

    def hasDefault(self):
        return self._parameter.default is not inspect.Parameter.empty

    def defaultValue(self):
        if not self.hasDefault():
            from .Err import ReflectionErr
            raise ReflectionErr.make(f"Parameter {self.name()} of {self.funcName()} has no default value")
        return self._parameter.default

    def isVariadic(self):
        return self._parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

    def isOptional(self):
        return self.hasDefault() or self.isVariadic()

    def func(self):
        return self._func

    def funcName(self):
        return self._func.__name__

    def method(self):
        return self._method

    def declaringType(self):
        """Get the Type declaring the owning method, or None."""
        if self._method is None:
            return None
        return self._method.parent()

    def records(self):
        """Attribute records given as Annotated metadata."""
        from .Attribute import AttributeRecord
        if typing.get_origin(self._type) is not typing.Annotated:
            return []
        return [AttributeRecord.of(extra) for extra in self._type.__metadata__]

    def equals(self, that):
        return type(self) is type(that) and self._func is that._func and self.name() == that.name()

    def hash(self):
        return hash((self._func, self.name()))

    def toStr(self):
        if self._method is not None:
            return f"{self._method.qname()}.{self.name()}"
        return f"{self._func.__qualname__}.{self.name()}"
