#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect

from . import TypeRef
from .Err import ArgErr, ReflectionErr, UnknownParamErr, UnknownSlotErr, UnreachableErr
from .Param import Param
from .Slot import Slot
from .Reflector import AttributesMixin, Reflector
from .Type import Type


class ParameterReflection(Param, AttributesMixin, Reflector):
    """Parameter reflector with class name resolution and attributes."""

    def __init__(self, function, param):
        """Create a ParameterReflection.

        Args:
            function: (classOrName, methodName) pair, or a plain function
            param: Parameter name or position

        Raises:
            UnknownTypeErr: The class does not exist.
            UnknownSlotErr: The method does not exist.
            UnknownParamErr: The parameter does not exist.
        """
        native = ParameterReflection._find(function, param)
        super().__init__(native.func(), native._parameter, native.position(), native.type(), native.method())

    @classmethod
    def fromNative(cls, native):
        """Wrap a Param already listed by its Method or function."""
        self = cls.__new__(cls)
        Param.__init__(self, native.func(), native._parameter, native.position(), native.type(), native.method())
        return self

    @staticmethod
    def _find(function, param):
        if isinstance(function, (tuple, list)):
            if len(function) != 2:
                raise ArgErr.make(f"Expected a (class, method) pair, got {function!r}")
            cls = Type.classOf(function[0])
            method = Type(cls).method(function[1], False)
            if method is None:
                raise UnknownSlotErr.make(f"Method {Type.nameOf(cls)}::{function[1]}() does not exist")
            params = method.params()
            owner = f"{Type.nameOf(cls)}::{function[1]}()"
        elif inspect.ismethod(function):
            return ParameterReflection._find((function.__self__, Slot.memberName(function.__func__)), param)
        elif inspect.isfunction(function):
            params = Param.listOf(function)
            owner = function.__name__
        else:
            raise ArgErr.make(f"Expected a function or a (class, method) pair, got {function!r}")

        for p in params:
            if p.name() == param or p.position() == param:
                return p
        raise UnknownParamErr.make(f"Parameter {param} of {owner} does not exist")

    #########################################################################
    # Class name
    #########################################################################

    def getParamClassName(self):
        """Get the parameter type class name, if it is unique.

        Both self references resolve to the class declaring the function;
        a parameter has no notion of the originally requested class.

        Returns:
            A class name, or None if the declared type is not a single class.
        """
        return TypeRef.nameOf(self._classRef())

    def getParamClass(self):
        """Raises UnknownTypeErr if the parameter class does not exist."""
        from .ClassReflection import ClassReflection
        ref = self._classRef()
        if ref is None:
            return None
        return ClassReflection(ref)

    def getParamClassIfExists(self):
        try:
            return self.getParamClass()
        except ReflectionErr:
            return None

    def _classRef(self):
        declaring = self._declaringClass()
        ref = TypeRef.classify(self._type, declaring, self._func.__module__)
        if isinstance(ref, TypeRef.SelfRef) and declaring is None:
            raise UnreachableErr.make(f"Unexpected {ref.value} self parameter type on {self.getDebugName()}.")
        return TypeRef.resolveSelf(ref, declaring, declaring)

    def _declaringClass(self):
        t = self.declaringType()
        return t.pyClass() if t is not None else None

    #########################################################################
    # Accessors
    #########################################################################

    def getName(self):
        return self.name()

    def getPosition(self):
        return self.position()

    def getType(self):
        return self.type()

    def isDefaultValueAvailable(self):
        return self.hasDefault()

    def getDefaultValue(self):
        return self.defaultValue()

    def getDeclaringClassName(self):
        t = self.declaringType()
        return t.qname() if t is not None else None

    def getDeclaringClass(self):
        from .ClassReflection import ClassReflection
        declaring = self._declaringClass()
        return ClassReflection(declaring) if declaring is not None else None

    def getDeclaringFunctionName(self):
        return self.funcName() if self._method is None else self._method.name()

    #########################################################################
    # Names
    #########################################################################

    def getDebugName(self):
        return f"parameter ${self.name()} of {self._functionLabel()}"

    def getFullName(self):
        return f"{self._functionLabel()}${self.name()}"

    def _functionLabel(self):
        if self._method is None:
            return self._func.__name__
        return f"{self._method.parent().qname()}::{self._method.name()}()"

    def _attributeRecords(self):
        return self.records()

    def toStr(self):
        return self.getDebugName()
