#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import logging

from .ClassReflection import ClassReflection
from .Err import ReflectionErr, UnreachableErr
from .Factory import Factory
from .Method import Method
from .MethodReflection import MethodReflection
from .Slot import Slot
from .Type import Type

log = logging.getLogger(__name__)


class FactoryReflection:
    """Contains static factories."""

    @staticmethod
    def fromReflector(reflector):
        """Convert a native or any reflector into a Factory.

        Accepted inputs:
        - a Factory, returned as is
        - a class object or Type handle
        - a method handle: Method, bound method, staticmethod/classmethod
          object, or a function whose qualified name places it on a class

        Args:
            reflector: Native or other reflector

        Returns:
            A Factory, or None if no conversion is available.

        Raises:
            UnreachableErr: The class or method of a valid handle could not
                be reflected.
        """
        if isinstance(reflector, Factory):
            return reflector
        if isinstance(reflector, Type):
            return ClassReflection.createKnown(reflector.pyClass())
        if isinstance(reflector, type):
            return ClassReflection.createKnown(reflector)
        if isinstance(reflector, Method):
            return FactoryReflection._knownMethod(reflector.parent().pyClass(), reflector.name())
        if inspect.ismethod(reflector):
            return FactoryReflection._knownMethod(reflector.__self__, Slot.memberName(reflector.__func__))

        func = reflector.__func__ if isinstance(reflector, (staticmethod, classmethod)) else reflector
        if inspect.isfunction(func):
            owner = FactoryReflection._ownerOf(func)
            if owner is not None:
                return FactoryReflection._knownMethod(owner, Slot.memberName(func))

        log.debug("No factory conversion for %r", reflector)
        return None

    @staticmethod
    def _knownMethod(objectOrClass, name):
        try:
            return MethodReflection(objectOrClass, name)
        except ReflectionErr as e:
            raise UnreachableErr.make(f"Known method {name} of {objectOrClass!r} could not be reflected.", e) from e

    @staticmethod
    def _ownerOf(func):
        """Find the class a function was defined on, from its qualified name.

        Returns None for free functions, for functions of local classes and
        for functions that are no longer a member of that class.
        """
        qualname = func.__qualname__
        if "." not in qualname or "<locals>" in qualname:
            return None
        owner = Type.load(f"{func.__module__}.{qualname.rsplit('.', 1)[0]}", False)
        if owner is None:
            return None
        method = Type(owner).method(Slot.memberName(func), False)
        if method is None or method.func() is not func:
            return None
        return owner
