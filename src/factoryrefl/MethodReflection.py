#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from . import Attribute
from . import TypeRef
from .ClassReflection import ClassReflection
from .Err import ArgErr, ReflectionErr, UnknownSlotErr, UnreachableErr
from .Factory import Factory, NonClassMixin
from .Method import Method
from .Type import Type


class MethodReflection(Method, NonClassMixin, Factory):
    """Method reflector which remembers the class it was requested for.

    The originally requested class differs from the declaring class when the
    method is inherited. Names, the static callable pair and late-bound
    return types (typing.Self) use the requested class; parameters use the
    declaring class.
    """

    def __init__(self, objectOrClass, method):
        """Create a MethodReflection.

        Args:
            objectOrClass: Qualified class name, class object or instance
            method: The method name

        Raises:
            UnknownTypeErr: The class does not exist.
            UnknownSlotErr: The method does not exist on that class.
        """
        if not isinstance(method, str):
            raise ArgErr.make(f"Method name must be a string, got {method!r}")
        cls = Type.classOf(objectOrClass)
        self._originalCls = cls
        self._originalClass = Type.nameOf(cls)

        native = Type(cls).method(method, False)
        if native is None:
            raise UnknownSlotErr.make(f"Method {self._originalClass}::{method}() does not exist")
        super().__init__(native.parent(), native.name(), native.flags(), native.member())

    @classmethod
    def fromNative(cls, requested, native):
        """Wrap a Method taken from the slot table of class requested.

        Skips the name lookup, so listing all methods of a class builds its
        slot table only once.
        """
        self = cls.__new__(cls)
        self._originalCls = requested
        self._originalClass = Type.nameOf(requested)
        Method.__init__(self, native.parent(), native.name(), native.flags(), native.member())
        return self

    @property
    def originalClass(self):
        """Name of the class this method was requested for."""
        return self._originalClass

    def getOriginallyRequestedClassName(self):
        return self._originalClass

    def getClassName(self):
        return self._originalClass

    def getClass(self):
        try:
            return ClassReflection(self._originalCls)
        except ReflectionErr as e:
            raise UnreachableErr.make(f"Class {self._originalClass} of {self.getDebugName()} is gone.", e) from e

    def getDeclaringClassName(self):
        return self._parent.qname()

    def getDeclaringClass(self):
        return ClassReflection(self._parent.pyClass())

    def getName(self):
        return self._name

    def getMethodName(self):
        return self._name

    def isInherited(self):
        return self._originalCls is not self._parent.pyClass()

    def isCallable(self):
        return not self.isAbstract() and not self.isConstructor() and self.isPublic()

    def getParameters(self):
        """Get parameters of the method.

        The parameters are bound to the declaring class, because self types
        of parameters resolve in the declaring scope.
        """
        from .ParameterReflection import ParameterReflection
        return [ParameterReflection.fromNative(param) for param in self.params()]

    def getNumberOfParameters(self):
        return len(self.params())

    def getNumberOfRequiredParameters(self):
        return sum(1 for p in self.params() if not p.isOptional())

    def getReturnType(self):
        return self.returns()

    def hasReturnType(self):
        return self.hasReturns()

    def getReturnClassName(self):
        """Get the return value class name, if it is unique.

        typing.Self resolves to the originally requested class; a reference
        to the declaring class resolves to the declaring class.

        Returns:
            A class name, or None if the declared return type is not a
            single class.
        """
        return TypeRef.nameOf(self._returnRef())

    def getReturnClass(self):
        """Raises UnknownTypeErr if the returned class does not exist."""
        ref = self._returnRef()
        if ref is None:
            return None
        return ClassReflection(ref)

    def getReturnClassIfExists(self):
        try:
            return self.getReturnClass()
        except ReflectionErr:
            return None

    def _returnRef(self):
        declaring = self._parent.pyClass()
        ref = TypeRef.classify(self.returns(), declaring)
        return TypeRef.resolveSelf(ref, declaring, self._originalCls)

    def getStaticCallableArray(self):
        """Get a (class, method name) pair to call this as a static function.

        The class is the originally requested class, so getattr(*pair)
        finds the same member this reflector describes.
        """
        return (self._originalCls, self._name)

    def getDebugName(self):
        return f"{self._originalClass}::{self._name}()"

    def getFullName(self):
        return f"{self._originalClass}::{self._name}"

    def _attributeRecords(self):
        return Attribute.recordsOf(self._member)

    def equals(self, that):
        return type(self) is type(that) and self.getFullName() == that.getFullName()

    def hash(self):
        return hash(self.getFullName())

    def toStr(self):
        return self.getDebugName()
