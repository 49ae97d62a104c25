#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import abc

from .Reflector import AttributesMixin, Reflector


class Factory(AttributesMixin, Reflector):
    """A class or a method, seen as something that produces an object.

    Constructing class X and calling method M on class X answer the same
    questions, so calling code never has to branch on the member kind.
    """

    def reveal(self):
        """Return the reflector itself, typed as its concrete class."""
        return self

    def hasRequiredParameters(self):
        """Return true if at least one parameter is required."""
        for param in self.getParameters():
            if not param.isOptional():
                return True
        return False

    @abc.abstractmethod
    def getClassName(self):
        """Get the name of the class this was originally requested for.

        For methods this differs from the declaring class if the method is
        declared in a parent class.
        """

    @abc.abstractmethod
    def getClass(self):
        """Get the ClassReflection of the originally requested class."""

    @abc.abstractmethod
    def getMethodName(self):
        """Get the method name, or None if this is a class."""

    @abc.abstractmethod
    def isMethod(self):
        pass

    @abc.abstractmethod
    def isClassLike(self):
        """Return true for classes, interfaces and mixins."""

    @abc.abstractmethod
    def isClass(self):
        pass

    @abc.abstractmethod
    def isInterface(self):
        pass

    @abc.abstractmethod
    def isTrait(self):
        pass

    @abc.abstractmethod
    def isInherited(self):
        """Return true if the method is declared in a parent class.

        Always false for classes.
        """

    @abc.abstractmethod
    def getParameters(self):
        """Get parameters of the method, or of the class constructor."""

    @abc.abstractmethod
    def isAbstract(self):
        pass

    @abc.abstractmethod
    def isStatic(self):
        """Return true if this is a class or a static method.

        Constructing an instance does not need an existing object, so
        classes always count as static factories.
        """

    @abc.abstractmethod
    def isCallable(self):
        """Return true if the class is instantiable or the method callable."""

    @abc.abstractmethod
    def isConstructor(self):
        pass

    @abc.abstractmethod
    def isDestructor(self):
        pass

    @abc.abstractmethod
    def getReturnType(self):
        """Get the declared return type; a class returns itself."""

    @abc.abstractmethod
    def getReturnClassName(self):
        """Get the return class name, or None if it is not a single class."""

    @abc.abstractmethod
    def getReturnClass(self):
        """Get the return ClassReflection, or None.

        Raises UnknownTypeErr if the returned class does not exist.
        """

    @abc.abstractmethod
    def getReturnClassIfExists(self):
        """Get the return ClassReflection, or None if it does not exist."""


class NonMethodMixin:
    """Factory answers for reflectors that are not methods."""

    def getMethodName(self):
        return None

    def isMethod(self):
        return False

    def isConstructor(self):
        return False

    def isDestructor(self):
        return False


class NonClassMixin:
    """Factory answers for reflectors that are not classes."""

    def isClassLike(self):
        return False

    def isClass(self):
        return False

    def isInterface(self):
        return False

    def isTrait(self):
        return False
