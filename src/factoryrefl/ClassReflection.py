#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import logging

from . import Attribute
from .Err import ReflectionErr, UnreachableErr
from .Factory import Factory, NonMethodMixin
from .Type import Type

log = logging.getLogger(__name__)


class ClassReflection(Type, NonMethodMixin, Factory):
    """Class reflector that doubles as a factory.

    As a factory a class stands for its own constructor: it is static, never
    inherited, takes the constructor parameters and produces itself.
    """

    def __init__(self, objectOrClass):
        """Create a ClassReflection.

        Args:
            objectOrClass: Qualified class name, class object or instance

        Raises:
            UnknownTypeErr: The class does not exist, or its module fails to
                import (for example because a base class is missing). Both
                cases look the same to the caller.
        """
        super().__init__(Type.classOf(objectOrClass))

    @classmethod
    def createKnown(cls, name):
        """Create an instance for a class that is known to exist.

        Raises:
            UnreachableErr: The class is missing after all.
        """
        try:
            return cls(name)
        except ReflectionErr as e:
            raise UnreachableErr.make(f"Known class {name} was not found or could not be loaded.", e) from e

    @classmethod
    def createIfAvailable(cls, name):
        """Create an instance if the class exists and fully loads.

        Returns:
            New instance, or None if the class does not exist or one of its
            parents or interfaces is missing.
        """
        try:
            return cls(name)
        except ReflectionErr as e:
            log.debug("Class %s is not available: %s", name, e.msg())
            return None

    #########################################################################
    # Methods
    #########################################################################

    def getFactories(self):
        """Get a list including the class itself and its non-constructor methods.

        Normally only public, non-abstract methods count as factories, but
        some inspectors also need the others, if only to report misplaced
        attributes. The constructor is left out because the class reflector
        already covers it.
        """
        return [self, *self.getFilteredMethods(constructor=False)]

    def getMethods(self, filter=None):
        """Get all methods, requested against this class.

        Args:
            filter: FConst bitmask; a method matches if it has any of the bits
        """
        return [self._methodReflection(m) for m in self.methods(filter)]

    def getCallableMethods(self, filter=None):
        """Get public, non-abstract, non-constructor methods."""
        result = []
        for m in self.methods(filter):
            if m.isAbstract() or m.isConstructor() or not m.isPublic():
                continue
            result.append(self._methodReflection(m))
        return result

    def getFilteredMethods(self, filter=None, static=None, public=None, protected=None,
                           private=None, abstract=None, final=None, constructor=None):
        """Get methods that match the filters.

        Each keyword filter is skipped when None and must match exactly
        otherwise. All filters must match.
        """
        result = []
        for m in self.methods(filter):
            if static is not None and static != m.isStatic():
                continue
            if public is not None and public != m.isPublic():
                continue
            if protected is not None and protected != m.isProtected():
                continue
            if private is not None and private != m.isPrivate():
                continue
            if abstract is not None and abstract != m.isAbstract():
                continue
            if final is not None and final != m.isFinal():
                continue
            if constructor is not None and constructor != m.isConstructor():
                continue
            result.append(self._methodReflection(m))
        return result

    def getMethod(self, name):
        """Get the method with the given name.

        Raises:
            UnknownSlotErr: Method does not exist.
        """
        from .MethodReflection import MethodReflection
        return MethodReflection(self._cls, name)

    def getConstructor(self):
        """Get the constructor, or None if the class has no __init__."""
        ctor = self.method("__init__", False)
        if ctor is None:
            return None
        return self._methodReflection(ctor)

    def _methodReflection(self, method):
        """Wrap a method of this class's slot table, requested against this class."""
        from .MethodReflection import MethodReflection
        return MethodReflection.fromNative(self._cls, method)

    #########################################################################
    # Properties
    #########################################################################

    def getProperties(self, filter=None):
        return self.fields(filter)

    def getFilteredProperties(self, filter=None, static=None, public=None, protected=None,
                              private=None, readonly=None):
        """Get fields that match the filters.

        Fields are returned as raw Field handles.
        """
        result = []
        for f in self.fields(filter):
            if static is not None and static != f.isStatic():
                continue
            if public is not None and public != f.isPublic():
                continue
            if protected is not None and protected != f.isProtected():
                continue
            if private is not None and private != f.isPrivate():
                continue
            if readonly is not None and readonly != f.isReadonly():
                continue
            result.append(f)
        return result

    #########################################################################
    # Interfaces
    #########################################################################

    def getInterfaceNames(self):
        return [t.qname() for t in self.interfaces()]

    def getOnlyInterfaceName(self, inclusive=False):
        """Get the interface name, if the class implements exactly one interface.

        Args:
            inclusive: If True and this is an interface, count the interface
                itself

        Returns:
            The interface name, or None if the class implements no
            interfaces or more than one.
        """
        interfaces = self.getInterfaceNames()
        if inclusive and self.isInterface():
            return self.qname() if not interfaces else None
        if len(interfaces) != 1:
            return None
        return interfaces[0]

    def getInclusiveInterfaceNames(self):
        """Get interface names, including this class if it is an interface."""
        names = self.getInterfaceNames()
        if self.isInterface():
            names = [self.qname(), *names]
        return names

    def getParentClass(self):
        base = self.base()
        if base is None:
            return None
        return ClassReflection(base)

    #########################################################################
    # Factory
    #########################################################################

    def getName(self):
        return self.qname()

    def getShortName(self):
        return self.name()

    def getClassName(self):
        return self.qname()

    def getClass(self):
        return self

    def isClassLike(self):
        return True

    def isClass(self):
        return not self.isInterface() and not self.isTrait()

    def isTrait(self):
        return self.isMixin()

    def isInherited(self):
        return False

    def getParameters(self):
        ctor = self.getConstructor()
        if ctor is None:
            return []
        return ctor.getParameters()

    def isStatic(self):
        return True

    def isCallable(self):
        return self.isInstantiable()

    def getReturnType(self):
        return self._cls

    def getReturnClassName(self):
        return self.qname()

    def getReturnClass(self):
        return self

    def getReturnClassIfExists(self):
        return self

    def getDebugName(self):
        return self.qname()

    def getFullName(self):
        return self.qname()

    def _attributeRecords(self):
        return Attribute.recordsOf(self._cls)
