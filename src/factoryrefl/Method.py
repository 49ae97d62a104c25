#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Slot import FConst, Slot
from .Type import Type
from . import TypeRef


class Method(Slot):
    """Method reflection - a function declared in a class namespace.

    Methods are created by Type._reflect() for every plain function,
    staticmethod and classmethod found along the MRO. The parent is always
    the declaring Type.
    """

    def __init__(self, parent=None, name="", flags=0, member=None):
        """Create a Method reflection object.

        Args:
            parent: Declaring Type
            name: Method name
            flags: Slot flags (FConst values)
            member: Raw namespace entry (function, staticmethod or classmethod)
        """
        super().__init__(parent, name, flags)
        self._member = member

    @staticmethod
    def fromMember(parent, name, value):
        """Create a Method from a class namespace entry.

        Returns None for functions the runtime injects into user classes.
        Instance methods declared by an interface are abstract, even when
        a Protocol gives them a default body.
        """
        if Type._isRuntimeFunction(value):
            return None
        func = value.__func__ if isinstance(value, (staticmethod, classmethod)) else value

        flags = Slot.visibility(name, parent.pyClass())
        if isinstance(value, (staticmethod, classmethod)):
            flags |= FConst.Static
        if getattr(value, "__isabstractmethod__", False):
            flags |= FConst.Abstract
        elif not flags & FConst.Static and parent.isInterface():
            flags |= FConst.Abstract
        if getattr(func, "__final__", False):
            flags |= FConst.Final
        if name == "__init__":
            flags |= FConst.Ctor
        elif name == "__del__":
            flags |= FConst.Dtor
        return Method(parent, name, flags, value)

    def isMethod(self):
        return True

    def isConstructor(self):
        return (self._flags & FConst.Ctor) != 0

    def isDestructor(self):
        return (self._flags & FConst.Dtor) != 0

    def isClassMethod(self):
        return isinstance(self._member, classmethod)

    def member(self):
        """Get the raw namespace entry."""
        return self._member

    def func(self):
        """Get the plain function, unwrapped from staticmethod/classmethod."""
        if isinstance(self._member, (staticmethod, classmethod)):
            return self._member.__func__
        return self._member

    def returns(self):
        """Get the declared return annotation, or None."""
        return TypeRef.hints(self.func(), self._parent.pyClass()).get("return")

    def hasReturns(self):
        return "return" in Type.annotations(self.func())

    def params(self):
        """Get the explicit parameters; self/cls are not included."""
        from .Param import Param
        return Param.listOf(
            self.func(),
            self,
            self._parent.pyClass(),
            skipFirst=not isinstance(self._member, staticmethod),
        )

    @staticmethod
    def find(qname, checked=True):
        """Find method by qualified name like 'pkg.mod.Widget.build'.

        Args:
            qname: Qualified name like 'module.Type.method'
            checked: If True, raise error if not found

        Returns:
            Method instance or None
        """
        slot = Slot.find(qname, checked)
        if slot is None:
            return None
        if isinstance(slot, Method):
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{qname} is not a method")
        return None
