#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


# Flag constants
class FConst:
    """Member flag constants."""
    Public = 0x00000001
    Private = 0x00000002
    Protected = 0x00000004
    Final = 0x00000080
    Ctor = 0x00000100
    Abstract = 0x00000400
    Static = 0x00000800
    Readonly = 0x00004000
    Dtor = 0x00400000

    Visibility = Public | Private | Protected


class Slot(Obj):
    """Base class for Field and Method reflection."""

    def __init__(self, parent=None, name="", flags=0):
        self._parent = parent
        self._name = name
        self._flags = flags

    def parent(self):
        """Get declaring type."""
        return self._parent

    def name(self):
        """Get slot name."""
        return self._name

    def flags(self):
        """Get raw flags value."""
        return self._flags

    def qname(self):
        """Get qualified name (module.Type.slotName)."""
        if self._parent is not None:
            return f"{self._parent.qname()}.{self._name}"
        return self._name

    def isField(self):
        """Return true if this is a Field."""
        return False

    def isMethod(self):
        """Return true if this is a Method."""
        return False

    def isPublic(self):
        return (self._flags & FConst.Public) != 0

    def isProtected(self):
        return (self._flags & FConst.Protected) != 0

    def isPrivate(self):
        return (self._flags & FConst.Private) != 0

    def isStatic(self):
        return (self._flags & FConst.Static) != 0

    def isAbstract(self):
        return (self._flags & FConst.Abstract) != 0

    def isFinal(self):
        return (self._flags & FConst.Final) != 0

    def matches(self, filter):
        """Return true if no filter is given or any filter bit is set."""
        return filter is None or (self._flags & filter) != 0

    def equals(self, that):
        return type(self) is type(that) and self.qname() == that.qname()

    def hash(self):
        return hash(self.qname())

    def toStr(self):
        return self.qname()

    @staticmethod
    def visibility(name, owner):
        """Compute the visibility flag of member name declared on class owner.

        Dunder names are public, name-mangled names (_Owner__x) are private,
        any other leading underscore is protected.
        """
        if name.startswith("__") and name.endswith("__"):
            return FConst.Public
        stripped = owner.__name__.lstrip("_")
        if stripped:
            mangled = f"_{stripped}__"
            if name.startswith(mangled) and len(name) > len(mangled):
                return FConst.Private
        if name.startswith("_"):
            return FConst.Protected
        return FConst.Public

    @staticmethod
    def memberName(func):
        """Return the class namespace key of a function, undoing name mangling."""
        name = func.__name__
        if name.startswith("__") and not name.endswith("__"):
            parts = func.__qualname__.split(".")
            if len(parts) >= 2 and parts[-2].lstrip("_"):
                return f"_{parts[-2].lstrip('_')}{name}"
        return name

    @staticmethod
    def find(qname, checked=True):
        """Find slot by qualified name like 'pkg.mod.Widget.build'.

        Args:
            qname: Qualified name in format 'module.Type.slot'
            checked: If True, raise UnknownSlotErr if not found

        Returns:
            Slot instance or None
        """
        dot_idx = qname.rfind('.')
        if dot_idx < 0:
            if checked:
                from .Err import UnknownSlotErr
                raise UnknownSlotErr.make(f"Invalid slot qname: {qname}")
            return None

        from .Type import Type
        type_obj = Type.find(qname[:dot_idx], checked)
        if type_obj is None:
            return None
        return type_obj.slot(qname[dot_idx + 1:], checked)
