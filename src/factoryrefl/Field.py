#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import functools
import re
import types
import typing

from .Slot import FConst, Slot

_CLASSVAR = re.compile(r"^(typing\.)?ClassVar\b")
_FINAL = re.compile(r"^(typing\.)?Final\b")

# Class attributes of these kinds hold per-instance state
_INSTANCE_DESCRIPTORS = (
    property,
    functools.cached_property,
    types.MemberDescriptorType,
    types.GetSetDescriptorType,
)


class Field(Slot):
    """Field reflection - a class attribute, annotated field or property.

    Fields are not wrapped into factory descriptors; ClassReflection hands
    these raw handles out as they are.
    """

    def __init__(self, parent=None, name="", flags=0, type_=None):
        """Create a Field reflection object.

        Args:
            parent: Declaring Type
            name: Field name
            flags: Slot flags (FConst values)
            type_: Declared annotation, or None
        """
        super().__init__(parent, name, flags)
        self._type = type_

    def isField(self):
        return True

    def type(self):
        """Get the declared annotation as written, or None."""
        return self._type

    def hasType(self):
        return self._type is not None

    def isReadonly(self):
        return (self._flags & FConst.Readonly) != 0

    @staticmethod
    def fromAnnotation(parent, name, annotation, frozen=False):
        """Create a field declared only through an annotation."""
        flags = Slot.visibility(name, parent.pyClass())
        if _hasQualifier(annotation, typing.ClassVar, _CLASSVAR):
            flags |= FConst.Static
        elif frozen:
            flags |= FConst.Readonly
        if _hasQualifier(annotation, typing.Final, _FINAL):
            flags |= FConst.Readonly
        return Field(parent, name, flags, annotation)

    @staticmethod
    def fromMember(parent, name, value, annotation=None, frozen=False):
        """Create a field from a class namespace entry.

        Args:
            parent: Declaring Type
            name: Attribute name
            value: Attribute value from the class namespace
            annotation: Annotation declared for the same name, or None
            frozen: True if the reflected class is a frozen dataclass
        """
        flags = Slot.visibility(name, parent.pyClass())
        if isinstance(value, property):
            if value.fset is None:
                flags |= FConst.Readonly
            if getattr(value, "__isabstractmethod__", False):
                flags |= FConst.Abstract
        elif isinstance(value, _INSTANCE_DESCRIPTORS):
            if frozen:
                flags |= FConst.Readonly
        elif annotation is not None and not _hasQualifier(annotation, typing.ClassVar, _CLASSVAR):
            # Annotated attribute with a default value
            if frozen:
                flags |= FConst.Readonly
        else:
            flags |= FConst.Static
        if annotation is not None and _hasQualifier(annotation, typing.Final, _FINAL):
            flags |= FConst.Readonly
        return Field(parent, name, flags, annotation)


def _hasQualifier(annotation, qualifier, pattern):
    if isinstance(annotation, str):
        return pattern.match(annotation.strip()) is not None
    return annotation is qualifier or typing.get_origin(annotation) is qualifier
