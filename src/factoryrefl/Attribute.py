#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj
from .Type import Type

# Match attributes whose class is the given class or a subclass of it
IS_INSTANCEOF = 2

_ATTRIBUTES = "__reflection_attributes__"
_UNSET = object()


class AttributeRecord(Obj):
    """Metadata record attached to a class, method or parameter.

    A record remembers the attribute class and its arguments; newInstance()
    builds the attribute object. Records created from Annotated metadata
    already hold their instance.
    """

    def __init__(self, cls, args=(), kwargs=None, instance=_UNSET):
        self._cls = cls
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})
        self._instance = instance

    @staticmethod
    def of(obj):
        """Wrap an attribute object that already exists."""
        if isinstance(obj, AttributeRecord):
            return obj
        return AttributeRecord(type(obj), instance=obj)

    def pyClass(self):
        return self._cls

    def getName(self):
        """Get the qualified name of the attribute class."""
        return Type.nameOf(self._cls)

    def getArguments(self):
        return list(self._args)

    def getKeywordArguments(self):
        return dict(self._kwargs)

    def newInstance(self):
        """Instantiate the attribute.

        Errors raised by the attribute constructor propagate to the caller.
        """
        if self._instance is not _UNSET:
            return self._instance
        return self._cls(*self._args, **self._kwargs)

    def toStr(self):
        return f"@{self.getName()}"


def attribute(cls, *args, **kwargs):
    """Decorator attaching an attribute record to a class or function.

    Records belong to the decorated declaration only; subclasses and
    overriding methods do not inherit them.

        @attribute(Service, "mailer")
        class Mailer: ...
    """
    record = AttributeRecord(cls, args, kwargs)

    def decorate(target):
        holder = _unwrap(target)
        if isinstance(holder, type):
            if _ATTRIBUTES not in vars(holder):
                setattr(holder, _ATTRIBUTES, [])
            records = vars(holder)[_ATTRIBUTES]
        else:
            records = holder.__dict__.setdefault(_ATTRIBUTES, [])
        # Decorators apply bottom-up; keep source order
        records.insert(0, record)
        return target

    return decorate


def recordsOf(target):
    """Return the records declared directly on a class or function."""
    holder = _unwrap(target)
    if isinstance(holder, type):
        return list(vars(holder).get(_ATTRIBUTES, []))
    return list(getattr(holder, "__dict__", {}).get(_ATTRIBUTES, []))


def getAttributes(records, name=None, flags=0):
    """Filter attribute records by attribute class.

    Args:
        records: Records of one declaration
        name: Attribute class or qualified class name, None for all
        flags: 0 to match the exact class, IS_INSTANCEOF to also match
            subclasses

    Returns:
        List of matching AttributeRecord objects
    """
    if flags not in (0, IS_INSTANCEOF):
        from .Err import ArgErr
        raise ArgErr.make(f"Invalid attribute filter flags: {flags}")
    if name is None:
        return list(records)

    result = []
    if flags == IS_INSTANCEOF:
        cls = name if isinstance(name, type) else Type.load(name)
        for record in records:
            if issubclass(record.pyClass(), cls):
                result.append(record)
    else:
        qname = Type.nameOf(name) if isinstance(name, type) else name
        for record in records:
            if record.getName() == qname:
                result.append(record)
    return result


def _unwrap(target):
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target
