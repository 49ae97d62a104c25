#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import builtins
import enum
import logging
import re
import typing

from .Type import Type

log = logging.getLogger(__name__)

_NAME = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")


class SelfRef(enum.Enum):
    """Symbolic self types a declared type can stand for.

    DECLARING is the class that declares the member.
    LATE is the class the member was requested against (typing.Self).
    """
    DECLARING = "declaring"
    LATE = "late"


def hints(func, declaring=None):
    """Return the evaluated annotations of func.

    Uses typing.get_type_hints() first. If any annotation cannot be
    evaluated, each one is evaluated on its own and unresolved forward
    references stay strings.

    Args:
        func: Plain function (already unwrapped from staticmethod/classmethod)
        declaring: Declaring class, made visible to forward references

    Returns:
        Dict of parameter name (or 'return') to annotation
    """
    localns = {declaring.__name__: declaring} if declaring is not None else None
    try:
        return typing.get_type_hints(func, localns=localns, include_extras=True)
    except Exception as e:
        log.debug("Falling back to per-annotation evaluation for %s: %s",
                  getattr(func, "__qualname__", func), e)

    globalns = getattr(func, "__globals__", {})
    result = {}
    for key, value in Type.annotations(func).items():
        if isinstance(value, str):
            value = _evaluate(value, globalns, localns)
        result[key] = value
    return result


def _evaluate(name, globalns, localns):
    """Evaluate one string annotation through typing, or keep the string."""
    def holder():
        pass

    holder.__annotations__ = {"value": name}
    try:
        return typing.get_type_hints(holder, globalns, localns, include_extras=True)["value"]
    except Exception as e:
        log.debug("Keeping forward reference %r unresolved: %s", name, e)
        return name


def classify(annotation, declaring=None, module=None):
    """Classify a declared type.

    Args:
        annotation: Evaluated annotation, or an unresolved string
        declaring: Class declaring the member, or None for free functions
        module: Module used to qualify bare forward references; defaults
            to the module of the declaring class

    Returns:
        SelfRef for a self reference, a class object, a literal class
        name for an unresolved forward reference, or None if the annotation
        is not a single named, non-builtin class
    """
    if typing.get_origin(annotation) is typing.Annotated:
        annotation = typing.get_args(annotation)[0]
    if annotation is typing.Self:
        return SelfRef.LATE
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if isinstance(annotation, str):
        if module is None and declaring is not None:
            module = declaring.__module__
        return _classifyName(annotation.strip(), declaring, module)
    if not isinstance(annotation, type):
        return None
    if declaring is not None and annotation is declaring:
        return SelfRef.DECLARING
    if annotation.__module__ == "builtins":
        return None
    return annotation


def _classifyName(name, declaring, module):
    if name in ("Self", "typing.Self"):
        return SelfRef.LATE
    if not _NAME.match(name):
        return None
    if declaring is not None and name in (declaring.__name__, declaring.__qualname__, Type.nameOf(declaring)):
        return SelfRef.DECLARING
    if isinstance(getattr(builtins, name, None), type):
        return None
    if "." in name or module is None:
        return name
    return f"{module}.{name}"


def resolveSelf(ref, declaring, requested):
    """Resolve a classified type against both candidate scopes.

    Args:
        ref: Result of classify()
        declaring: Class declaring the member
        requested: Class the member was originally requested against

    Returns:
        Class object, literal class name, or None
    """
    if ref is SelfRef.DECLARING:
        return declaring
    if ref is SelfRef.LATE:
        return requested
    return ref


def nameOf(ref):
    """Return the class name of a resolved reference, or None."""
    if ref is None:
        return None
    if isinstance(ref, type):
        return Type.nameOf(ref)
    return ref
