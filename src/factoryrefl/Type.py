#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import abc
import builtins
import importlib
import inspect
import logging

from .Obj import Obj

log = logging.getLogger(__name__)


class Type(Obj):
    """Type class - reflection handle over a loaded Python class.

    This is the native layer the factory descriptors sit on: it loads
    classes by qualified name, classifies them (class, interface, mixin)
    and enumerates their fields and methods across the MRO.
    """

    # Modules whose classes and injected functions are never reflected
    _RUNTIME_MODULES = frozenset({"builtins", "abc", "typing", "typing_extensions"})
    # Bookkeeping attributes planted by ABCMeta, Protocol and the compiler
    _RUNTIME_ATTRS = frozenset({"_abc_impl", "_is_protocol", "_is_runtime_protocol", "__annotate__", "__annotate_func__"})

    def __init__(self, cls):
        if not isinstance(cls, type):
            from .Err import ArgErr
            raise ArgErr.make(f"Not a class: {cls!r}")
        self._cls = cls
        self._reflected = False  # Whether the slot table has been built
        self._slots_by_name = {}  # name -> Slot lookup
        self._slot_list = []  # All slots in order
        self._field_list = []  # All fields
        self._method_list = []  # All methods

    #########################################################################
    # Lookup
    #########################################################################

    @staticmethod
    def of(obj):
        """Get type of a class, instance or Type handle"""
        if isinstance(obj, Type):
            return Type(obj._cls)
        if isinstance(obj, type):
            return Type(obj)
        return Type(type(obj))

    @staticmethod
    def classOf(objectOrClass):
        """Return the class for a qualified name, class, Type or instance.

        Raises UnknownTypeErr if a name does not load.
        """
        if isinstance(objectOrClass, str):
            return Type.load(objectOrClass)
        if isinstance(objectOrClass, Type):
            return objectOrClass._cls
        if isinstance(objectOrClass, type):
            return objectOrClass
        if objectOrClass is None:
            from .Err import ArgErr
            raise ArgErr.make("Expected a class name, class or object, got None")
        return type(objectOrClass)

    @staticmethod
    def find(qname, checked=True):
        """Find type by qualified name like 'pkg.mod.Outer.Inner'.

        Args:
            qname: Qualified class name; builtins may omit the module
            checked: If True, raise UnknownTypeErr if not found

        Returns:
            Type instance or None
        """
        cls = Type.load(qname, checked)
        if cls is None:
            return None
        return Type(cls)

    @staticmethod
    def load(qname, checked=True):
        """Load the class object for a qualified name.

        A module that exists but fails while importing (for example because
        a base class cannot be imported) makes its classes unavailable. That
        case raises the same UnknownTypeErr as a class that does not exist.
        """
        from .Err import UnknownTypeErr
        try:
            return Type._load(qname)
        except UnknownTypeErr as e:
            if checked:
                raise
            log.debug("Class %s is not available: %s", qname, e.msg())
            return None

    @staticmethod
    def _load(qname):
        from .Err import UnknownTypeErr
        if not isinstance(qname, str) or not qname:
            raise UnknownTypeErr.make(f"Invalid class name: {qname!r}")

        parts = qname.split(".")
        if len(parts) == 1:
            obj = getattr(builtins, qname, None)
            if isinstance(obj, type):
                return obj
            raise UnknownTypeErr.make(f"Class {qname} does not exist")

        # Import the longest module prefix, then walk the remaining attributes
        for i in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:i])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                if e.name is not None and (module_name == e.name or module_name.startswith(e.name + ".")):
                    continue
                raise UnknownTypeErr.make(f"Class {qname} is not available: {e}", e) from e
            except Exception as e:
                raise UnknownTypeErr.make(f"Class {qname} is not available: {e}", e) from e

            obj = module
            for attr in parts[i:]:
                obj = getattr(obj, attr, None)
                if obj is None:
                    break
            if isinstance(obj, type):
                return obj
            break

        raise UnknownTypeErr.make(f"Class {qname} does not exist")

    @staticmethod
    def nameOf(cls):
        """Return the qualified name of a class object"""
        if cls.__module__ == "builtins":
            return cls.__qualname__
        return f"{cls.__module__}.{cls.__qualname__}"

    @staticmethod
    def annotations(obj):
        """Return the raw annotations declared directly on obj"""
        try:
            return inspect.get_annotations(obj)
        except NameError:
            # Deferred annotations referencing names that do not exist yet
            import annotationlib
            return annotationlib.get_annotations(obj, format=annotationlib.Format.STRING)

    #########################################################################
    # Identity
    #########################################################################

    def pyClass(self):
        """Return the underlying Python class"""
        return self._cls

    def name(self):
        return self._cls.__name__

    def qname(self):
        return Type.nameOf(self._cls)

    def module(self):
        return self._cls.__module__

    def base(self):
        """Return the first reflected base type, or None"""
        for base in self._cls.__bases__:
            if base.__module__ not in Type._RUNTIME_MODULES:
                return Type(base)
        return None

    def inheritance(self):
        """Return this type and its reflected ancestors in MRO order"""
        return [Type(k) for k in self._cls.__mro__ if k.__module__ not in Type._RUNTIME_MODULES]

    def interfaces(self):
        """Return the interfaces this type implements, in MRO order"""
        return [Type(k) for k in self._cls.__mro__[1:] if Type._isInterface(k)]

    #########################################################################
    # Kind
    #########################################################################

    def isInterface(self):
        return Type._isInterface(self._cls)

    def isMixin(self):
        return not self.isInterface() and self._cls.__name__.endswith("Mixin")

    def isAbstract(self):
        return self.isInterface() or inspect.isabstract(self._cls)

    def isFinal(self):
        return bool(vars(self._cls).get("__final__", False))

    def isInstantiable(self):
        return not self.isInterface() and not self.isMixin() and not inspect.isabstract(self._cls)

    def isFrozen(self):
        """Return true if this is a frozen dataclass"""
        params = getattr(self._cls, "__dataclass_params__", None)
        return bool(params is not None and params.frozen)

    @staticmethod
    def _isInterface(cls):
        """Protocols and pure ABCs are interfaces.

        A pure ABC declares no concrete function or property, constructors
        and other dunder methods included, and only extends other
        interfaces or runtime bases.
        """
        if cls.__module__ in Type._RUNTIME_MODULES:
            return False
        if vars(cls).get("_is_protocol", False):
            return True
        if not isinstance(cls, abc.ABCMeta):
            return False
        for base in cls.__bases__:
            if base.__module__ not in Type._RUNTIME_MODULES and not Type._isInterface(base):
                return False
        for name, value in vars(cls).items():
            if name in Type._RUNTIME_ATTRS:
                continue
            if not Type._isFunction(value) and not isinstance(value, property):
                continue
            if Type._isFunction(value) and Type._isRuntimeFunction(value):
                continue
            if not getattr(value, "__isabstractmethod__", False):
                return False
        return True

    @staticmethod
    def _isDunder(name):
        return len(name) > 4 and name.startswith("__") and name.endswith("__")

    @staticmethod
    def _isSunder(name):
        return len(name) > 2 and name[0] == "_" and name[1] != "_" and name.endswith("_")

    @staticmethod
    def _isFunction(value):
        return isinstance(value, (staticmethod, classmethod)) or inspect.isfunction(value)

    @staticmethod
    def _isRuntimeFunction(value):
        """Functions that ABCMeta, Protocol or typing plant into user classes"""
        func = value.__func__ if isinstance(value, (staticmethod, classmethod)) else value
        return getattr(func, "__module__", None) in Type._RUNTIME_MODULES

    #########################################################################
    # Slot Reflection
    #########################################################################

    def _reflect(self):
        """Build the slot table by walking the MRO from the root down.

        A slot declared closer to this class replaces the inherited slot of
        the same name, whatever its kind, so the table matches Python's own
        attribute resolution.
        """
        if self._reflected:
            return self
        self._reflected = True

        from .Field import Field
        from .Method import Method

        slots = []
        slots_by_name = {}
        name_to_index = {}
        frozen = self.isFrozen()

        for owner in reversed(self._cls.__mro__):
            if owner.__module__ in Type._RUNTIME_MODULES:
                continue
            owner_type = self if owner is self._cls else Type(owner)
            namespace = vars(owner)
            annotations = Type.annotations(owner)

            for name, annotation in annotations.items():
                if name in namespace or Type._isDunder(name):
                    continue
                slot = Field.fromAnnotation(owner_type, name, annotation, frozen)
                self._merge_slot(slot, slots, slots_by_name, name_to_index)

            for name, value in namespace.items():
                if Type._isDunder(name) and not Type._isFunction(value):
                    continue
                if Type._isSunder(name) or name in Type._RUNTIME_ATTRS:
                    continue
                if Type._isFunction(value):
                    slot = Method.fromMember(owner_type, name, value)
                elif isinstance(value, type):
                    continue
                else:
                    slot = Field.fromMember(owner_type, name, value, annotations.get(name), frozen)
                if slot is not None:
                    self._merge_slot(slot, slots, slots_by_name, name_to_index)

        self._slot_list = slots
        self._field_list = [s for s in slots if isinstance(s, Field)]
        self._method_list = [s for s in slots if isinstance(s, Method)]
        self._slots_by_name = slots_by_name
        return self

    def _merge_slot(self, slot, slots, slots_by_name, name_to_index):
        """Merge a slot into the slot lists, handling overrides."""
        name = slot.name()
        existing_idx = name_to_index.get(name)

        if existing_idx is not None:
            slots_by_name[name] = slot
            slots[existing_idx] = slot
        else:
            slots_by_name[name] = slot
            slots.append(slot)
            name_to_index[name] = len(slots) - 1

    def slots(self):
        """Return all slots."""
        self._reflect()
        return list(self._slot_list)

    def slot(self, name, checked=True):
        """Find slot by name.

        Args:
            name: Slot name to find
            checked: If True, raise UnknownSlotErr if not found

        Returns:
            Slot instance or None (if checked=False and not found)
        """
        self._reflect()
        slot = self._slots_by_name.get(name)
        if slot is not None:
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self.qname()}.{name}")
        return None

    def fields(self, filter=None):
        """Return all fields, optionally only those matching any filter bit."""
        self._reflect()
        return [f for f in self._field_list if f.matches(filter)]

    def field(self, name, checked=True):
        """Find field by name."""
        from .Field import Field
        slot = self.slot(name, checked)
        if isinstance(slot, Field):
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self.qname()}.{name} is not a field")
        return None

    def methods(self, filter=None):
        """Return all methods, optionally only those matching any filter bit."""
        self._reflect()
        return [m for m in self._method_list if m.matches(filter)]

    def method(self, name, checked=True):
        """Find method by name."""
        from .Method import Method
        slot = self.slot(name, checked)
        if isinstance(slot, Method):
            return slot
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{self.qname()}.{name} is not a method")
        return None

    def hasMethod(self, name):
        return self.method(name, False) is not None

    #########################################################################
    # Obj
    #########################################################################

    def equals(self, that):
        return type(self) is type(that) and self._cls is that._cls

    def hash(self):
        return hash(self.qname())

    def toStr(self):
        return self.qname()
