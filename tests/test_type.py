"""Native reflection layer: class loading, slot tables, flags and kinds."""

import pytest

from factoryrefl import FConst, Field, Method, Slot, Type, TypeRef, UnknownSlotErr, UnknownTypeErr

from tests import sample_classes as sc

MOD = "tests.sample_classes"


class TestTypeLookup:
    """Verify loading classes by qualified name."""

    def test_find_by_qualified_name(self):
        """A qualified name loads the class object."""
        t = Type.find(f"{MOD}.Base")
        assert t.pyClass() is sc.Base
        assert t.qname() == f"{MOD}.Base"
        assert t.name() == "Base"
        assert t.module() == MOD

    def test_find_nested_class(self):
        """Nested classes are reached by walking attributes."""
        assert Type.find(f"{MOD}.Outer.Inner").pyClass() is sc.Outer.Inner
        assert Type.nameOf(sc.Outer.Inner) == f"{MOD}.Outer.Inner"

    def test_builtins_have_no_module_prefix(self):
        """Builtin classes are named without the builtins module."""
        assert Type.find("int").pyClass() is int
        assert Type.nameOf(str) == "str"

    @pytest.mark.parametrize(
        "qname",
        ["NoSuchClass", "no_such_pkg.Thing", f"{MOD}.Missing", f"{MOD}.build_widget", ""],
        ids=["bare", "module", "attribute", "not-a-class", "empty"],
    )
    def test_missing_class(self, qname):
        """Missing names raise UnknownTypeErr, or return None unchecked."""
        with pytest.raises(UnknownTypeErr):
            Type.find(qname)
        assert Type.find(qname, False) is None

    def test_of_and_class_of(self):
        """Instances, classes and handles all map to the same class."""
        obj = sc.Widget()
        assert Type.of(obj) == Type(sc.Widget)
        assert Type.of(sc.Widget) == Type.of(Type(sc.Widget))
        assert Type.classOf(obj) is sc.Widget
        assert Type.classOf(f"{MOD}.Widget") is sc.Widget


class TestTypeKind:
    """Verify structural kinds and inheritance queries."""

    def test_interfaces(self):
        """Protocols and pure ABCs are interfaces, everything else is not."""
        assert Type(sc.Greeter).isInterface()
        assert Type(sc.NamedGreeter).isInterface()
        assert Type(sc.Closeable).isInterface()
        assert not Type(sc.EnglishGreeter).isInterface()
        assert not Type(sc.Shape).isInterface()
        assert not Type(sc.Base).isInterface()

    @pytest.mark.parametrize(
        ("cls", "expected"),
        [
            (sc.Repository, True),
            (sc.SqlRepository, False),
            (sc.CachedRepository, False),
            (sc.Handler, False),
        ],
        ids=["marker", "constructor-only", "subclass", "concrete-call"],
    )
    def test_concrete_dunder_methods_make_a_class(self, cls, expected):
        """Any concrete function disqualifies an ABC, constructors included."""
        assert Type(cls).isInterface() is expected

    def test_implemented_interfaces(self):
        """Interfaces are listed in MRO order, runtime bases excluded."""
        assert [t.qname() for t in Type(sc.Resource).interfaces()] == [f"{MOD}.Greeter", f"{MOD}.Closeable"]
        assert [t.qname() for t in Type(sc.EnglishGreeter).interfaces()] == [f"{MOD}.Greeter"]
        assert Type(sc.Square).interfaces() == []

    def test_mixin_abstract_final(self):
        assert Type(sc.LoggingMixin).isMixin()
        assert not Type(sc.LoggingMixin).isInstantiable()
        assert Type(sc.Shape).isAbstract()
        assert not Type(sc.Shape).isInstantiable()
        assert Type(sc.Square).isInstantiable()
        assert Type(sc.Sealed).isFinal()
        assert not Type(sc.Base).isFinal()

    def test_base_and_inheritance(self):
        """Base and inheritance skip runtime classes such as object."""
        assert Type(sc.Derived).base() == Type(sc.Base)
        assert Type(sc.Base).base() is None
        assert Type(sc.Derived).inheritance() == [Type(sc.Derived), Type(sc.Base)]


class TestSlots:
    """Verify the slot table built over the MRO."""

    def test_inherited_and_overridden_methods(self):
        """Overrides replace the inherited slot; inherited slots keep their parent."""
        t = Type(sc.Derived)
        assert t.method("describe").parent() == Type(sc.Derived)
        assert t.method("clone").parent() == Type(sc.Base)
        assert t.method("extra").parent() == Type(sc.Derived)
        names = [m.name() for m in t.methods()]
        assert names.index("__init__") < names.index("extra")

    def test_runtime_members_are_skipped(self):
        """Functions planted by Protocol and ABC bookkeeping are not slots."""
        names = [s.name() for s in Type(sc.Greeter).slots()]
        assert names == ["greet"]
        assert [s.name() for s in Type(sc.Closeable).slots()] == ["close"]

    def test_method_flags(self):
        t = Type(sc.Base)
        assert t.method("__init__").isConstructor()
        assert t.method("make").isStatic()
        assert t.method("make").isClassMethod()
        assert t.method("_touch").isProtected()
        assert t.method("_Base__rebuild").isPrivate()
        assert t.method("clone").isPublic()
        assert Type(sc.Shape).method("area").isAbstract()
        assert Type(sc.Sealed).method("seal").isFinal()
        assert Type(sc.Handle).method("__del__").isDestructor()

    def test_filter_bitmask(self):
        """A slot matches a filter when it carries any of its bits."""
        t = Type(sc.Toolbox)
        assert [m.name() for m in t.methods(FConst.Static)] == ["f", "_Toolbox__g"]
        assert [m.name() for m in t.methods(FConst.Private)] == ["_Toolbox__g"]
        assert [m.name() for m in t.methods(FConst.Private | FConst.Public)] == ["f", "_Toolbox__g", "h"]

    def test_field_flags(self):
        t = Type(sc.Settings)
        assert t.field("DEFAULT").isStatic()
        assert t.field("version").isStatic()
        assert t.field("LIMIT").isReadonly()
        assert not t.field("name").isStatic()
        assert t.field("name").type() is str
        assert t.field("_cache").isProtected()
        assert t.field("_Settings__secret").isPrivate()
        assert t.field("title").isReadonly()
        assert not t.field("size").isReadonly()

    def test_frozen_dataclass_fields(self):
        """All fields of a frozen dataclass are readonly."""
        fields = Type(sc.Point).fields()
        assert [f.name() for f in fields] == ["x", "y"]
        assert all(f.isReadonly() for f in fields)

    def test_slot_lookup_errors(self):
        t = Type(sc.Settings)
        with pytest.raises(UnknownSlotErr):
            t.slot("nope")
        assert t.slot("nope", False) is None
        with pytest.raises(UnknownSlotErr):
            t.method("version")
        assert t.field("title", False) is not None
        assert t.field("__init__", False) is None

    def test_slot_find(self):
        """Slots are found by module, class and slot name."""
        m = Slot.find(f"{MOD}.Base.clone")
        assert isinstance(m, Method)
        assert m.qname() == f"{MOD}.Base.clone"
        assert isinstance(Slot.find(f"{MOD}.Settings.version"), Field)
        assert Method.find(f"{MOD}.Base.nope", False) is None
        with pytest.raises(UnknownSlotErr):
            Method.find(f"{MOD}.Settings.version")

    def test_visibility(self):
        assert Slot.visibility("__init__", sc.Base) == FConst.Public
        assert Slot.visibility("_Base__x", sc.Base) == FConst.Private
        assert Slot.visibility("_Other__x", sc.Base) == FConst.Protected
        assert Slot.visibility("run", sc.Base) == FConst.Public

    def test_method_params_and_returns(self):
        """Parameters exclude self and cls; staticmethods keep their first one."""
        assert [p.name() for p in Type(sc.Base).method("__init__").params()] == ["name", "size"]
        assert Type(sc.Base).method("make").params() == []
        assert Type(sc.Base).method("describe").returns() is str
        assert not Type(sc.Base).method("_touch").hasReturns()
        assert Type(sc.Base).method("ghost").returns() == "Missing"

    def test_member_name(self):
        """Private functions map back to their mangled namespace key."""
        assert Slot.memberName(vars(sc.Toolbox)["_Toolbox__g"].__func__) == "_Toolbox__g"
        assert Slot.memberName(sc.Base.clone) == "clone"
        assert Slot.memberName(sc.Base.__init__) == "__init__"
        assert Slot.memberName(sc.build_widget) == "build_widget"


class TestInterfaceMethods:
    """Verify flags of methods declared by interfaces."""

    def test_protocol_methods_are_abstract(self):
        """Instance methods of an interface are abstract; implementations are not."""
        assert Type(sc.Greeter).method("greet").isAbstract()
        assert Type(sc.NamedGreeter).method("name").isAbstract()
        assert not Type(sc.EnglishGreeter).method("greet").isAbstract()


class TestTypeHints:
    """Verify annotation evaluation with unresolved forward references."""

    def test_mixed_forward_references(self):
        """Resolvable names are evaluated even when a sibling name is missing."""
        hints = TypeRef.hints(sc.Widget.attach, sc.Widget)
        assert hints["owner"] is sc.Base
        assert hints["spare"] == "Missing"
        assert hints["return"] is sc.Widget
