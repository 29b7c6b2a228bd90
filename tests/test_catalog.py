"""
Tests for the class catalog, definition builder and declarations.
"""

import pytest

from pypie import (
    Catalog,
    DefinitionError,
    UndefinedClassError,
    UndefinedMemberError,
    class_,
    extends,
    import_,
    private,
    public,
    static,
)
from pypie.model.declarations import Declaration, Extends


def test_class_returns_same_object_as_import():
    """The class object returned by the body call is what import_ returns."""
    catalog = Catalog()
    Greeter = class_("Greeter", catalog)(public({"hi": lambda self: "hi"}))

    assert import_("Greeter", catalog) is Greeter
    assert "Greeter" in catalog
    assert catalog.names() == ["Greeter"]


def test_default_catalog_is_used_without_explicit_catalog():
    Thing = class_("CatalogTestDefaultThing")(public({"ping": lambda self: "pong"}))

    assert import_("CatalogTestDefaultThing") is Thing
    assert Thing().ping() == "pong"


def test_import_unknown_class_fails():
    catalog = Catalog()

    with pytest.raises(UndefinedClassError):
        import_("Missing", catalog)


def test_redefinition_replaces_previous_definition():
    """Last write wins: instances from import_ use only the second body."""
    catalog = Catalog()
    class_("Shape", catalog)(public({"area": lambda self: 1, "old": lambda self: "old"}))
    class_("Shape", catalog)(public({"area": lambda self: 2}))

    shape = import_("Shape", catalog)()

    assert shape.area() == 2
    with pytest.raises(UndefinedMemberError):
        shape.old
    assert len(catalog) == 1


def test_private_requires_callables():
    with pytest.raises(DefinitionError):
        private({"secret": 42})


def test_public_requires_callables():
    with pytest.raises(DefinitionError):
        public({"value": "not a function"})


def test_definition_error_is_a_type_error():
    with pytest.raises(TypeError):
        public({"value": None})


def test_static_accepts_data_and_functions():
    catalog = Catalog()
    Config = class_("Config", catalog)(
        static({"limit": 10, "double": lambda x: 2 * x}),
    )

    assert Config.limit == 10
    assert Config.double(4) == 8


def test_declarations_are_plain_values():
    """Declaring does not touch any catalog; only applying does."""
    catalog = Catalog()
    decl = public({"f": lambda self: 1})

    assert isinstance(decl, Declaration)
    assert decl.section == "public"
    assert extends("Base") == Extends("Base")
    assert len(catalog) == 0


def test_builder_methods_chain():
    catalog = Catalog()
    builder = catalog.define("Counter")
    builder.static({"count": 0}).public({"bump": lambda self: None})
    Counter = builder.finalize()

    assert Counter.definition.statics == {"count": 0}
    assert "bump" in Counter.definition.public_methods
    assert builder.finalized


def test_builder_rejects_use_after_finalize():
    catalog = Catalog()
    builder = catalog.define("Done")
    builder.finalize()

    with pytest.raises(DefinitionError):
        builder.public({"late": lambda self: None})
    with pytest.raises(DefinitionError):
        builder.finalize()


def test_builder_validates_like_declarations():
    catalog = Catalog()

    with pytest.raises(DefinitionError):
        catalog.define("Bad").private({"x": 1})


def test_nested_definitions_do_not_interfere():
    """Defining a class inside another class body leaves both intact."""
    catalog = Catalog()
    Outer = class_("Outer", catalog)(
        public({"outer": lambda self: "outer"}),
        static({
            "Inner": class_("Inner", catalog)(public({"inner": lambda self: "inner"})),
        }),
        private({"hidden": lambda self: "hidden"}),
    )

    assert Outer().outer() == "outer"
    assert Outer.Inner().inner() == "inner"
    assert set(Outer.definition.private_methods) == {"hidden"}
    assert set(catalog.lookup("Inner").public_methods) == {"inner"}
    assert catalog.lookup("Inner").private_methods == {}


def test_missing_parent_fails_at_instantiation():
    """Parents are resolved lazily, so defining is fine but instantiating is not."""
    catalog = Catalog()
    Orphan = class_("Orphan", catalog)(extends("Nobody"))

    with pytest.raises(UndefinedClassError):
        Orphan()


def test_circular_inheritance_is_rejected():
    catalog = Catalog()
    A = class_("A", catalog)(extends("B"))
    class_("B", catalog)(extends("A"))

    with pytest.raises(DefinitionError, match="Circular"):
        A()


def test_lineage_lists_definitions_up_to_root():
    catalog = Catalog()
    class_("Base", catalog)()
    class_("Middle", catalog)(extends("Base"))
    Leaf = class_("Leaf", catalog)(extends("Middle"))

    chain = catalog.lineage(Leaf.definition)

    assert [d.name for d in chain] == ["Leaf", "Middle", "Base"]


def test_commit_is_logged_at_debug(caplog):
    catalog = Catalog()
    with caplog.at_level("DEBUG", logger="pypie.model.catalog"):
        class_("Logged", catalog)()

    assert any("Logged" in record.getMessage() for record in caplog.records)
