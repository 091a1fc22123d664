"""Tests for documentation-comment ID encoding."""

from refdoc.build_descriptor import (
    constructor_descriptor,
    field_descriptor,
    method_descriptor,
    property_descriptor,
    type_definition,
    type_descriptor,
)
from refdoc.encode_identity import encode_identity

INT = {"name": "Int32", "namespace": "System"}
STRING = {"name": "String", "namespace": "System"}
FOO_REF = {"name": "Foo", "namespace": "N"}
FOO = type_definition(FOO_REF)
T0 = {"generic_parameter": 0, "name": "T"}


def _param(name: str, type_rec: dict) -> dict:
    return {"name": name, "type": type_rec}


def test_plain_type() -> None:
    """Verify that a plain type encodes as namespace and name."""
    assert encode_identity(type_descriptor(FOO_REF)) == "T:N.Foo"
    assert encode_identity(FOO) == "T:N.Foo"


def test_global_namespace_type() -> None:
    """Verify that a type without namespace has no leading dot."""
    assert encode_identity(type_descriptor({"name": "Loose"})) == "T:Loose"


def test_array_suffixes() -> None:
    """Verify single, multidimensional and jagged array suffixes."""
    one = type_descriptor({"element": INT, "rank": 1})
    two = type_descriptor({"element": INT, "rank": 2})
    three = type_descriptor({"element": INT, "rank": 3})
    jagged = type_descriptor({"element": {"element": INT}})
    assert encode_identity(one) == "T:System.Int32[]"
    assert encode_identity(two) == "T:System.Int32[0:,0:]"
    assert encode_identity(three) == "T:System.Int32[0:,0:,0:]"
    assert encode_identity(jagged) == "T:System.Int32[][]"


def test_pointer_and_by_ref_suffixes() -> None:
    """Verify that modifier suffixes compose from the inside out."""
    ptr = type_descriptor({"element": INT, "pointer": True})
    ptr_array = type_descriptor({"element": {"element": INT, "pointer": True}})
    by_ref = type_descriptor({"element": INT, "by_ref": True})
    assert encode_identity(ptr) == "T:System.Int32*"
    assert encode_identity(ptr_array) == "T:System.Int32*[]"
    assert encode_identity(by_ref) == "T:System.Int32@"


def test_constructed_generic_shape() -> None:
    """Verify brace-wrapped, comma-joined argument encodings."""
    d = type_descriptor(
        {
            "name": "Dictionary`2",
            "namespace": "System.Collections.Generic",
            "arguments": [STRING, INT],
        }
    )
    assert (
        encode_identity(d)
        == "T:System.Collections.Generic.Dictionary{System.String,System.Int32}"
    )


def test_nested_generic_arguments() -> None:
    """Verify that arguments are encoded recursively without prefixes."""
    inner = {"name": "List`1", "namespace": "S", "arguments": [STRING]}
    d = type_descriptor({"name": "List`1", "namespace": "S", "arguments": [inner]})
    assert encode_identity(d) == "T:S.List{S.List{System.String}}"


def test_generic_definition_encodes_arity() -> None:
    """Verify that definitions of different arity do not collide."""
    one = type_definition({"name": "Tuple`1", "namespace": "N"})
    two = type_definition({"name": "Tuple`2", "namespace": "N"})
    assert encode_identity(one) == "T:N.Tuple`1"
    assert encode_identity(two) == "T:N.Tuple`2"


def test_generic_parameter() -> None:
    """Verify that generic parameters encode by position."""
    assert encode_identity(type_descriptor(T0)) == "T:``0"


def test_nested_type() -> None:
    """Verify that nested types are qualified through their declaring type."""
    d = type_descriptor({"name": "Inner", "declaring": FOO_REF})
    assert encode_identity(d) == "T:N.Foo.Inner"
    assert encode_identity(type_definition({"name": "Inner"}, FOO)) == "T:N.Foo.Inner"


def test_constructor_uses_ctor_token() -> None:
    """Verify that constructors always encode as #ctor."""
    plain = constructor_descriptor({}, FOO)
    named = constructor_descriptor(
        {"name": "Whatever", "parameters": [_param("x", INT)]}, FOO
    )
    assert encode_identity(plain) == "M:N.Foo.#ctor"
    assert encode_identity(named) == "M:N.Foo.#ctor(System.Int32)"


def test_method_parameter_order_matters() -> None:
    """Verify that parameter order is positional, not sorted."""
    a = method_descriptor(
        {"name": "Bar", "parameters": [_param("a", INT), _param("b", STRING)]}, FOO
    )
    b = method_descriptor(
        {"name": "Bar", "parameters": [_param("b", STRING), _param("a", INT)]}, FOO
    )
    assert encode_identity(a) == "M:N.Foo.Bar(System.Int32,System.String)"
    assert encode_identity(b) == "M:N.Foo.Bar(System.String,System.Int32)"
    assert encode_identity(method_descriptor({"name": "Bar"}, FOO)) == "M:N.Foo.Bar"


def test_generic_method_counts_generic_typed_parameters() -> None:
    """Verify the marker counts generic-typed parameters, not the arity."""
    enumerable = {"name": "IEnumerable`1", "namespace": "S", "arguments": [T0]}
    func = {
        "name": "Func`2",
        "namespace": "S",
        "arguments": [T0, {"generic_parameter": 1, "name": "TResult"}],
    }
    select = method_descriptor(
        {
            "name": "Select`2",
            "parameters": [_param("source", enumerable), _param("selector", func)],
        },
        FOO,
    )
    assert (
        encode_identity(select)
        == "M:N.Foo.Select``2(S.IEnumerable{``0},S.Func{``0,``1})"
    )

    identity = method_descriptor(
        {"name": "Identity`1", "parameters": [_param("value", T0)]}, FOO
    )
    assert encode_identity(identity) == "M:N.Foo.Identity``0(``0)"


def test_by_ref_parameters() -> None:
    """Verify that out parameters carry the by-ref suffix."""
    m = method_descriptor(
        {
            "name": "TryParse",
            "static": True,
            "parameters": [_param("s", STRING), {**_param("result", INT), "out": True}],
        },
        FOO,
    )
    assert encode_identity(m) == "M:N.Foo.TryParse(System.String,System.Int32@)"


def test_conversion_operator_appends_return_type() -> None:
    """Verify that conversions are disambiguated by their target type."""
    params = [_param("f", FOO_REF)]
    to_int = method_descriptor(
        {"name": "op_Implicit", "returns": INT, "parameters": params}, FOO
    )
    to_string = method_descriptor(
        {"name": "op_Implicit", "returns": STRING, "parameters": params}, FOO
    )
    assert encode_identity(to_int) == "M:N.Foo.op_Implicit(N.Foo)~System.Int32"
    assert encode_identity(to_string) != encode_identity(to_int)


def test_member_of_generic_definition() -> None:
    """Verify that members of a generic definition use its arity form."""
    lst = type_definition({"name": "List`1", "namespace": "N"})
    add = method_descriptor({"name": "Add", "parameters": [_param("item", T0)]}, lst)
    assert encode_identity(add) == "M:N.List`1.Add(``0)"


def test_field_and_properties() -> None:
    """Verify field, property and indexer encodings."""
    field = field_descriptor({"name": "Max", "type": INT, "literal": True}, FOO)
    prop = property_descriptor({"name": "Count", "type": INT, "getter": True}, FOO)
    indexer = property_descriptor(
        {
            "name": "Item",
            "type": STRING,
            "getter": True,
            "index_parameters": [_param("row", INT), _param("key", STRING)],
        },
        FOO,
    )
    assert encode_identity(field) == "F:N.Foo.Max"
    assert encode_identity(prop) == "P:N.Foo.Count"
    assert encode_identity(indexer) == "P:N.Foo.Item(System.Int32,System.String)"


def test_distinct_symbols_never_collide() -> None:
    """Verify that kind, declaring type and parameters all distinguish IDs."""
    bar = type_definition({"name": "Bar", "namespace": "N"})
    descriptors = [
        FOO,
        bar,
        method_descriptor({"name": "Run"}, FOO),
        method_descriptor({"name": "Run"}, bar),
        method_descriptor({"name": "Run", "parameters": [_param("x", INT)]}, FOO),
        method_descriptor({"name": "Run", "parameters": [_param("x", STRING)]}, FOO),
        field_descriptor({"name": "Run", "type": INT}, FOO),
        property_descriptor({"name": "Run", "type": INT, "getter": True}, FOO),
        constructor_descriptor({}, FOO),
        constructor_descriptor({}, bar),
    ]
    ids = [encode_identity(d) for d in descriptors]
    assert len(set(ids)) == len(ids)


def test_encoding_is_deterministic() -> None:
    """Verify that equal descriptors built separately encode identically."""
    raw = {"name": "Bar", "parameters": [_param("x", {"element": INT, "rank": 2})]}
    first = method_descriptor(raw, FOO)
    second = method_descriptor(raw, type_definition(FOO_REF))
    assert first == second
    assert encode_identity(first) == encode_identity(first)
    assert encode_identity(first) == encode_identity(second)
