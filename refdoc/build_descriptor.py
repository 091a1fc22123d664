"""Logic for building symbol descriptors from raw manifest records.

Raw records are the plain dictionaries a reflection dump produces (see the
symbol manifest format). Every builder either returns a complete descriptor or
raises MalformedSymbolError; nothing half-built escapes.
"""

from typing import Any

from refdoc.encode_identity import type_id
from refdoc.errors import MalformedSymbolError
from refdoc.strip_generic_arity import strip_generic_arity
from refdoc.symbol_descriptor import (
    Accessibility,
    MemberFlags,
    SymbolDescriptor,
    SymbolKind,
    TypeKind,
)

VOID = SymbolDescriptor(kind=SymbolKind.TYPE, bare_name="Void", namespace="System")


def type_descriptor(
    raw: Any,
    declaring: SymbolDescriptor | None = None,
) -> SymbolDescriptor:
    """Build a descriptor for a type reference record."""
    rec = _require_mapping(raw, "type reference")

    if "element" in rec:
        return _modified_type(rec)

    if "generic_parameter" in rec:
        pos = _non_negative_int(rec["generic_parameter"], "generic parameter position")
        return SymbolDescriptor(
            kind=SymbolKind.GENERIC_PARAMETER,
            bare_name=str(rec.get("name") or f"T{pos}"),
            generic_parameter_position=pos,
        )

    bare, arity = strip_generic_arity(_require_name(rec))
    args = tuple(type_descriptor(a) for a in _list(rec, "arguments"))
    if declaring is None and rec.get("declaring"):
        declaring = type_descriptor(rec["declaring"])

    # A reference to an unbound definition (List`1 without arguments).
    params: tuple[SymbolDescriptor, ...] = ()
    if arity and not args:
        params = _generic_parameters(_list(rec, "generic_parameters"), arity)

    return SymbolDescriptor(
        kind=SymbolKind.TYPE,
        bare_name=bare,
        namespace=_namespace(rec),
        declaring=declaring,
        generic_arguments=args,
        generic_parameters=params,
    )


def type_definition(
    raw: Any,
    declaring: SymbolDescriptor | None = None,
) -> SymbolDescriptor:
    """Build the descriptor of a documented type (without its members)."""
    rec = _require_mapping(raw, "type definition")
    bare, arity = strip_generic_arity(_require_name(rec))
    params = _generic_parameters(_list(rec, "generic_parameters"), arity)

    kind_raw = str(rec.get("kind") or "class").lower()
    try:
        type_kind = TypeKind(kind_raw)
    except ValueError as e:
        msg = f"Unknown type kind {kind_raw!r} for {bare}"
        raise MalformedSymbolError(msg) from e

    is_static = bool(rec.get("static"))
    flags = MemberFlags(
        access=_access(rec),
        is_static=is_static,
        is_sealed=is_static or bool(rec.get("sealed")),
        is_abstract=is_static or bool(rec.get("abstract")),
    )

    value_type = None
    parameters: tuple[SymbolDescriptor, ...] = ()
    if type_kind is TypeKind.DELEGATE:
        value_type = _returns(rec)
        parameters = tuple(parameter_descriptor(p) for p in _list(rec, "parameters"))

    return SymbolDescriptor(
        kind=SymbolKind.TYPE,
        bare_name=bare,
        namespace=_namespace(rec),
        declaring=declaring,
        generic_parameters=params,
        type_kind=type_kind,
        flags=flags,
        base_type=type_descriptor(rec["base"]) if rec.get("base") else None,
        inheritance=tuple(type_descriptor(b) for b in _list(rec, "inheritance")),
        interfaces=tuple(type_descriptor(i) for i in _list(rec, "interfaces")),
        value_type=value_type,
        parameters=parameters,
        obsolete=_obsolete(rec),
    )


def method_descriptor(raw: Any, declaring: SymbolDescriptor) -> SymbolDescriptor:
    """Build the descriptor of a method (including operator overloads)."""
    rec = _require_mapping(raw, "method")
    bare, arity = strip_generic_arity(_require_name(rec))
    return SymbolDescriptor(
        kind=SymbolKind.METHOD,
        bare_name=bare,
        declaring=declaring,
        generic_parameters=_generic_parameters(
            _list(rec, "generic_parameters"), arity
        ),
        value_type=_returns(rec),
        parameters=tuple(parameter_descriptor(p) for p in _list(rec, "parameters")),
        flags=_member_flags(rec, declaring),
        obsolete=_obsolete(rec),
    )


def constructor_descriptor(raw: Any, declaring: SymbolDescriptor) -> SymbolDescriptor:
    """Build the descriptor of a constructor."""
    rec = _require_mapping(raw, "constructor")
    return SymbolDescriptor(
        kind=SymbolKind.CONSTRUCTOR,
        bare_name=str(rec.get("name") or ".ctor"),
        declaring=declaring,
        parameters=tuple(parameter_descriptor(p) for p in _list(rec, "parameters")),
        flags=_member_flags(rec, declaring),
        obsolete=_obsolete(rec),
    )


def field_descriptor(raw: Any, declaring: SymbolDescriptor) -> SymbolDescriptor:
    """Build the descriptor of a field or enum member."""
    rec = _require_mapping(raw, "field")
    name = _require_name(rec)
    is_literal = bool(rec.get("literal"))
    flags = MemberFlags(
        access=_access(rec),
        is_static=is_literal or bool(rec.get("static")),
        is_literal=is_literal,
        is_read_only=bool(rec.get("readonly")),
    )
    return SymbolDescriptor(
        kind=SymbolKind.FIELD,
        bare_name=name,
        declaring=declaring,
        value_type=type_descriptor(_require(rec, "type", name)),
        flags=flags,
        constant_value=rec.get("value"),
        obsolete=_obsolete(rec),
    )


def property_descriptor(raw: Any, declaring: SymbolDescriptor) -> SymbolDescriptor:
    """Build the descriptor of a property or indexer."""
    rec = _require_mapping(raw, "property")
    name = _require_name(rec)
    getter = _accessor_flags(rec.get("getter"))
    setter = _accessor_flags(rec.get("setter"))
    if getter is None and setter is None:
        msg = f"Property {name} has neither a getter nor a setter"
        raise MalformedSymbolError(msg)

    return SymbolDescriptor(
        kind=SymbolKind.PROPERTY,
        bare_name=name,
        declaring=declaring,
        value_type=type_descriptor(_require(rec, "type", name)),
        index_parameters=tuple(
            parameter_descriptor(p) for p in _list(rec, "index_parameters")
        ),
        flags=MemberFlags(is_override=_is_override(rec, declaring)),
        getter=getter,
        setter=setter,
        obsolete=_obsolete(rec),
    )


def parameter_descriptor(raw: Any) -> SymbolDescriptor:
    """Build the descriptor of a method, constructor or indexer parameter."""
    rec = _require_mapping(raw, "parameter")
    name = _require_name(rec)
    ptype = type_descriptor(_require(rec, "type", name))
    is_out = bool(rec.get("out"))
    # out parameters are passed by reference in metadata.
    if is_out and not ptype.is_by_ref:
        ptype = _wrap(ptype, is_by_ref=True)

    return SymbolDescriptor(
        kind=SymbolKind.PARAMETER,
        bare_name=name,
        value_type=ptype,
        is_out=is_out,
        is_params=bool(rec.get("params")),
        has_default="default" in rec,
        default_value=rec.get("default"),
    )


def _modified_type(rec: dict[str, Any]) -> SymbolDescriptor:
    """Build an array, pointer or by-ref type around one element level."""
    modifiers = [
        k for k in ("rank", "pointer", "by_ref") if rec.get(k) not in (None, False)
    ]
    if len(modifiers) > 1:
        msg = f"Conflicting type modifiers: {', '.join(modifiers)}"
        raise MalformedSymbolError(msg)
    element = type_descriptor(rec["element"])
    if rec.get("pointer"):
        return _wrap(element, is_pointer=True)
    if rec.get("by_ref"):
        return _wrap(element, is_by_ref=True)
    rank = _non_negative_int(rec.get("rank", 1), "array rank")
    if rank < 1:
        msg = f"Array rank must be at least 1, got {rank}"
        raise MalformedSymbolError(msg)
    return _wrap(element, is_array=True, array_rank=rank)


def _wrap(element: SymbolDescriptor, **modifier: Any) -> SymbolDescriptor:
    inner = element.innermost()
    return SymbolDescriptor(
        kind=SymbolKind.TYPE,
        bare_name=inner.bare_name,
        namespace=inner.namespace,
        element_type=element,
        **modifier,
    )


def _generic_parameters(names: list[Any], arity: int) -> tuple[SymbolDescriptor, ...]:
    """Build generic parameter descriptors from declared names or the arity."""
    if not names:
        names = ["T"] if arity == 1 else [f"T{i + 1}" for i in range(arity)]
    return tuple(
        SymbolDescriptor(
            kind=SymbolKind.GENERIC_PARAMETER,
            bare_name=str(n),
            generic_parameter_position=i,
        )
        for i, n in enumerate(names)
    )


def _member_flags(rec: dict[str, Any], declaring: SymbolDescriptor) -> MemberFlags:
    return MemberFlags(
        access=_access(rec),
        is_static=bool(rec.get("static")),
        is_abstract=bool(rec.get("abstract")),
        is_virtual=bool(rec.get("virtual")),
        is_sealed=bool(rec.get("sealed")),
        is_override=_is_override(rec, declaring),
    )


def _accessor_flags(raw: Any) -> MemberFlags | None:
    """Build accessor flags; `true` is shorthand for a public accessor."""
    if raw is None or raw is False:
        return None
    if raw is True:
        return MemberFlags()
    rec = _require_mapping(raw, "accessor")
    return MemberFlags(
        access=_access(rec),
        is_static=bool(rec.get("static")),
        is_abstract=bool(rec.get("abstract")),
        is_virtual=bool(rec.get("virtual")),
    )


def _is_override(rec: dict[str, Any], declaring: SymbolDescriptor) -> bool:
    """Check if the member was introduced by a type other than its declarer.

    The introducing type is named in ID form, e.g. ``N.List`1``.
    """
    if rec.get("override"):
        return True
    base_definition = rec.get("base_definition")
    return bool(base_definition) and str(base_definition) != type_id(declaring)


def _access(rec: dict[str, Any]) -> Accessibility:
    value = str(rec.get("access") or "public").strip().lower()
    try:
        return Accessibility(value)
    except ValueError as e:
        msg = f"Unknown accessibility {value!r}"
        raise MalformedSymbolError(msg) from e


def _returns(rec: dict[str, Any]) -> SymbolDescriptor:
    raw = rec.get("returns")
    return type_descriptor(raw) if raw else VOID


def _obsolete(rec: dict[str, Any]) -> str | None:
    value = rec.get("obsolete")
    if value is None or value is False:
        return None
    return "" if value is True else str(value)


def _namespace(rec: dict[str, Any]) -> str | None:
    ns = rec.get("namespace")
    return str(ns) if ns else None


def _require_mapping(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        msg = f"Expected a mapping for {what}, got {type(raw).__name__}"
        raise MalformedSymbolError(msg)
    return raw


def _require_name(rec: dict[str, Any]) -> str:
    name = rec.get("name")
    if not isinstance(name, str) or not name.strip():
        msg = f"Symbol record has no name: {rec!r}"
        raise MalformedSymbolError(msg)
    return name.strip()


def _require(rec: dict[str, Any], key: str, owner: str) -> Any:
    value = rec.get(key)
    if value is None:
        msg = f"{owner} is missing required key {key!r}"
        raise MalformedSymbolError(msg)
    return value


def _list(rec: dict[str, Any], key: str) -> list[Any]:
    value = rec.get(key) or []
    if not isinstance(value, list):
        msg = f"Expected a list for {key!r}, got {type(value).__name__}"
        raise MalformedSymbolError(msg)
    return value


def _non_negative_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"Invalid {what}: {value!r}"
        raise MalformedSymbolError(msg)
    return value
