"""Logic for generating documentation-comment ID strings from descriptors.

The grammar matches the member names a compiler writes into its XML
documentation file, e.g. ``T:System.String``, ``M:N.Foo.#ctor(System.Int32)``
or ``P:N.Foo.Item(System.String)``. Kind prefixes are added only at the
outermost level; nested type references are encoded without them.
"""

from refdoc.operator_symbols import is_conversion_name
from refdoc.symbol_descriptor import SymbolDescriptor, SymbolKind

CONSTRUCTOR_TOKEN = "#ctor"


def encode_identity(d: SymbolDescriptor) -> str:
    """Return the canonical ID string of a descriptor."""
    if d.kind in {SymbolKind.TYPE, SymbolKind.GENERIC_PARAMETER}:
        return f"T:{type_id(d)}"
    if d.kind in {SymbolKind.METHOD, SymbolKind.CONSTRUCTOR}:
        return f"M:{_method_id(d)}"
    if d.kind is SymbolKind.FIELD:
        return f"F:{_member_prefix(d)}{d.bare_name}"
    if d.kind is SymbolKind.PROPERTY:
        return f"P:{_member_prefix(d)}{d.bare_name}{_param_list(d.index_parameters)}"
    # PARAMETER: the form used inside member parameter lists.
    return type_id(d.value_type) if d.value_type is not None else d.bare_name


def type_id(d: SymbolDescriptor) -> str:
    """Encode a type reference without the ``T:`` prefix."""
    if d.element_type is not None:
        base = type_id(d.element_type)
        if d.is_array:
            return base + _array_suffix(d.array_rank)
        if d.is_pointer:
            return base + "*"
        return base + "@"

    if d.kind is SymbolKind.GENERIC_PARAMETER:
        return f"``{d.generic_parameter_position}"

    if d.declaring is not None:
        name = f"{type_id(d.declaring)}.{d.bare_name}"
    elif d.namespace:
        name = f"{d.namespace}.{d.bare_name}"
    else:
        name = d.bare_name

    if d.generic_arguments:
        return name + "{" + ",".join(type_id(a) for a in d.generic_arguments) + "}"
    if d.generic_parameters:
        return f"{name}`{len(d.generic_parameters)}"
    return name


def _array_suffix(rank: int) -> str:
    if rank == 1:
        return "[]"
    return "[" + ",".join(["0:"] * rank) + "]"


def _member_prefix(d: SymbolDescriptor) -> str:
    return f"{type_id(d.declaring)}." if d.declaring is not None else ""


def _param_list(params: tuple[SymbolDescriptor, ...]) -> str:
    if not params:
        return ""
    return "(" + ",".join(encode_identity(p) for p in params) + ")"


def _method_id(d: SymbolDescriptor) -> str:
    name = CONSTRUCTOR_TOKEN if d.kind is SymbolKind.CONSTRUCTOR else d.bare_name
    out = f"{_member_prefix(d)}{name}"
    if d.generic_parameters:
        # Counts generic-typed parameters, not the method's own arity.
        generic_count = sum(
            1 for p in d.parameters if p.value_type and p.value_type.is_generic_type
        )
        out += f"``{generic_count}"
    out += _param_list(d.parameters)
    if is_conversion_name(d.bare_name) and d.value_type is not None:
        out += f"~{type_id(d.value_type)}"
    return out
