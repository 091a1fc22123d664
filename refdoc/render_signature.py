"""Logic for rendering C#-style declaration signatures from descriptors."""

from dataclasses import dataclass

from refdoc.format_literal import format_literal
from refdoc.operator_symbols import (
    EXPLICIT_CONVERSION,
    IMPLICIT_CONVERSION,
    is_operator_name,
    operator_symbol,
)
from refdoc.primitive_names import builtin_name
from refdoc.symbol_descriptor import (
    Accessibility,
    MemberFlags,
    SymbolDescriptor,
    SymbolKind,
    TypeKind,
)

INDENT = "    "

# Base types implied by the declaration keyword.
IMPLICIT_BASES = {"System.Object", "System.ValueType", "System.Enum"}


@dataclass(frozen=True)
class RenderOptions:
    """Switches controlling how much of a declaration is rendered."""

    include_keywords: bool = False
    include_parameter_names: bool = True
    include_body: bool = False
    qualify_names: bool = False


HEADING = RenderOptions(include_parameter_names=False)
DECLARATION = RenderOptions(include_keywords=True, include_body=True)


def render_signature(d: SymbolDescriptor, options: RenderOptions = HEADING) -> str:
    """Render a descriptor as a human-readable declaration."""
    is_definition = d.kind is SymbolKind.TYPE and d.type_kind is not None
    if is_definition and options.include_keywords:
        return _type_declaration(d, options)
    if d.kind in {SymbolKind.TYPE, SymbolKind.GENERIC_PARAMETER}:
        return display_type(d, qualify=options.qualify_names)
    if d.kind in {SymbolKind.METHOD, SymbolKind.CONSTRUCTOR}:
        return _method_signature(d, options)
    if d.kind is SymbolKind.PROPERTY:
        return _property_signature(d, options)
    if d.kind is SymbolKind.FIELD:
        return _field_signature(d, options)
    return _parameter(d, options)


def display_type(d: SymbolDescriptor, *, qualify: bool = False) -> str:
    """Render a type reference, e.g. ``Dictionary<string, int>[,]``."""
    if d.element_type is not None:
        inner = display_type(d.element_type, qualify=qualify)
        if d.is_array:
            return inner + "[" + "," * (d.array_rank - 1) + "]"
        if d.is_pointer:
            return inner + "*"
        # By-ref renders as its element; the ref/out keyword belongs to the parameter.
        return inner

    if d.kind is SymbolKind.GENERIC_PARAMETER:
        return d.bare_name

    keyword = builtin_name(d.full_name)
    if keyword:
        return keyword

    name = d.bare_name
    if qualify:
        if d.declaring is not None:
            name = f"{display_type(d.declaring, qualify=True)}.{name}"
        elif d.namespace:
            name = f"{d.namespace}.{name}"
    return name + _generic_suffix(d, qualify=qualify)


def type_title(d: SymbolDescriptor) -> str:
    """Title for a type page, e.g. ``List<T> Class``."""
    kind = d.type_kind.value.capitalize() if d.type_kind else "Class"
    return f"{display_type(d)} {kind}"


def keywords(flags: MemberFlags) -> str:
    """Accessibility and modifier keywords for a member, with trailing space."""
    return _keywords([flags], is_override=flags.is_override)


def _generic_suffix(d: SymbolDescriptor, *, qualify: bool) -> str:
    if d.generic_arguments:
        args = ", ".join(display_type(a, qualify=qualify) for a in d.generic_arguments)
        return f"<{args}>"
    if d.generic_parameters:
        return "<" + ", ".join(p.bare_name for p in d.generic_parameters) + ">"
    return ""


def _keywords(accessors: list[MemberFlags], *, is_override: bool) -> str:
    """Combine accessor flags into one keyword prefix.

    A public accessor anywhere makes the member public; otherwise a
    family-like accessor makes it protected.
    """
    parts = []
    if any(a.access is Accessibility.PUBLIC for a in accessors):
        parts.append("public")
    elif any(a.access.is_family_like for a in accessors):
        parts.append("protected")

    if any(a.is_static for a in accessors):
        parts.append("static")
    elif any(a.is_abstract for a in accessors):
        parts.append("abstract")

    if is_override:
        parts.append("override")
    elif any(a.is_virtual for a in accessors):
        parts.append("virtual")

    return "".join(f"{p} " for p in parts)


def _type_declaration(d: SymbolDescriptor, options: RenderOptions) -> str:
    qualify = options.qualify_names
    out = "public " if d.flags.access is Accessibility.PUBLIC else ""

    if d.type_kind in {TypeKind.CLASS, TypeKind.STRUCT, TypeKind.DELEGATE}:
        if d.flags.is_sealed and d.flags.is_abstract:
            out += "static "
        elif d.flags.is_sealed and d.type_kind is TypeKind.CLASS:
            out += "sealed "
        elif d.flags.is_abstract:
            out += "abstract "

    if d.type_kind is TypeKind.DELEGATE:
        ret = display_type(d.value_type, qualify=qualify) if d.value_type else "void"
        params = _parameter_list(d.parameters, options)
        return f"{out}delegate {ret} {display_type(d)}({params});"

    out += f"{d.type_kind.value} {display_type(d)}"

    bases = []
    if d.base_type is not None and d.base_type.full_name not in IMPLICIT_BASES:
        bases.append(d.base_type)
    if d.type_kind is not TypeKind.ENUM:
        bases.extend(d.interfaces)
    if bases:
        out += " : " + ", ".join(display_type(b, qualify=qualify) for b in bases)
    return out


def _method_signature(d: SymbolDescriptor, options: RenderOptions) -> str:
    qualify = options.qualify_names
    is_conversion = False
    if d.kind is SymbolKind.CONSTRUCTOR:
        name = d.declaring.bare_name if d.declaring is not None else d.bare_name
    elif d.bare_name == IMPLICIT_CONVERSION:
        name = f"implicit operator {display_type(d.value_type, qualify=qualify)}"
        is_conversion = True
    elif d.bare_name == EXPLICIT_CONVERSION:
        name = f"explicit operator {display_type(d.value_type, qualify=qualify)}"
        is_conversion = True
    elif is_operator_name(d.bare_name):
        name = f"operator {operator_symbol(d.bare_name)}"
    else:
        name = d.bare_name

    out = ""
    if options.include_keywords:
        out += keywords(d.flags)
        if d.kind is SymbolKind.METHOD and not is_conversion and d.value_type:
            out += display_type(d.value_type, qualify=qualify) + " "

    out += name
    if d.generic_parameters:
        out += "<" + ", ".join(p.bare_name for p in d.generic_parameters) + ">"
    return f"{out}({_parameter_list(d.parameters, options)})"


def _property_signature(d: SymbolDescriptor, options: RenderOptions) -> str:
    accessors = [a for a in (d.getter, d.setter) if a is not None]
    has_public = any(a.access is Accessibility.PUBLIC for a in accessors)

    out = ""
    if options.include_keywords:
        out += _keywords(accessors, is_override=d.flags.is_override)
        if d.value_type is not None:
            out += display_type(d.value_type, qualify=options.qualify_names) + " "

    if d.index_parameters:
        out += f"this[{_parameter_list(d.index_parameters, options)}]"
    else:
        out += d.bare_name

    if options.include_body:
        lines = [out, "{"]
        for accessor, word in ((d.getter, "get"), (d.setter, "set")):
            if accessor is None:
                continue
            # Only a public property spells out a narrower accessor.
            restricted = has_public and accessor.access.is_family_like
            lines.append(f"{INDENT}{'protected ' if restricted else ''}{word};")
        lines.append("}")
        out = "\n".join(lines)
    return out


def _field_signature(d: SymbolDescriptor, options: RenderOptions) -> str:
    if not options.include_keywords:
        return d.bare_name

    flags = d.flags
    out = ""
    if flags.access is Accessibility.PUBLIC:
        out += "public "
    elif flags.access.is_family_like:
        out += "protected "

    if flags.is_literal:
        out += "const "
    else:
        if flags.is_static:
            out += "static "
        if flags.is_read_only:
            out += "readonly "

    if d.value_type is not None:
        out += display_type(d.value_type, qualify=options.qualify_names) + " "
    out += d.bare_name
    if flags.is_literal:
        out += f" = {format_literal(d.constant_value, d.value_type)}"
    return out + ";"


def _parameter_list(
    params: tuple[SymbolDescriptor, ...], options: RenderOptions
) -> str:
    return ", ".join(_parameter(p, options) for p in params)


def _parameter(p: SymbolDescriptor, options: RenderOptions) -> str:
    ptype = p.value_type
    out = ""
    if p.is_out:
        out += "out "
    elif ptype is not None and ptype.is_by_ref:
        out += "ref "
    elif p.is_params:
        out += "params "

    if ptype is not None:
        out += display_type(ptype, qualify=options.qualify_names)

    if options.include_parameter_names:
        out += f" {p.bare_name}"
        if p.has_default:
            out += f" = {format_literal(p.default_value, ptype)}"
    return out.strip()
