"""Data models for normalized program symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SymbolKind(Enum):
    """Closed set of symbol kinds a descriptor can take."""

    TYPE = "type"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    PROPERTY = "property"
    PARAMETER = "parameter"
    GENERIC_PARAMETER = "generic_parameter"


class TypeKind(Enum):
    """Declaration kind of a type definition."""

    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    DELEGATE = "delegate"


class Accessibility(Enum):
    """Member accessibility as reported by the metadata."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PROTECTED_INTERNAL = "protected internal"
    PRIVATE_PROTECTED = "private protected"
    INTERNAL = "internal"
    PRIVATE = "private"

    @property
    def is_family_like(self) -> bool:
        """Check if the accessibility is visible to derived types only."""
        return self in {
            Accessibility.PROTECTED,
            Accessibility.PROTECTED_INTERNAL,
            Accessibility.PRIVATE_PROTECTED,
        }


@dataclass(frozen=True)
class MemberFlags:
    """Accessibility and modifier flags of a member or accessor."""

    access: Accessibility = Accessibility.PUBLIC
    is_static: bool = False
    is_abstract: bool = False
    is_virtual: bool = False
    is_sealed: bool = False
    is_override: bool = False  # introducing definition differs from declaring type
    is_literal: bool = False  # const field
    is_read_only: bool = False


@dataclass(frozen=True)
class SymbolDescriptor:
    """Normalized, immutable shape of one program element."""

    kind: SymbolKind
    bare_name: str
    namespace: str | None = None
    declaring: SymbolDescriptor | None = None

    # Generics
    generic_arguments: tuple[SymbolDescriptor, ...] = ()
    generic_parameters: tuple[SymbolDescriptor, ...] = ()
    generic_parameter_position: int | None = None

    # Modifiers (outermost only; see element_type)
    is_array: bool = False
    array_rank: int = 0
    is_pointer: bool = False
    is_by_ref: bool = False
    element_type: SymbolDescriptor | None = None

    # Members
    value_type: SymbolDescriptor | None = None
    parameters: tuple[SymbolDescriptor, ...] = ()
    index_parameters: tuple[SymbolDescriptor, ...] = ()
    flags: MemberFlags = field(default_factory=MemberFlags)
    getter: MemberFlags | None = None
    setter: MemberFlags | None = None
    constant_value: Any = None
    obsolete: str | None = None

    # Parameters
    is_out: bool = False
    is_params: bool = False
    has_default: bool = False
    default_value: Any = None

    # Type definitions
    type_kind: TypeKind | None = None
    base_type: SymbolDescriptor | None = None
    inheritance: tuple[SymbolDescriptor, ...] = ()
    interfaces: tuple[SymbolDescriptor, ...] = ()

    @property
    def is_modified(self) -> bool:
        """Check if the descriptor wraps an element (array, pointer, by-ref)."""
        return self.is_array or self.is_pointer or self.is_by_ref

    @property
    def is_generic_type(self) -> bool:
        """Check if the descriptor is a constructed or definition generic type."""
        return bool(self.generic_arguments or self.generic_parameters)

    @property
    def is_indexer(self) -> bool:
        """Check if the descriptor is a property with index parameters."""
        return self.kind is SymbolKind.PROPERTY and bool(self.index_parameters)

    @property
    def full_name(self) -> str:
        """Dotted name without generic decoration, e.g. System.Int32."""
        if self.declaring is not None:
            return f"{self.declaring.full_name}.{self.bare_name}"
        if self.namespace:
            return f"{self.namespace}.{self.bare_name}"
        return self.bare_name

    def innermost(self) -> SymbolDescriptor:
        """Return the element type beneath all array/pointer/by-ref layers."""
        d = self
        while d.element_type is not None:
            d = d.element_type
        return d
