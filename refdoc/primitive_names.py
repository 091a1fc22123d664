"""C# keyword aliases for the built-in runtime types."""

from types import MappingProxyType

PRIMITIVE_NAMES = MappingProxyType(
    {
        "System.Char": "char",
        "System.String": "string",
        "System.Boolean": "bool",
        "System.Int32": "int",
        "System.Int64": "long",
        "System.Single": "float",
        "System.Double": "double",
        "System.Byte": "byte",
        "System.SByte": "sbyte",
        "System.Decimal": "decimal",
        "System.Int16": "short",
        "System.UInt32": "uint",
        "System.UInt64": "ulong",
        "System.UInt16": "ushort",
        "System.Object": "object",
        "System.Void": "void",
    }
)


def builtin_name(full_name: str) -> str | None:
    """Return the C# keyword for a runtime type name, if it has one."""
    return PRIMITIVE_NAMES.get(full_name)
