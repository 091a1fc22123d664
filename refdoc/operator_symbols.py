"""Lookup table from operator method names to their C# symbols."""

from types import MappingProxyType

IMPLICIT_CONVERSION = "op_Implicit"
EXPLICIT_CONVERSION = "op_Explicit"

# Conversions have no symbol; they render as "implicit/explicit operator T".
OPERATOR_SYMBOLS = MappingProxyType(
    {
        IMPLICIT_CONVERSION: "",
        EXPLICIT_CONVERSION: "",
        "op_Addition": "+",
        "op_Subtraction": "-",
        "op_Multiply": "*",
        "op_Division": "/",
        "op_Modulus": "%",
        "op_ExclusiveOr": "^",
        "op_BitwiseAnd": "&",
        "op_BitwiseOr": "|",
        "op_LogicalAnd": "&&",
        "op_LogicalOr": "||",
        "op_LogicalNot": "!",
        "op_Assign": "=",
        "op_LeftShift": "<<",
        "op_RightShift": ">>",
        "op_SignedRightShift": "",
        "op_UnsignedRightShift": "",
        "op_Equality": "==",
        "op_GreaterThan": ">",
        "op_LessThan": "<",
        "op_Inequality": "!=",
        "op_GreaterThanOrEqual": ">=",
        "op_LessThanOrEqual": "<=",
        "op_MultiplicationAssignment": "*=",
        "op_SubtractionAssignment": "-=",
        "op_ExclusiveOrAssignment": "^=",
        "op_LeftShiftAssignment": "<<=",
        "op_ModulusAssignment": "%=",
        "op_AdditionAssignment": "+=",
        "op_BitwiseAndAssignment": "&=",
        "op_BitwiseOrAssignment": "|=",
        "op_Comma": ",",
        "op_DivisionAssignment": "/=",
        "op_Decrement": "--",
        "op_Increment": "++",
        "op_UnaryNegation": "-",
        "op_UnaryPlus": "+",
        "op_OnesComplement": "~",
        "op_True": "true",
        "op_False": "false",
    }
)


def is_operator_name(name: str) -> bool:
    """Check if a method name is a recognized operator overload."""
    return name.startswith("op_") and name in OPERATOR_SYMBOLS


def is_conversion_name(name: str) -> bool:
    """Check if a method name is a user-defined conversion operator."""
    return name in {IMPLICIT_CONVERSION, EXPLICIT_CONVERSION}


def operator_symbol(name: str) -> str:
    """Return the display symbol for an operator method, or "" if unknown."""
    return OPERATOR_SYMBOLS.get(name, "")
