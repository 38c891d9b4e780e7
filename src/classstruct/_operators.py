"""Operator tables for text conversion and concatenation."""

import types

import classstruct

__all__ = [
    "OPERATOR_NAMES",
    "DEFAULT_OPERATORS",
    "merge_operators",
    "operators_of",
    "stringify",
    "concatenate",
]


OPERATOR_NAMES = ("stringify", "concatenate")


def _default_stringify(obj):
    return f"[object {obj._tag}]"


def _default_concatenate(left, right):
    return f"{left}{right}"


DEFAULT_OPERATORS = types.MappingProxyType({
    "stringify": _default_stringify,
    "concatenate": _default_concatenate,
})


def merge_operators(inherited, overrides=None):
    """Build the operator table for a new class.

    Overrides win per operator. Anything not overridden keeps the value
    from the inherited table, which already holds the nearest ancestor's
    definition or the root default.

    Args:
        inherited: (Mapping) Operator table of the parent class
        overrides: (Mapping | None) Operators defined by the new class

    Returns:
        (MappingProxyType) Read-only merged table

    Raises:
        TypeError: If an override has an unknown name or is not callable
    """
    merged = dict(inherited)
    for name, func in (overrides or {}).items():
        if name not in OPERATOR_NAMES:
            raise TypeError(f"Unknown operator '{name}', expected one of {', '.join(OPERATOR_NAMES)}")
        if not callable(func):
            raise TypeError(f"Operator '{name}' must be callable, got {type(func).__name__}")
        merged[name] = func
    return types.MappingProxyType(merged)


def operators_of(obj):
    """Operator table used for an entity.

    Instances use the merged table of their class. Classes themselves are
    always converted with the root defaults.
    """
    if isinstance(obj, classstruct.Instance):
        return obj._cls._operators
    if isinstance(obj, classstruct.Class):
        return DEFAULT_OPERATORS
    raise TypeError(f"Expected a class or instance, got {type(obj).__name__}")


def stringify(obj):
    """Convert a class or instance to text through its operator table."""
    return operators_of(obj)["stringify"](obj)


def concatenate(left, right):
    """Join two operands where at least one is a class or instance.

    The left operand's table is used when it is an entity, otherwise the
    right operand's. Operands are passed to the operator in order.
    """
    for operand in (left, right):
        if isinstance(operand, classstruct.Entity):
            return operators_of(operand)["concatenate"](left, right)
    raise TypeError("concatenate needs a class or instance operand")
