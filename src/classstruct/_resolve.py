"""Member lookup for classes and instances.

Classes resolve a missing name by walking their parent classes, ending
at the root class whose own members are the globally inherited ones.

Instances resolve in a fixed order:
1. Own fields set by the constructor or by later assignment
2. Intrinsic fields `cls` (owning class) and `super` (parent instance)
3. Own members of the owning class, not inherited ones
4. The parent instance chain; each ancestor offers its own fields, then
   its class's own member when that member is function-like
5. The root class members

Data fields stay with the instance that set them, while methods stay
reachable through ancestor classes even when no ancestor instance stores
them.
"""

import types

import classstruct

__all__ = [
    "is_function",
    "lookup_class_member",
    "resolve_class_member",
    "resolve_instance_member",
]


_missing = object()


def is_function(value):
    """True for callables that act as methods and bind to their receiver.

    Covers Python functions, builtins, partials and callable objects.
    Classes of either model are excluded, so a class stored as a member is
    returned as a value rather than bound.
    """
    return callable(value) and not isinstance(value, (type, classstruct.Entity))


def _bind(value, receiver):
    if is_function(value):
        return types.MethodType(value, receiver)
    return value


def lookup_class_member(cls, name, default=None):
    """Find the raw member `name` on a class or its ancestors.

    Args:
        cls: (Class) Class to start from
        name: (str) Member name
        default: Value returned when nothing is found

    Returns:
        The unbound member, or `default`
    """
    if name == "super":
        return cls._parent
    current = cls
    while current is not None:
        value = current._members.get(name, _missing)
        if value is not _missing:
            return value
        current = current._parent
    return default


def resolve_class_member(cls, name):
    """Attribute lookup for classes, binding functions to `cls`.

    Raises:
        AttributeError: If no class in the ancestry defines `name`
    """
    value = lookup_class_member(cls, name, _missing)
    if value is _missing:
        raise AttributeError(f"Class '{cls._tag}' has no member '{name}'")
    return _bind(value, cls)


def _lookup_instance(instance, name):
    value = instance._fields.get(name, _missing)
    if value is not _missing:
        return value, False

    if name == "cls":
        return instance._cls, False
    if name == "super":
        return instance._parent, False

    value = instance._cls._members.get(name, _missing)
    if value is not _missing:
        return value, True

    ancestor = instance._parent
    while ancestor is not None:
        value = ancestor._fields.get(name, _missing)
        if value is not _missing:
            return value, False
        value = ancestor._cls._members.get(name, _missing)
        if is_function(value):
            return value, True
        ancestor = ancestor._parent

    value = classstruct.Object._members.get(name, _missing)
    return value, True


def resolve_instance_member(instance, name):
    """Attribute lookup for instances.

    Fields are returned as stored. Members that come from a class are
    bound to `instance` when they are functions.

    Raises:
        AttributeError: If `name` cannot be found anywhere
    """
    value, from_class = _lookup_instance(instance, name)
    if value is _missing:
        raise AttributeError(f"'{instance._tag}' instance has no field '{name}'")
    if from_class:
        return _bind(value, instance)
    return value
