"""Instances and the instance factory"""

import types

import classstruct

__all__ = ["Instance", "create_instance", "own_fields"]


class Instance(classstruct.Entity):
    """An instance of a class.

    Instances hold their own fields, a reference to the class that built
    them, and an optional parent instance created during construction.
    Reading a field that is not set falls back to the class and the
    parent instance chain, see `resolve_instance_member`.

    Fields can be read and assigned as attributes or items. Item access
    also works for keys that are not valid identifiers.

    Args:
        cls: (Class) Owning class
        parent: (Instance | None) Parent instance in the ancestry chain
        fields: (dict) Own fields, used as-is

    Attributes:
        cls: (Class) Owning class (intrinsic field)
        super: (Instance | None) Parent instance (intrinsic field)
    """

    __slots__ = ("_tag", "_cls", "_parent", "_fields")
    _kind = classstruct.Kind.INSTANCE
    __iter__ = None

    def __init__(self, cls, parent, fields):
        object.__setattr__(self, "_tag", cls._tag)
        object.__setattr__(self, "_cls", cls)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_fields", fields)

    def __repr__(self):
        return f"Instance<{self._tag}>"

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__") or name in Instance.__slots__:
            raise AttributeError(name)
        return classstruct.resolve_instance_member(self, name)

    def __reduce__(self):
        return Instance, (self._cls, self._parent, dict(self._fields))

    def __setattr__(self, name, value):
        self._fields[name] = value

    def __delattr__(self, name):
        try:
            del self._fields[name]
        except KeyError:
            raise AttributeError(f"'{self._tag}' instance has no own field '{name}'") from None

    def __getitem__(self, key):
        try:
            return classstruct.resolve_instance_member(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def __setitem__(self, key, value):
        self._fields[key] = value

    def __delitem__(self, key):
        del self._fields[key]

    def __contains__(self, key):
        try:
            classstruct.resolve_instance_member(self, key)
        except AttributeError:
            return False
        return True


def create_instance(cls, parent_instance=None, fields=None):
    """Bind fields to a class and an optional parent instance.

    Args:
        cls: (Class) Owning class
        parent_instance: (Instance | None) Ancestry link
        fields: (Mapping | None) Initial fields, copied into the instance

    Returns:
        Instance: The new instance

    Raises:
        TypeError: If `cls` is not a class or `parent_instance` is not an instance
    """
    if not isinstance(cls, classstruct.Class):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")
    if parent_instance is not None and not isinstance(parent_instance, Instance):
        raise TypeError(f"Parent must be an instance, got {type(parent_instance).__name__}")
    return Instance(cls, parent_instance, dict(fields or {}))


def own_fields(instance):
    """Read-only view of the fields set directly on an instance."""
    if not isinstance(instance, Instance):
        raise TypeError(f"Expected an instance, got {type(instance).__name__}")
    return types.MappingProxyType(instance._fields)
