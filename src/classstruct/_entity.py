"""Base entity type for object model values."""

import enum

import classstruct

__all__ = ["Entity", "Kind", "kind_of"]


class Kind(enum.Enum):
    """Discriminant carried by every entity."""

    CLASS = "class"
    INSTANCE = "instance"


class Entity:
    """Base class for classes and instances of the object model.

    Subclasses:
    - Class: Extensible descriptor that builds instances when called
    - Instance: Record of fields produced by calling a class

    Every entity carries its type tag in `_tag` and its ancestry link in
    `_parent`, a parent class for classes and a parent instance for
    instances. The `_kind` discriminant tells the two apart without
    probing for fields; `kind_of` reads it.

    Text conversion and concatenation go through the operator table of the
    entity, so `str(obj)`, `"text" + obj` and `obj + "text"` honor
    per-class overrides.
    """

    __slots__ = ()
    _kind = None

    def __str__(self):
        return classstruct.stringify(self)

    def __add__(self, other):
        return classstruct.concatenate(self, other)

    def __radd__(self, other):
        return classstruct.concatenate(other, self)


def kind_of(obj):
    """Discriminant of a class or instance.

    Kept off the entity's attribute namespace so fields and members named
    `kind` resolve normally.
    """
    if not isinstance(obj, Entity):
        raise TypeError(f"Expected a class or instance, got {type(obj).__name__}")
    return obj._kind
