"""Class definitions, the class factory and the construction protocol"""

import collections.abc
import logging

import classstruct

__all__ = ["Class", "create_class", "construct"]

logger = logging.getLogger(__name__)


class Class(classstruct.Entity):
    """A class definition.

    Classes are created by extending an existing class, ultimately the
    root `Object`. Calling a class runs its constructor and returns a new
    `Instance`. Missing members are looked up on the parent class, and the
    parent itself is available as `cls.super`.

    A class is immutable once created, apart from its `constructor`
    member which can be assigned or deleted later. The root class cannot
    be changed at all.

    Args:
        tag: (str) Type name of the class
        parent: (Class | None) Parent class, None only for the root
        operators: (Mapping) Merged operator table
        members: (dict) Members defined directly on this class
    """

    __slots__ = ("_tag", "_parent", "_operators", "_members")
    _kind = classstruct.Kind.CLASS

    def __init__(self, tag, parent, operators, members):
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_operators", operators)
        object.__setattr__(self, "_members", members)

    def __repr__(self):
        return f"Class<{self._tag}>"

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__") or name in Class.__slots__:
            raise AttributeError(name)
        return classstruct.resolve_class_member(self, name)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        raise TypeError(f"Class '{self._tag}' cannot be pickled")

    def __setattr__(self, name, value):
        self._check_constructor_slot(name)
        if value is None:
            self._members.pop("constructor", None)
        elif callable(value):
            self._members["constructor"] = value
        else:
            raise TypeError(f"Constructor must be callable, got {type(value).__name__}")

    def __delattr__(self, name):
        self._check_constructor_slot(name)
        if self._members.pop("constructor", None) is None:
            raise AttributeError(f"Class '{self._tag}' has no constructor of its own")

    def __call__(self, *args, **kwargs):
        return construct(self, *args, **kwargs)

    def _check_constructor_slot(self, name):
        if self._parent is None:
            raise AttributeError(f"Root class '{self._tag}' is immutable")
        if name != "constructor":
            raise AttributeError(f"Class '{self._tag}' is immutable, only 'constructor' can be assigned")


def create_class(parent, name, operators=None, members=None):
    """Create a new class extending `parent`.

    Args:
        parent: (Class) Class to extend
        name: (str) Type name of the new class
        operators: (Mapping | None) Operator overrides, see `OPERATOR_NAMES`
        members: (Mapping | None) Methods and data defined on the class,
            may include a `constructor`

    Returns:
        Class: The new class

    Raises:
        InvalidExtendTarget: If `parent` is not a class
        TypeError: If the name, operators or members are malformed
    """
    if not isinstance(parent, Class):
        raise classstruct.InvalidExtendTarget(parent)
    if not isinstance(name, str):
        raise TypeError(f"Class name must be a string, got {type(name).__name__}")

    members = dict(members or {})
    if "super" in members:
        raise TypeError("'super' is reserved for the parent class")
    if "constructor" in members and members["constructor"] is None:
        del members["constructor"]

    table = classstruct.merge_operators(parent._operators, operators)
    cls = Class(name, parent, table, members)
    logger.debug("Created class %s extending %s", name, parent._tag)
    return cls


def construct(cls, *args, **kwargs):
    """Build a new instance by calling `cls` with the given arguments.

    The constructor found on `cls` or its nearest ancestor is called as
    `constructor(cls, *args, **kwargs)`. It returns a mapping of fields, or
    a `(fields, parent)` tuple where `parent` is an already built instance
    to use as the ancestry link.

    When no parent instance is returned and the parent class is not the
    root, the parent class is called with the same arguments to build one.

    Args:
        cls: (Class) Class to instantiate

    Returns:
        Instance: The new instance

    Raises:
        MissingConstructor: If no class in the ancestry has a constructor
        InvalidConstructorReturn: If the constructor result has the wrong shape
    """
    if not isinstance(cls, Class):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    constructor = classstruct.lookup_class_member(cls, "constructor")
    if constructor is None:
        raise classstruct.MissingConstructor(cls)

    fields, parent = _unpack_result(cls, constructor(cls, *args, **kwargs))

    if parent is None and cls._parent._parent is not None:
        logger.debug("Building implicit %s parent for %s", cls._parent._tag, cls._tag)
        parent = cls._parent(*args, **kwargs)

    return classstruct.create_instance(cls, parent, fields)


def _unpack_result(cls, result):
    if isinstance(result, tuple):
        if len(result) == 2:
            fields, parent = result
        elif len(result) == 1:
            fields, parent = result[0], None
        else:
            raise classstruct.InvalidConstructorReturn(
                cls, result,
                f"The constructor for class '{cls._tag}' must return fields or (fields, parent), got {len(result)} values",
            )
    else:
        fields, parent = result, None

    if not isinstance(fields, collections.abc.Mapping):
        raise classstruct.InvalidConstructorReturn(
            cls, fields,
            f"The constructor for class '{cls._tag}' must return a mapping of fields. Actual type: '{type(fields).__name__}'",
        )
    if parent is not None and not isinstance(parent, classstruct.Instance):
        raise classstruct.InvalidConstructorReturn(
            cls, parent,
            f"The constructor for class '{cls._tag}' must return an instance or None as its parent. Actual type: '{type(parent).__name__}'",
        )
    return fields, parent
