"""The root class and its globally inherited members"""

import types

import classstruct

__all__ = ["Object", "ROOT_TAG", "ROOT_MEMBERS"]


ROOT_TAG = "Object"


def _type(self):
    """Type name of the class, or of the class an instance was built from."""
    return self._tag


def _is_class(self):
    return self._kind is classstruct.Kind.CLASS


def _is_instance(self):
    return self._kind is classstruct.Kind.INSTANCE


def _instance_of(self, target):
    """Check whether `target`'s type name appears in this ancestry chain.

    The chain is the object itself followed by its parents: parent classes
    for a class, parent instances for an instance. Type names are compared
    by value, so two unrelated classes with the same name match each other.

    Args:
        target: (Class | Instance) Class (or instance of the class) to test

    Returns:
        (bool) True at the first matching link
    """
    if not isinstance(target, classstruct.Entity):
        raise TypeError(f"instance_of expects a class or instance, got {type(target).__name__}")
    link = self
    while link is not None:
        if link._tag == target._tag:
            return True
        link = link._parent
    return False


def _extend(self, name, operators=None, members=None):
    """Create a subclass of this class.

    Raises:
        InvalidExtendTarget: If called on an instance
    """
    if self._kind is not classstruct.Kind.CLASS:
        raise classstruct.InvalidExtendTarget(self)
    return classstruct.create_class(self, name, operators, members)


ROOT_MEMBERS = types.MappingProxyType({
    "type": _type,
    "is_class": _is_class,
    "is_instance": _is_instance,
    "instance_of": _instance_of,
    "extend": _extend,
})


Object = classstruct.Class(ROOT_TAG, None, classstruct.DEFAULT_OPERATORS, ROOT_MEMBERS)
