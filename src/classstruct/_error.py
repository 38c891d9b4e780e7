"""Error classes"""

__all__ = [
    "ClassStructError",
    "InvalidExtendTarget",
    "MissingConstructor",
    "InvalidConstructorReturn",
]


class ClassStructError(Exception):
    """Base for structural errors raised by the object model."""


class InvalidExtendTarget(ClassStructError):
    """Extend was called on something that is not a class.

    Args:
        target: The object extend was invoked on

    Attributes:
        target: The object extend was invoked on
    """

    def __init__(self, target):
        self.target = target
        super().__init__(f"Cannot extend {target!r}, only classes can be extended")


class MissingConstructor(ClassStructError):
    """No constructor is defined anywhere in a class's ancestry.

    Args:
        cls: (Class) The class that was called

    Attributes:
        cls: (Class) The class that was called
    """

    def __init__(self, cls):
        self.cls = cls
        super().__init__(f"No constructor defined for class '{cls._tag}'")


class InvalidConstructorReturn(ClassStructError):
    """A constructor returned a value of the wrong shape.

    Args:
        cls: (Class) The class whose constructor misbehaved
        value: The offending value
        message: (str) Error description

    Attributes:
        cls: (Class) The class whose constructor misbehaved
        value: The offending value
    """

    def __init__(self, cls, value, message):
        self.cls = cls
        self.value = value
        super().__init__(message)
