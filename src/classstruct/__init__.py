"""
ClassStruct Object Model

A dynamic object model where classes are first-class values that can be
extended, called to build instances, and given per-class text operators.
"""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from ._error import *
from ._entity import *
from ._operators import *
from ._resolve import *
from ._class import *
from ._instance import *
from ._root import *
