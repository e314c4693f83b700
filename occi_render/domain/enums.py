"""Domain enums for the OCCI renderer."""
from enum import Enum


class CategoryVariant(Enum):
    """Category variants, fixed when a category is constructed."""
    PLAIN = "category"
    KIND = "kind"
    MIXIN = "mixin"
