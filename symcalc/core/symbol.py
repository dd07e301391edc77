"""Symbol kinds.

The kind of a symbol decides whether it commutes under multiplication. Only
scalars do; matrices, operators and quaternions keep their written order.
"""

from enum import Enum


class SymbolType(str, Enum):
    """Kind of object a symbol stands for."""

    SCALAR = "scalar"
    MATRIX = "matrix"
    OPERATOR = "operator"
    QUATERNION = "quaternion"

    @property
    def is_commutative(self) -> bool:
        return self is SymbolType.SCALAR
