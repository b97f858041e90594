from enum import Enum
from typing import Iterable

numeric = int | float


class TernaryLogicValue(Enum):
    TRUE = "true"
    FALSE = "false"
    UNCOMPARABLE = "uncomparable"

    @classmethod
    def of(cls, value: bool) -> "TernaryLogicValue":
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def conjunction(cls, values: Iterable["TernaryLogicValue"]) -> "TernaryLogicValue":
        """AND-fold of ternary values.

        Returns ``FALSE`` as soon as any value is ``FALSE``, ``TRUE`` if all values
        are ``TRUE`` (also for no values at all), ``UNCOMPARABLE`` otherwise.
        """
        result = cls.TRUE
        for value in values:
            if value is cls.FALSE:
                return cls.FALSE
            if value is cls.UNCOMPARABLE:
                result = cls.UNCOMPARABLE

        return result


class PreferenceType(Enum):
    GAIN = "gain"
    COST = "cost"
    NONE = "none"


class ConeType(Enum):
    POSITIVE_D = "positive_d"
    NEGATIVE_D = "negative_d"
    POSITIVE_INV_D = "positive_inv_d"
    NEGATIVE_INV_D = "negative_inv_d"


class DomainMismatchError(TypeError):
    """Raised when enumeration values backed by different element lists are compared."""
