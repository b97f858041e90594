"""Evaluations of objects on criteria and their ternary comparisons.

Each evaluation answers for itself whether it is at least (at most) as good as
another one, given the preference type of its criterion. A known value compared
with a missing one hands the question over to the missing value, through its
``reverse_*`` methods, so that every missing value type decides on its own how it
relates to known values:

* MV1.5 (``UnknownSimpleFieldMV15``) is as good as anything when asked directly,
  but a known value asked about it never gets a positive answer;
* MV2 (``UnknownSimpleFieldMV2``) is as good as anything in both directions.
"""
import operator
from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np
import pandas as pd

from .types import DomainMismatchError, PreferenceType, TernaryLogicValue, numeric
from .utils import not_none


class Field(ABC):
    @abstractmethod
    def is_at_least_as_good_as(self, other: "Field") -> TernaryLogicValue: ...

    @abstractmethod
    def is_at_most_as_good_as(self, other: "Field") -> TernaryLogicValue: ...

    @abstractmethod
    def is_equal_to(self, other: "Field") -> TernaryLogicValue: ...

    @property
    def is_unknown(self) -> bool:
        return False


class SimpleField(Field):
    """Single evaluation on one criterion, known or missing."""


class KnownSimpleField(SimpleField):
    def __init__(self, value: Any, preference_type: PreferenceType = PreferenceType.GAIN) -> None:
        if not isinstance(preference_type, PreferenceType):
            raise TypeError(f"Preference type has to be a PreferenceType, got {preference_type!r}.")
        self.value = value
        self.preference_type = preference_type

    def _check_comparable(self, other: Field) -> None:
        if type(other) is not type(self):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}.")
        if other.preference_type is not self.preference_type:
            raise TypeError(
                f"Cannot compare {self.preference_type.value} field with {other.preference_type.value} field."
            )

    def _relation(self, other: Field, at_least: bool) -> TernaryLogicValue:
        if isinstance(not_none(other, "Field to compare with is None."), UnknownSimpleField):
            if at_least:
                return other.reverse_is_at_least_as_good_as(self)
            return other.reverse_is_at_most_as_good_as(self)

        self._check_comparable(other)
        if self.preference_type is PreferenceType.NONE:
            return TernaryLogicValue.of(self.value == other.value)

        # "at least as good" means ">=" for gain and "<=" for cost
        if at_least == (self.preference_type is PreferenceType.GAIN):
            return TernaryLogicValue.of(self.value >= other.value)
        return TernaryLogicValue.of(self.value <= other.value)

    def is_at_least_as_good_as(self, other: Field) -> TernaryLogicValue:
        return self._relation(other, at_least=True)

    def is_at_most_as_good_as(self, other: Field) -> TernaryLogicValue:
        return self._relation(other, at_least=False)

    def is_equal_to(self, other: Field) -> TernaryLogicValue:
        if isinstance(not_none(other, "Field to compare with is None."), UnknownSimpleField):
            return other.reverse_is_equal_to(self)

        self._check_comparable(other)
        return TernaryLogicValue.of(self.value == other.value)

    def __eq__(self, __value: object) -> bool:
        if type(__value) is not type(self):
            return NotImplemented
        return self.value == __value.value and self.preference_type is __value.preference_type

    def __hash__(self) -> int:
        return hash((type(self), self.value, self.preference_type))

    def __repr__(self) -> str:
        return str(self.value)


class IntegerField(KnownSimpleField):
    def __init__(self, value: int, preference_type: PreferenceType = PreferenceType.GAIN) -> None:
        super().__init__(operator.index(value), preference_type)


class RealField(KnownSimpleField):
    def __init__(self, value: numeric, preference_type: PreferenceType = PreferenceType.GAIN) -> None:
        value = float(value)
        if np.isnan(value):
            raise ValueError("Real field cannot hold NaN, use a missing value instead.")
        super().__init__(value, preference_type)


class ElementList:
    def __init__(self, elements: Sequence[str]) -> None:
        """Ordered domain of an enumeration criterion.

        The position of an element is its rank: for gain-type criteria later
        elements are better.
        """
        if elements is None:
            raise ValueError("Elements of an element list cannot be None.")
        self.elements = tuple(elements)
        if not self.elements:
            raise ValueError("Element list cannot be empty.")
        if not all(isinstance(element, str) for element in self.elements):
            raise TypeError("Elements of an element list have to be strings.")

        self._indices = {element: index for index, element in enumerate(self.elements)}
        if len(self._indices) != len(self.elements):
            raise ValueError(f"Element list {self.elements} contains duplicates.")

    @property
    def size(self) -> int:
        return len(self.elements)

    def index(self, element: str) -> int:
        try:
            return self._indices[element]
        except KeyError:
            raise ValueError(f"Element {element!r} does not belong to {self}.") from None

    def element(self, index: int) -> str:
        return self.elements[index]

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, ElementList):
            return NotImplemented
        return self is __value or self.elements == __value.elements

    def __hash__(self) -> int:
        return hash(self.elements)

    def __repr__(self) -> str:
        return f"({','.join(self.elements)})"


class EnumerationField(KnownSimpleField):
    def __init__(
        self,
        element_list: ElementList,
        value: str | int,
        preference_type: PreferenceType = PreferenceType.GAIN,
    ) -> None:
        """Enumeration value, stored as the index of the element in `element_list`."""
        self.element_list = not_none(element_list, "Element list of an enumeration field is None.")
        if isinstance(value, str):
            index = element_list.index(value)
        else:
            index = operator.index(value)
            if not 0 <= index < element_list.size:
                raise ValueError(f"Index {index} is out of range of {element_list}.")
        super().__init__(index, preference_type)

    @property
    def element(self) -> str:
        return self.element_list.element(self.value)

    def _check_comparable(self, other: Field) -> None:
        super()._check_comparable(other)
        if other.element_list != self.element_list:
            raise DomainMismatchError(
                f"Cannot compare enumeration values from {self.element_list} and {other.element_list}."
            )

    def __eq__(self, __value: object) -> bool:
        result = super().__eq__(__value)
        if result is NotImplemented or not result:
            return result
        return self.element_list == __value.element_list

    def __hash__(self) -> int:
        return hash((type(self), self.value, self.preference_type, self.element_list))

    def __repr__(self) -> str:
        return self.element


class UnknownSimpleField(SimpleField):
    """Missing evaluation. Subclasses define how it resolves comparisons."""

    @property
    def is_unknown(self) -> bool:
        return True

    def _forward(self, other: Field) -> TernaryLogicValue:
        not_none(other, "Field to compare with is None.")
        return TernaryLogicValue.TRUE if isinstance(other, SimpleField) else TernaryLogicValue.UNCOMPARABLE

    def is_at_least_as_good_as(self, other: Field) -> TernaryLogicValue:
        return self._forward(other)

    def is_at_most_as_good_as(self, other: Field) -> TernaryLogicValue:
        return self._forward(other)

    def is_equal_to(self, other: Field) -> TernaryLogicValue:
        return self._forward(other)

    @abstractmethod
    def reverse_is_at_least_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        """Answer whether `other` is at least as good as this missing value."""

    @abstractmethod
    def reverse_is_at_most_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        """Answer whether `other` is at most as good as this missing value."""

    @abstractmethod
    def reverse_is_equal_to(self, other: KnownSimpleField) -> TernaryLogicValue:
        """Answer whether `other` is equal to this missing value."""

    @abstractmethod
    def equal_when_compared_to_any_evaluation(self) -> bool: ...

    @abstractmethod
    def equal_when_reverse_compared_to_any_evaluation(self) -> bool: ...

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, Field):
            return NotImplemented
        return type(__value) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return "?"


class UnknownSimpleFieldMV15(UnknownSimpleField):
    def _reverse(self, other: KnownSimpleField) -> TernaryLogicValue:
        not_none(other, "Field to compare with is None.")
        return TernaryLogicValue.FALSE

    def reverse_is_at_least_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._reverse(other)

    def reverse_is_at_most_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._reverse(other)

    def reverse_is_equal_to(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._reverse(other)

    def equal_when_compared_to_any_evaluation(self) -> bool:
        return True

    def equal_when_reverse_compared_to_any_evaluation(self) -> bool:
        return False


class UnknownSimpleFieldMV2(UnknownSimpleField):
    def reverse_is_at_least_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._forward(other)

    def reverse_is_at_most_as_good_as(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._forward(other)

    def reverse_is_equal_to(self, other: KnownSimpleField) -> TernaryLogicValue:
        return self._forward(other)

    def equal_when_compared_to_any_evaluation(self) -> bool:
        return True

    def equal_when_reverse_compared_to_any_evaluation(self) -> bool:
        return True


class PairField(Field):
    def __init__(self, first: SimpleField, second: SimpleField) -> None:
        """Pair of evaluations, e.g. an interval. The first value is compared as is,
        the second one with reversed preference, so ``(3, 5)`` is at least as good as
        ``(2, 6)`` on a gain-type criterion.
        """
        not_none(first, "First value of a pair is None.")
        not_none(second, "Second value of a pair is None.")
        for value in (first, second):
            if not isinstance(value, SimpleField):
                raise TypeError(f"Values of a pair have to be simple fields, got {type(value).__name__}.")

        both_known = isinstance(first, KnownSimpleField) and isinstance(second, KnownSimpleField)
        if both_known and type(first) is not type(second):
            raise TypeError("Types of fields in a pair have to be the same.")

        self.first = first
        self.second = second

    @property
    def is_unknown(self) -> bool:
        return self.first.is_unknown and self.second.is_unknown

    def _relation(self, other: Field, first_relation: str, second_relation: str) -> TernaryLogicValue:
        if isinstance(not_none(other, "Field to compare with is None."), UnknownSimpleField):
            return TernaryLogicValue.UNCOMPARABLE
        if not isinstance(other, PairField):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}.")

        return TernaryLogicValue.of(
            getattr(self.first, first_relation)(other.first) is TernaryLogicValue.TRUE
            and getattr(self.second, second_relation)(other.second) is TernaryLogicValue.TRUE
        )

    def is_at_least_as_good_as(self, other: Field) -> TernaryLogicValue:
        return self._relation(other, "is_at_least_as_good_as", "is_at_most_as_good_as")

    def is_at_most_as_good_as(self, other: Field) -> TernaryLogicValue:
        return self._relation(other, "is_at_most_as_good_as", "is_at_least_as_good_as")

    def is_equal_to(self, other: Field) -> TernaryLogicValue:
        return self._relation(other, "is_equal_to", "is_equal_to")

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, PairField):
            return NotImplemented
        return self.first == __value.first and self.second == __value.second

    def __hash__(self) -> int:
        return hash((type(self), self.first, self.second))

    def __repr__(self) -> str:
        return f"({self.first!r},{self.second!r})"


def is_missing(value: Any) -> bool:
    """Tell if a raw cell value stands for a missing evaluation (``None``, ``NaN``, ``pd.NA``)."""
    if isinstance(value, (Field, tuple, str)):
        return False
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def make_field(
    value: Any,
    preference_type: PreferenceType = PreferenceType.GAIN,
    missing_value_type: UnknownSimpleField | None = None,
    element_list: ElementList | None = None,
) -> Field:
    """Turn a raw Python / numpy value into an evaluation field.

    :param value: raw value; fields are returned unchanged
    :param preference_type: preference type of the criterion
    :param missing_value_type: returned for missing values, defaults to MV2
    :param element_list: domain of an enumeration criterion; if given, values are
        treated as elements (or indices) of this list

    :return: the evaluation field
    """
    if isinstance(value, Field):
        return value

    if is_missing(value):
        return UnknownSimpleFieldMV2() if missing_value_type is None else missing_value_type

    if isinstance(value, tuple):
        if len(value) != 2:
            raise ValueError(f"Only pairs of values are supported, got {value!r}.")
        return PairField(
            make_field(value[0], preference_type, missing_value_type, element_list),
            make_field(value[1], preference_type, missing_value_type, element_list),
        )

    if element_list is not None:
        return EnumerationField(element_list, value, preference_type)

    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Boolean value {value!r} is not a valid evaluation.")

    if isinstance(value, (int, np.integer)):
        return IntegerField(value, preference_type)

    if isinstance(value, (float, np.floating)):
        return RealField(value, preference_type)

    if isinstance(value, str):
        raise TypeError(f"Value {value!r} needs an element list to become an enumeration field.")

    raise TypeError(f"Unsupported evaluation value {value!r} of type {type(value).__name__}.")
