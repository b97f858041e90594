"""Dominance relation between objects of an information table.

For an origin object ``x`` four dominance cones are defined:

* positive cone ``D+(x)``: objects ``y`` that are at least as good as ``x``,
* negative cone ``D-(x)``: objects ``y`` such that ``x`` is at least as good as ``y``,
* positive inverse cone ``InvD+(x)``: objects ``y`` such that ``x`` is at most as good as ``y``,
* negative inverse cone ``InvD-(x)``: objects ``y`` that are at most as good as ``x``.

Plain and inverse cones ask the same question with the roles of the compared
evaluations swapped. They differ only for missing values whose type is not
symmetric (MV1.5), see `drsa_dominance.fields`.
"""
import logging
from typing import Protocol, Sequence

from .decision import Decision
from .fields import Field, PairField, UnknownSimpleField
from .types import ConeType, TernaryLogicValue
from .utils import check_object_index, not_none

logger = logging.getLogger(__name__)


class Table(Protocol):
    def get_number_of_objects(self) -> int: ...

    def get_active_condition_fields(self, object_index: int) -> Sequence[Field]: ...

    def get_decision(self, object_index: int) -> Decision: ...


def _fields(object_index: int, table: Table) -> Sequence[Field]:
    check_object_index(object_index, table.get_number_of_objects())
    return table.get_active_condition_fields(object_index)


def dominates(x: int, y: int, table: Table) -> bool:
    """Check if object `x` dominates object `y` on all active condition criteria.

    Meant for fully known evaluations: any comparison other than ``TRUE``
    (including ``UNCOMPARABLE``) means there is no dominance.
    """
    not_none(table, "Information table is None.")
    x_fields, y_fields = _fields(x, table), _fields(y, table)

    for x_field, y_field in zip(x_fields, y_fields, strict=True):
        if x_field.is_at_least_as_good_as(y_field) is not TernaryLogicValue.TRUE:
            return False

    return True


def is_dominated_by(x: int, y: int, table: Table) -> bool:
    """Check if object `x` is dominated by object `y`."""
    return dominates(y, x, table)


def _has_asymmetric_missing_value(field: Field) -> bool:
    if isinstance(field, PairField):
        return _has_asymmetric_missing_value(field.first) or _has_asymmetric_missing_value(field.second)
    return isinstance(field, UnknownSimpleField) and not (
        field.equal_when_compared_to_any_evaluation() and field.equal_when_reverse_compared_to_any_evaluation()
    )


class DominanceConeCalculator:
    """Stateless calculator of dominance cones; use the `cone_calculator` instance."""

    def _relation(
        self,
        asked: Sequence[Field],
        other: Sequence[Field],
        relation: str,
    ) -> TernaryLogicValue:
        return TernaryLogicValue.conjunction(
            getattr(asked_field, relation)(other_field) for asked_field, other_field in zip(asked, other, strict=True)
        )

    def _calculate_cone(
        self,
        x: int,
        table: Table,
        origin_is_asked: bool,
        relation: str,
    ) -> list[int]:
        not_none(table, "Information table is None.")
        number_of_objects = table.get_number_of_objects()
        x = check_object_index(x, number_of_objects)
        x_fields = table.get_active_condition_fields(x)

        cone = []
        for y in range(number_of_objects):
            if y == x:
                cone.append(y)
                continue

            y_fields = table.get_active_condition_fields(y)
            if origin_is_asked:
                result = self._relation(x_fields, y_fields, relation)
            else:
                result = self._relation(y_fields, x_fields, relation)

            if result is not TernaryLogicValue.FALSE:
                cone.append(y)

        return cone

    def calculate_positive_d_cone(self, x: int, table: Table) -> list[int]:
        """Objects `y` such that `y` is at least as good as `x` (asked to `y`)."""
        return self._calculate_cone(x, table, False, "is_at_least_as_good_as")

    def calculate_negative_d_cone(self, x: int, table: Table) -> list[int]:
        """Objects `y` such that `x` is at least as good as `y` (asked to `x`)."""
        return self._calculate_cone(x, table, True, "is_at_least_as_good_as")

    def calculate_positive_inv_d_cone(self, x: int, table: Table) -> list[int]:
        """Objects `y` such that `x` is at most as good as `y` (asked to `x`)."""
        return self._calculate_cone(x, table, True, "is_at_most_as_good_as")

    def calculate_negative_inv_d_cone(self, x: int, table: Table) -> list[int]:
        """Objects `y` such that `y` is at most as good as `x` (asked to `y`)."""
        return self._calculate_cone(x, table, False, "is_at_most_as_good_as")

    def calculate_cone(self, x: int, table: Table, cone_type: ConeType) -> list[int]:
        calculators = {
            ConeType.POSITIVE_D: self.calculate_positive_d_cone,
            ConeType.NEGATIVE_D: self.calculate_negative_d_cone,
            ConeType.POSITIVE_INV_D: self.calculate_positive_inv_d_cone,
            ConeType.NEGATIVE_INV_D: self.calculate_negative_inv_d_cone,
        }
        try:
            calculator = calculators[cone_type]
        except KeyError:
            raise ValueError(f"Cone type {cone_type!r} is not supported.") from None

        return calculator(x, table)

    def positive_dominance_cones_equal(self, table: Table) -> bool:
        """Tell if positive inverse cones are the same as positive cones for every object.

        It is the case unless some object misses a value and the type of that missing
        value is not symmetric (like MV1.5).
        """
        not_none(table, "Information table is None.")
        for object_index in range(table.get_number_of_objects()):
            for field in table.get_active_condition_fields(object_index):
                if _has_asymmetric_missing_value(field):
                    logger.debug("Object %d has an asymmetric missing value, cones differ", object_index)
                    return False

        return True

    def negative_dominance_cones_equal(self, table: Table) -> bool:
        """Same check as `positive_dominance_cones_equal`, the principle is symmetric."""
        return self.positive_dominance_cones_equal(table)


cone_calculator = DominanceConeCalculator()
