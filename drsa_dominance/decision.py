from abc import ABC, abstractmethod
from typing import Sequence

from .fields import Field
from .types import TernaryLogicValue
from .utils import not_none


class Decision(ABC):
    """Evaluation(s) of an object on decision criteria.

    Decisions are compared structurally (evaluation, its preference type and the
    index of the decision attribute) so they can be used as dictionary keys.
    """

    @abstractmethod
    def get_evaluation(self, attribute_index: int) -> Field | None: ...

    @property
    @abstractmethod
    def attribute_indices(self) -> tuple[int, ...]: ...

    @abstractmethod
    def _evaluations(self) -> dict[int, Field]: ...

    def _is_in_relation_with(self, other: "Decision", relation: str) -> TernaryLogicValue:
        not_none(other, "Cannot compare a decision with None.")
        if type(other) is not type(self):
            return TernaryLogicValue.UNCOMPARABLE

        own, others = self._evaluations(), other._evaluations()
        if own.keys() != others.keys():
            return TernaryLogicValue.UNCOMPARABLE

        for attribute_index, evaluation in own.items():
            if getattr(evaluation, relation)(others[attribute_index]) is not TernaryLogicValue.TRUE:
                return TernaryLogicValue.FALSE
        return TernaryLogicValue.TRUE

    def is_at_least_as_good_as(self, other: "Decision") -> TernaryLogicValue:
        return self._is_in_relation_with(other, "is_at_least_as_good_as")

    def is_at_most_as_good_as(self, other: "Decision") -> TernaryLogicValue:
        return self._is_in_relation_with(other, "is_at_most_as_good_as")

    def is_equal_to(self, other: "Decision") -> TernaryLogicValue:
        return self._is_in_relation_with(other, "is_equal_to")

    def has_no_missing_evaluation(self) -> bool:
        return not any(evaluation.is_unknown for evaluation in self._evaluations().values())

    def has_all_missing_evaluations(self) -> bool:
        return all(evaluation.is_unknown for evaluation in self._evaluations().values())

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, Decision):
            return NotImplemented
        return type(__value) is type(self) and self._evaluations() == __value._evaluations()

    def __hash__(self) -> int:
        return hash((type(self), frozenset(self._evaluations().items())))


class SimpleDecision(Decision):
    def __init__(self, evaluation: Field, attribute_index: int) -> None:
        self.evaluation = not_none(evaluation, "Evaluation of a simple decision is None.")
        self.attribute_index = attribute_index

    def get_evaluation(self, attribute_index: int) -> Field | None:
        return self.evaluation if attribute_index == self.attribute_index else None

    @property
    def attribute_indices(self) -> tuple[int, ...]:
        return (self.attribute_index,)

    def _evaluations(self) -> dict[int, Field]:
        return {self.attribute_index: self.evaluation}

    def __repr__(self) -> str:
        return repr(self.evaluation)


class CompositeDecision(Decision):
    def __init__(self, evaluations: Sequence[Field], attribute_indices: Sequence[int]) -> None:
        """Decision made of evaluations on several decision attributes.

        :param evaluations: evaluations contributing to the decision
        :param attribute_indices: indices of decision attributes, one per evaluation
        """
        not_none(evaluations, "Evaluations of a composite decision are None.")
        not_none(attribute_indices, "Attribute indices of a composite decision are None.")
        if len(evaluations) != len(attribute_indices):
            raise ValueError("Different number of evaluations and attribute indices for a composite decision.")
        if len(evaluations) < 2:
            raise ValueError("Not enough contributing evaluations to construct a composite decision.")
        if len(set(attribute_indices)) != len(attribute_indices):
            raise ValueError("Attribute indices of a composite decision have to be unique.")

        self._attribute_index_to_evaluation = {
            attribute_index: not_none(evaluation, "Evaluation contributing to a composite decision is None.")
            for attribute_index, evaluation in zip(attribute_indices, evaluations)
        }

    def get_evaluation(self, attribute_index: int) -> Field | None:
        return self._attribute_index_to_evaluation.get(attribute_index)

    @property
    def attribute_indices(self) -> tuple[int, ...]:
        return tuple(self._attribute_index_to_evaluation)

    def _evaluations(self) -> dict[int, Field]:
        return self._attribute_index_to_evaluation

    def __repr__(self) -> str:
        return "(" + ",".join(repr(evaluation) for evaluation in self._attribute_index_to_evaluation.values()) + ")"
