import logging
from typing import Any, Hashable

import pandas as pd

from .criterion import Criterion, DecisionCriterion
from .decision import CompositeDecision, Decision, SimpleDecision
from .fields import Field
from .utils import check_object_index, not_none

logger = logging.getLogger(__name__)


class InformationTable:
    def __init__(self, df: pd.DataFrame) -> None:
        """Decision table of objects evaluated on condition criteria and decision criteria.

        :param df: a `pandas.DataFrame` with `Criterion` and `DecisionCriterion` columns;
        rows are objects, the index holds object names

        Cells are converted to evaluation fields once, here. The table is a snapshot:
        later changes to `df` are not reflected.
        """
        self.data = not_none(df, "Data frame of an information table is None.")

        self.condition_criteria: list[Criterion] = []
        self.active_condition_criteria: list[Criterion] = []
        self.decision_criteria: list[DecisionCriterion] = []
        for column in self.data.columns:
            if isinstance(column, Criterion):
                self.condition_criteria.append(column)
                if column.active:
                    self.active_condition_criteria.append(column)
            elif isinstance(column, DecisionCriterion):
                self.decision_criteria.append(column)
            else:
                raise ValueError(f"Column {column!r} is neither a condition nor a decision criterion.")

        if not self.decision_criteria:
            raise ValueError("No decision attributes found")

        if not self.condition_criteria:
            raise ValueError("No attributes found")

        self.object_names: list[Hashable] = list(self.data.index.values)
        self._name_to_index = {name: index for index, name in enumerate(self.object_names)}

        columns = list(self.data.columns)
        self._condition_positions = [columns.index(criterion) for criterion in self.active_condition_criteria]
        self._decision_positions = [columns.index(criterion) for criterion in self.decision_criteria]

        self._active_condition_fields: list[tuple[Field, ...]] = []
        self._decisions: list[Decision] = []
        for row in self.data.itertuples(index=False, name=None):
            self._active_condition_fields.append(
                tuple(
                    criterion.create_field(row[position])
                    for criterion, position in zip(self.active_condition_criteria, self._condition_positions)
                )
            )
            self._decisions.append(self._create_decision(row))

        logger.debug(
            "Created information table with %d objects, %d active condition criteria and %d decision criteria",
            len(self._decisions),
            len(self.active_condition_criteria),
            len(self.decision_criteria),
        )

    def _create_decision(self, row: tuple[Any, ...]) -> Decision:
        evaluations = [
            criterion.create_field(row[position])
            for criterion, position in zip(self.decision_criteria, self._decision_positions)
        ]

        if len(evaluations) == 1:
            return SimpleDecision(evaluations[0], self._decision_positions[0])
        return CompositeDecision(evaluations, self._decision_positions)

    def get_number_of_objects(self) -> int:
        return len(self._decisions)

    def __len__(self) -> int:
        return self.get_number_of_objects()

    def get_active_condition_fields(self, object_index: int) -> tuple[Field, ...]:
        """Evaluations of an object on active condition criteria, in column order."""
        return self._active_condition_fields[check_object_index(object_index, self.get_number_of_objects())]

    def get_active_condition_criteria(self) -> list[Criterion]:
        return self.active_condition_criteria

    def get_decision(self, object_index: int) -> Decision:
        return self._decisions[check_object_index(object_index, self.get_number_of_objects())]

    def get_index(self, object_name: Hashable) -> int:
        try:
            return self._name_to_index[object_name]
        except KeyError:
            raise KeyError(f"There is no object named {object_name!r}.") from None

    def __repr__(self) -> str:
        return self.data.__repr__()
