import pandas as pd
import pytest

from drsa_dominance.criterion import Criterion, DecisionCriterion
from drsa_dominance.fields import UnknownSimpleFieldMV2, UnknownSimpleFieldMV15
from drsa_dominance.information_table import InformationTable
from drsa_dominance.types import PreferenceType


def make_table(rows: list[list], criteria: list) -> InformationTable:
    return InformationTable(pd.DataFrame(rows, columns=criteria, dtype=object))


@pytest.fixture
def gain_cost_table() -> InformationTable:
    """Fully known evaluations, criterion 0 of gain type and criterion 1 of cost type."""
    criteria = [
        Criterion("g1"),
        Criterion("g2", preference_type=PreferenceType.COST),
        DecisionCriterion("class"),
    ]
    return make_table(
        [
            [2, 5, 1],
            [3, 4, 2],
            [3, 6, 1],
            [1, 4, 1],
            [1, 6, 2],
        ],
        criteria,
    )


@pytest.fixture
def missing_values_table() -> InformationTable:
    """Two gain criteria; object 7 misses criterion 0 (MV2), object 8 misses criterion 1 (MV1.5)."""
    criteria = [
        Criterion("g1", missing_value_type=UnknownSimpleFieldMV2()),
        Criterion("g2", missing_value_type=UnknownSimpleFieldMV15()),
        DecisionCriterion("class"),
    ]
    return make_table(
        [
            [2, 2, 2],
            [3, 2, 3],
            [2, 3, 3],
            [1, 2, 1],
            [2, 1, 1],
            [1, 1, 1],
            [1, 3, 2],
            [None, 3, 2],
            [4, None, 3],
        ],
        criteria,
    )


@pytest.fixture
def mixed_table() -> InformationTable:
    """Integer gain, real cost and nominal criteria; object 4 misses criterion 0 (MV1.5).

    The decision attribute is the fourth column, decisions are 0, 1, 2, 3, 4.
    """
    criteria = [
        Criterion("g1", missing_value_type=UnknownSimpleFieldMV15(), value_type=int),
        Criterion("g2", preference_type=PreferenceType.COST),
        Criterion("g3", preference_type=PreferenceType.NONE),
        DecisionCriterion("class"),
    ]
    return make_table(
        [
            [2, 1.0, 3, 0],
            [1, 2.0, 3, 1],
            [3, 0.0, 3, 2],
            [3, 0.0, 0, 3],
            [None, 2.0, 3, 4],
        ],
        criteria,
    )


@pytest.fixture
def table_factory():
    return make_table
