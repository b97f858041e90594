import pytest

from drsa_dominance.criterion import Criterion, DecisionCriterion
from drsa_dominance.dominance import cone_calculator, dominates, is_dominated_by
from drsa_dominance.fields import UnknownSimpleFieldMV2, UnknownSimpleFieldMV15
from drsa_dominance.types import ConeType, PreferenceType


@pytest.fixture
def checker_table(table_factory):
    criteria = [
        Criterion("g1"),
        Criterion("g2", preference_type=PreferenceType.COST),
        Criterion("g3", preference_type=PreferenceType.NONE),
        DecisionCriterion("class"),
    ]
    return table_factory(
        [
            [3, 1.5, 2.0, 1],
            [2, 1.5, 2.0, 1],
            [3, 2.5, 2.0, 1],
            [3, 1.5, 1.0, 1],
            [4, 0.5, 2.0, 1],
        ],
        criteria,
    )


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (0, 1, True),
        (1, 0, False),
        (0, 2, True),
        (2, 0, False),
        (0, 3, False),
        (3, 0, False),
        (4, 0, True),
        (4, 3, False),
    ],
)
def test_dominates(checker_table, x, y, expected):
    assert dominates(x, y, checker_table) is expected
    assert is_dominated_by(y, x, checker_table) is expected


def test_dominance_with_gain_and_cost(gain_cost_table):
    assert dominates(1, 0, gain_cost_table)
    assert not dominates(0, 1, gain_cost_table)
    assert is_dominated_by(0, 1, gain_cost_table)
    assert dominates(0, 4, gain_cost_table)


def test_dominance_is_reflexive(checker_table, gain_cost_table):
    for table in (checker_table, gain_cost_table):
        for x in range(table.get_number_of_objects()):
            assert dominates(x, x, table)


def test_dominance_ignores_inactive_criteria(table_factory):
    criteria = [Criterion("g1"), Criterion("g2", active=False), DecisionCriterion("class")]
    table = table_factory([[2, 1, 1], [1, 5, 1]], criteria)

    assert dominates(0, 1, table)


def test_dominance_of_incompatible_fields(table_factory):
    table = table_factory([[1, 1], [1.5, 2]], [Criterion("g1"), DecisionCriterion("class")])

    with pytest.raises(TypeError):
        dominates(0, 1, table)
    with pytest.raises(TypeError):
        cone_calculator.calculate_positive_d_cone(0, table)


@pytest.mark.parametrize("x, y", [(0, 5), (5, 0), (-1, 0)])
def test_dominance_index_out_of_range(checker_table, x, y):
    with pytest.raises(IndexError):
        dominates(x, y, checker_table)


def test_dominance_with_none_table():
    with pytest.raises(ValueError):
        dominates(0, 0, None)
    with pytest.raises(ValueError):
        cone_calculator.calculate_negative_d_cone(0, None)


def test_cones_of_fully_known_table(gain_cost_table):
    assert cone_calculator.calculate_positive_d_cone(0, gain_cost_table) == [0, 1]
    assert cone_calculator.calculate_negative_d_cone(0, gain_cost_table) == [0, 4]
    assert cone_calculator.calculate_positive_inv_d_cone(0, gain_cost_table) == [0, 1]
    assert cone_calculator.calculate_negative_inv_d_cone(0, gain_cost_table) == [0, 4]
    assert cone_calculator.calculate_positive_d_cone(3, gain_cost_table) == [1, 3]
    assert cone_calculator.calculate_negative_d_cone(1, gain_cost_table) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize(
    "x, cone_type, expected",
    [
        (0, ConeType.POSITIVE_D, [0, 1, 2, 7, 8]),
        (0, ConeType.POSITIVE_INV_D, [0, 1, 2, 7]),
        (0, ConeType.NEGATIVE_D, [0, 3, 4, 5]),
        (0, ConeType.NEGATIVE_INV_D, [0, 3, 4, 5]),
        (7, ConeType.POSITIVE_D, [2, 6, 7, 8]),
        (7, ConeType.POSITIVE_INV_D, [2, 6, 7]),
        (8, ConeType.POSITIVE_D, [8]),
        (8, ConeType.POSITIVE_INV_D, [7, 8]),
    ],
)
def test_cones_with_missing_values(missing_values_table, x, cone_type, expected):
    assert cone_calculator.calculate_cone(x, missing_values_table, cone_type) == expected


@pytest.mark.parametrize(
    "x, positive_d, negative_d, positive_inv_d, negative_inv_d",
    [
        (0, [0, 2], [0, 1], [0, 2], [0, 1, 4]),
        (1, [0, 1, 2, 4], [1], [0, 1, 2], [1, 4]),
        (2, [2], [0, 1, 2], [2], [0, 1, 2, 4]),
        (3, [3], [3], [3], [3]),
        (4, [4], [1, 4], [0, 1, 2, 4], [4]),
    ],
)
def test_cones_of_mixed_table(mixed_table, x, positive_d, negative_d, positive_inv_d, negative_inv_d):
    assert cone_calculator.calculate_positive_d_cone(x, mixed_table) == positive_d
    assert cone_calculator.calculate_negative_d_cone(x, mixed_table) == negative_d
    assert cone_calculator.calculate_positive_inv_d_cone(x, mixed_table) == positive_inv_d
    assert cone_calculator.calculate_negative_inv_d_cone(x, mixed_table) == negative_inv_d


@pytest.mark.parametrize("table_name", ["gain_cost_table", "missing_values_table", "mixed_table"])
def test_cones_contain_origin_and_are_dual(request, table_name):
    table = request.getfixturevalue(table_name)
    n = table.get_number_of_objects()

    for x in range(n):
        positive_d = cone_calculator.calculate_positive_d_cone(x, table)
        positive_inv_d = cone_calculator.calculate_positive_inv_d_cone(x, table)
        assert x in positive_d
        assert x in positive_inv_d
        assert x in cone_calculator.calculate_negative_d_cone(x, table)
        assert x in cone_calculator.calculate_negative_inv_d_cone(x, table)

        for y in range(n):
            assert (y in positive_d) == (x in cone_calculator.calculate_negative_d_cone(y, table))
            assert (y in positive_inv_d) == (x in cone_calculator.calculate_negative_inv_d_cone(y, table))


def test_cones_include_uncomparable_objects(table_factory):
    # a pair compared with a missing value is uncomparable
    table = table_factory([[(1, 5), 1], [None, 2], [(0, 9), 1]], [Criterion("g1"), DecisionCriterion("class")])

    assert cone_calculator.calculate_positive_d_cone(0, table) == [0, 1]
    assert cone_calculator.calculate_positive_inv_d_cone(0, table) == [0, 1]
    assert cone_calculator.calculate_negative_d_cone(0, table) == [0, 1, 2]
    assert cone_calculator.calculate_negative_inv_d_cone(0, table) == [0, 1, 2]
    assert not dominates(0, 1, table)
    assert not dominates(1, 0, table)


def test_cones_are_deterministic(missing_values_table):
    for cone_type in ConeType:
        first = [cone_calculator.calculate_cone(x, missing_values_table, cone_type) for x in range(9)]
        second = [cone_calculator.calculate_cone(x, missing_values_table, cone_type) for x in range(9)]
        assert first == second


def test_calculate_cone_with_unknown_type(gain_cost_table):
    with pytest.raises(ValueError):
        cone_calculator.calculate_cone(0, gain_cost_table, "positive")


def test_cone_index_out_of_range(gain_cost_table):
    with pytest.raises(IndexError):
        cone_calculator.calculate_positive_inv_d_cone(5, gain_cost_table)
    with pytest.raises(TypeError):
        cone_calculator.calculate_positive_inv_d_cone(1.0, gain_cost_table)


def test_dominance_cones_equal(gain_cost_table, missing_values_table, mixed_table, table_factory):
    assert cone_calculator.positive_dominance_cones_equal(gain_cost_table)
    assert cone_calculator.negative_dominance_cones_equal(gain_cost_table)
    assert not cone_calculator.positive_dominance_cones_equal(missing_values_table)
    assert not cone_calculator.negative_dominance_cones_equal(mixed_table)

    criteria = [
        Criterion("g1", missing_value_type=UnknownSimpleFieldMV2()),
        Criterion("g2", missing_value_type=UnknownSimpleFieldMV15()),
        DecisionCriterion("class"),
    ]
    # MV1.5 declared but never used
    table = table_factory([[None, 1, 1], [2, 3, 2]], criteria)
    assert cone_calculator.positive_dominance_cones_equal(table)
