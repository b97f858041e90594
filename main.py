import logging

import pandas as pd

from drsa_dominance.cones import DominanceConesDecisionDistributions
from drsa_dominance.criterion import Criterion, DecisionCriterion
from drsa_dominance.dominance import cone_calculator
from drsa_dominance.fields import ElementList, UnknownSimpleFieldMV15
from drsa_dominance.information_table import InformationTable
from drsa_dominance.types import PreferenceType

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

quality = ElementList(["bad", "medium", "good", "very good"])

criteria = [
    Criterion("g1", element_list=quality),
    Criterion("g2", preference_type=PreferenceType.COST, missing_value_type=UnknownSimpleFieldMV15()),
    DecisionCriterion("class"),
]


table = InformationTable(
    pd.DataFrame(
        [
            ["bad", 4, 1],
            ["medium", 4, 1],
            ["medium", 3, 1],
            ["medium", 3, 2],
            ["very good", None, 4],
            ["medium", 2, 3],
            ["very good", 2, 3],
            ["bad", 1, 2],
            ["good", 1, 4],
        ],
        index=["A", "B", "C", "D", "E", "F", "G", "H", "I"],
        columns=criteria,
        dtype=object,
    )
)

print(table)

for name in table.object_names:
    x = table.get_index(name)
    positive = [table.object_names[y] for y in cone_calculator.calculate_positive_d_cone(x, table)]
    positive_inv = [table.object_names[y] for y in cone_calculator.calculate_positive_inv_d_cone(x, table)]
    print(name, "D+:", positive, "InvD+:", positive_inv)

print("positive cones equal:", cone_calculator.positive_dominance_cones_equal(table))

distributions = DominanceConesDecisionDistributions(table, max_workers=4)

for x, name in enumerate(table.object_names):
    print(
        name,
        distributions.get_positive_inv_d_cone_decision_class_distribution(x),
        distributions.get_negative_d_cone_decision_class_distribution(x),
    )
