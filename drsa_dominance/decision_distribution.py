from collections import Counter
from typing import Iterable, Sequence

from .decision import Decision
from .utils import not_none


class DecisionDistribution:
    def __init__(self, decisions: Iterable[Decision] = ()) -> None:
        """Tally of decisions: how many objects carry each decision.

        Two distributions are equal when they map the same decisions to the same
        counts, no matter in which order the decisions were counted.
        """
        self._decision_to_count: Counter = Counter()
        for decision in decisions:
            self.increase_count(decision)

    @classmethod
    def from_table(cls, table) -> "DecisionDistribution":
        """Distribution of decisions of all objects in `table`."""
        not_none(table, "Information table for calculation of distribution of decisions is None.")
        return cls(table.get_decision(i) for i in range(table.get_number_of_objects()))

    def increase_count(self, decision: Decision) -> None:
        self._decision_to_count[not_none(decision, "Could not increase count of a None decision.")] += 1

    def get_count(self, decision: Decision) -> int:
        return self._decision_to_count.get(decision, 0)

    def is_present(self, decision: Decision) -> bool:
        return decision in self._decision_to_count

    @property
    def decisions(self) -> set[Decision]:
        return set(self._decision_to_count)

    def get_different_decisions_count(self) -> int:
        return len(self._decision_to_count)

    @property
    def total(self) -> int:
        return sum(self._decision_to_count.values())

    def get_mode(self) -> list[Decision] | None:
        """Return all most frequent decisions, ``None`` for an empty distribution."""
        if not self._decision_to_count:
            return None

        max_count = max(self._decision_to_count.values())
        return [decision for decision, count in self._decision_to_count.items() if count == max_count]

    def get_median(self, ordered_decisions: Sequence[Decision]) -> Decision | None:
        """Median decision, given all decisions of this distribution ordered from the worst.

        :param ordered_decisions: unique, fully determined decisions present in this distribution,
        in preference order

        :return: the first decision whose cumulative count reaches half of the total count
        """
        not_none(ordered_decisions, "Ordered decisions are None.")
        if len(ordered_decisions) != self.get_different_decisions_count():
            raise ValueError(
                "Number of ordered decisions is different than number of different decisions in the distribution."
            )

        # half of the total, rounded half up
        half = (self.total + 1) // 2
        cumulative_sum = 0
        for decision in ordered_decisions:
            cumulative_sum += self.get_count(decision)
            if cumulative_sum >= half:
                return decision
        return None

    def items(self):
        return self._decision_to_count.items()

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, DecisionDistribution):
            return NotImplemented
        return dict(self.items()) == dict(__value.items())

    def __hash__(self) -> int:
        return hash(frozenset(self.items()))

    def __repr__(self) -> str:
        return dict(self.items()).__repr__()
