import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from .decision_distribution import DecisionDistribution
from .dominance import DominanceConeCalculator, Table, cone_calculator
from .types import ConeType
from .utils import check_object_index, not_none

logger = logging.getLogger(__name__)

# distributions needed to calculate lower approximations of unions of decision classes
NECESSARY_CONE_TYPES = (ConeType.POSITIVE_INV_D, ConeType.NEGATIVE_D)


class DominanceCones:
    def __init__(
        self,
        table: Table,
        cone_types: Iterable[ConeType] = tuple(ConeType),
        max_workers: int | None = None,
        calculator: DominanceConeCalculator = cone_calculator,
    ) -> None:
        """Dominance cones of every object of `table`, calculated once.

        :param table: the information table
        :param cone_types: kinds of cones to calculate, all four by default
        :param max_workers: if greater than one, objects are processed by a thread pool
        of that size; results do not depend on it. Comparisons of the built-in fields hold
        the GIL, so only tables whose comparisons release it run faster
        :param calculator: calculator of single cones
        """
        self.table = not_none(table, "Information table for calculation of dominance cones is None.")
        self.number_of_objects = table.get_number_of_objects()
        self.cone_types = tuple(cone_types)
        self.calculator = calculator

        self._cones: dict[ConeType, list[list[int]]] = {}
        for cone_type in self.cone_types:
            start = time.perf_counter()
            self._cones[cone_type] = self._calculate_cones(cone_type, max_workers)
            logger.debug(
                "Calculated %s cones for %d objects in %.3fs",
                cone_type.value,
                self.number_of_objects,
                time.perf_counter() - start,
            )

    def _calculate_cones(self, cone_type: ConeType, max_workers: int | None) -> list[list[int]]:
        def calculate(x: int) -> list[int]:
            return self.calculator.calculate_cone(x, self.table, cone_type)

        if max_workers is None or max_workers <= 1 or self.number_of_objects < 2:
            return [calculate(x) for x in range(self.number_of_objects)]

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(calculate, range(self.number_of_objects)))

    def get_number_of_objects(self) -> int:
        return self.number_of_objects

    def get_cone(self, cone_type: ConeType, object_index: int) -> list[int]:
        if cone_type not in self._cones:
            raise ValueError(f"Cones of type {cone_type!r} were not calculated.")
        return self._cones[cone_type][check_object_index(object_index, self.number_of_objects)]

    def get_positive_d_cone(self, object_index: int) -> list[int]:
        return self.get_cone(ConeType.POSITIVE_D, object_index)

    def get_negative_d_cone(self, object_index: int) -> list[int]:
        return self.get_cone(ConeType.NEGATIVE_D, object_index)

    def get_positive_inv_d_cone(self, object_index: int) -> list[int]:
        return self.get_cone(ConeType.POSITIVE_INV_D, object_index)

    def get_negative_inv_d_cone(self, object_index: int) -> list[int]:
        return self.get_cone(ConeType.NEGATIVE_INV_D, object_index)


class DominanceConesDecisionDistributions:
    def __init__(
        self,
        table: Table,
        only_necessary_distributions: bool = False,
        max_workers: int | None = None,
    ) -> None:
        """Distributions of decisions in the dominance cones of every object of `table`.

        All cones are calculated here, in one pass over all pairs of objects, so that
        later lookups are cheap.

        :param table: the information table
        :param only_necessary_distributions: if ``True``, only distributions for positive
        inverse cones and negative cones are calculated, defaults to ``False``
        :param max_workers: size of the thread pool used to calculate cones, see `DominanceCones`
        """
        not_none(table, "Information table for calculation of dominance cones is None.")
        cone_types = NECESSARY_CONE_TYPES if only_necessary_distributions else tuple(ConeType)

        cones = DominanceCones(table, cone_types, max_workers=max_workers)
        self.number_of_objects = cones.get_number_of_objects()

        decisions = [table.get_decision(y) for y in range(self.number_of_objects)]
        self._distributions: dict[ConeType, list[DecisionDistribution]] = {
            cone_type: [
                DecisionDistribution(decisions[y] for y in cones.get_cone(cone_type, x))
                for x in range(self.number_of_objects)
            ]
            for cone_type in cone_types
        }

    def get_number_of_objects(self) -> int:
        return self.number_of_objects

    def get_decision_class_distribution(self, cone_type: ConeType, object_index: int) -> DecisionDistribution:
        if cone_type not in self._distributions:
            raise ValueError(f"Decision distributions for {cone_type!r} cones were not calculated.")
        return self._distributions[cone_type][check_object_index(object_index, self.number_of_objects)]

    def get_positive_d_cone_decision_class_distribution(self, object_index: int) -> DecisionDistribution:
        return self.get_decision_class_distribution(ConeType.POSITIVE_D, object_index)

    def get_negative_d_cone_decision_class_distribution(self, object_index: int) -> DecisionDistribution:
        return self.get_decision_class_distribution(ConeType.NEGATIVE_D, object_index)

    def get_positive_inv_d_cone_decision_class_distribution(self, object_index: int) -> DecisionDistribution:
        return self.get_decision_class_distribution(ConeType.POSITIVE_INV_D, object_index)

    def get_negative_inv_d_cone_decision_class_distribution(self, object_index: int) -> DecisionDistribution:
        return self.get_decision_class_distribution(ConeType.NEGATIVE_INV_D, object_index)
