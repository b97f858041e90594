from typing import Any

from .fields import ElementList, Field, UnknownSimpleField, UnknownSimpleFieldMV2, make_field
from .types import PreferenceType


class BaseCriterion:
    def __init__(self, name: str, preference_type: PreferenceType = PreferenceType.GAIN) -> None:
        """Base class for criteria."""
        if not isinstance(preference_type, PreferenceType):
            raise TypeError(f"Preference type has to be a PreferenceType, got {preference_type!r}.")
        self.name = name
        self.preference_type = preference_type

    def __repr__(self) -> str:
        return self.name


class Criterion(BaseCriterion):
    def __init__(
        self,
        name: str,
        preference_type: PreferenceType = PreferenceType.GAIN,
        active: bool = True,
        missing_value_type: UnknownSimpleField | None = None,
        element_list: ElementList | None = None,
        value_type: type | None = None,
    ) -> None:
        """Condition criterion.

        :param name: name of the criterion
        :param preference_type: ``GAIN``, ``COST`` or ``NONE`` (nominal attribute)
        :param active: inactive criteria are skipped when checking dominance
        :param missing_value_type: evaluation used for missing values, defaults to MV2
        :param element_list: domain of an enumeration criterion
        :param value_type: ``int`` forces integer fields even if pandas upcasted the column
        to floats (which happens for integer columns with missing values)
        """
        super().__init__(name, preference_type)
        self.active = active
        self.missing_value_type = UnknownSimpleFieldMV2() if missing_value_type is None else missing_value_type
        self.element_list = element_list
        self.value_type = value_type

    def create_field(self, value: Any) -> Field:
        if self.value_type is int and isinstance(value, float) and value.is_integer():
            value = int(value)
        return make_field(value, self.preference_type, self.missing_value_type, self.element_list)

    def __repr__(self) -> str:
        return f"{self.name}; {self.preference_type.value} attr"


class DecisionCriterion(BaseCriterion):
    def __init__(
        self,
        name: str,
        preference_type: PreferenceType = PreferenceType.GAIN,
        element_list: ElementList | None = None,
    ) -> None:
        """Decision criterion."""
        super().__init__(name, preference_type)
        self.element_list = element_list

    def create_field(self, value: Any) -> Field:
        return make_field(value, self.preference_type, element_list=self.element_list)

    def __repr__(self) -> str:
        return f"{self.name}; decision attr"
