from typing import Any, TypeVar

T = TypeVar("T")


def not_none(value: T, message: str) -> T:
    """Return `value` unchanged, raise ``ValueError`` with `message` if it is ``None``."""
    if value is None:
        raise ValueError(message)
    return value


def check_object_index(object_index: Any, number_of_objects: int) -> int:
    """Validate an object index against the number of objects in a table.

    Negative indices are rejected, no wrap-around like for Python sequences.
    """
    if isinstance(object_index, bool) or not hasattr(object_index, "__index__"):
        raise TypeError(f"Object index has to be an integer, got {type(object_index).__name__}.")

    object_index = object_index.__index__()
    if not 0 <= object_index < number_of_objects:
        raise IndexError(f"Object index {object_index} is out of range [0, {number_of_objects}).")
    return object_index
