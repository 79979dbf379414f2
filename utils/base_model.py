# utils/base_model.py
from typing import TypeVar, Any
from pydantic import BaseModel

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for value models: frozen after creation, changed only by copying.

    Tuples and the simulation state built on top of them inherit from this class
    so that no operation can alter an existing instance.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a validated copy with some fields replaced.

        Args:
            **changes: Field values to replace

        Returns:
            New instance of the same class

        Raises:
            ValueError: If a keyword does not name a field
        """
        fields = type(self).model_fields
        for key in changes:
            if key not in fields:
                raise ValueError(f"Invalid field: {key}")

        # Nested models are passed through as instances, not dumped to dicts
        values = {name: getattr(self, name) for name in fields}
        values.update(changes)
        return type(self).model_validate(values)
