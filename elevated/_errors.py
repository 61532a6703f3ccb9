from __future__ import annotations

class NotNestedError(TypeError):
    """unwrap() called on a Toxic that does not hold another Toxic."""

    value_type: type

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(f"Cannot unwrap: held value is {value_type.__name__}, not Toxic")

__all__ = ("NotNestedError",)
