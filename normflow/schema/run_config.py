"""Run configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from normflow.exceptions import ConfigValidationError
from normflow.normalize import MIN_LENGTH


@dataclass(slots=True)
class RunConfig:
    seed: Optional[int]
    min_length: int = 2
    max_length: int = 10
    id_column: str = "id"
    group_column: str = "cyl"
    formula: str = "mpg ~ wt"

    def __post_init__(self) -> None:
        if self.seed is None:
            raise ConfigValidationError("seed is required for reproducibility")
        if self.min_length < MIN_LENGTH:
            raise ConfigValidationError(f"min_length must be >= {MIN_LENGTH}")
        if self.max_length < self.min_length:
            raise ConfigValidationError("max_length must be >= min_length")
        if not self.id_column or not self.id_column.strip():
            raise ConfigValidationError("id_column must be a non-empty string")
        if not self.group_column or not self.group_column.strip():
            raise ConfigValidationError("group_column must be a non-empty string")
        if "~" not in self.formula:
            raise ConfigValidationError("formula must have the form 'y ~ x'")

    @property
    def lengths(self) -> range:
        return range(self.min_length, self.max_length + 1)

    @classmethod
    def from_dict(cls, data: dict) -> "RunConfig":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "id_column": self.id_column,
            "group_column": self.group_column,
            "formula": self.formula,
        }


__all__ = ["RunConfig"]
