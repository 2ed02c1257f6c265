"""Seeded random sequence generation."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from normflow.exceptions import ConfigValidationError


def make_rng(seed: int | None = None, rng: np.random.Generator | None = None) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ConfigValidationError("Pass either seed or rng, not both")
    return rng if rng is not None else np.random.default_rng(seed)


def random_sequences(
    lengths: Iterable[int],
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    loc: float = 0.0,
    scale: float = 1.0,
) -> list[np.ndarray]:
    """Draw one normal sample per requested length from an explicit generator."""
    lengths = [int(n) for n in lengths]
    negative = [n for n in lengths if n < 0]
    if negative:
        raise ConfigValidationError(f"Sequence lengths must be >= 0, got {negative}")
    if scale <= 0:
        raise ConfigValidationError("scale must be > 0")
    generator = make_rng(seed, rng)
    return [generator.normal(loc=loc, scale=scale, size=n) for n in lengths]


__all__ = ["make_rng", "random_sequences"]
