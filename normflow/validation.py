"""Postcondition checks for normalized output."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

from normflow.exceptions import NormalizationCheckError


@dataclass
class NormalizationCheck:
    same_length: bool
    in_unit_interval: bool
    spans_unit_interval: bool
    order_preserved: bool

    @property
    def ok(self) -> bool:
        return all(asdict(self).values())

    def failures(self) -> list[str]:
        return [name for name, passed in asdict(self).items() if not passed]


def check_normalized(y, x=None, atol: float = 0.0) -> NormalizationCheck:
    """Evaluate the normalization postconditions for ``y``.

    When the source ``x`` is supplied, length and ordering are compared against
    it; otherwise those checks pass trivially.
    """
    out = np.asarray(y, dtype=float)
    if out.size == 0:
        return NormalizationCheck(False, False, False, False)

    in_interval = bool(((out >= -atol) & (out <= 1 + atol)).all())
    spans = bool(np.isclose(out.min(), 0.0, atol=atol, rtol=0) and np.isclose(out.max(), 1.0, atol=atol, rtol=0))

    same_length = True
    order_preserved = True
    if x is not None:
        src = np.asarray(x, dtype=float)
        same_length = src.shape == out.shape
        if same_length:
            order = np.argsort(src, kind="stable")
            order_preserved = bool((np.diff(out[order]) >= 0).all())
        else:
            order_preserved = False

    return NormalizationCheck(
        same_length=same_length,
        in_unit_interval=in_interval,
        spans_unit_interval=spans,
        order_preserved=order_preserved,
    )


def assert_normalized(y, x=None, atol: float = 0.0) -> NormalizationCheck:
    result = check_normalized(y, x=x, atol=atol)
    if not result.ok:
        raise NormalizationCheckError(f"Normalized output failed checks: {result.failures()}")
    return result


__all__ = ["NormalizationCheck", "assert_normalized", "check_normalized"]
