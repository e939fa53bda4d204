"""Finite impulse response filter working one sample at a time."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class FirFilter:
    """Direct-form FIR filter with a circular history of past inputs."""

    def __init__(self, coefficients: Iterable[float]) -> None:
        coeffs = tuple(float(c) for c in coefficients)
        if not coeffs:
            raise ValueError("FIR filter needs at least one coefficient")
        self._coefficients = coeffs
        # Most recent sample sits at the left end.
        self._history: deque[float] = deque([0.0] * len(coeffs), maxlen=len(coeffs))

    @property
    def coefficients(self) -> tuple[float, ...]:
        """The filter taps, first tap applied to the newest sample."""
        return self._coefficients

    def __len__(self) -> int:
        return len(self._coefficients)

    def process(self, sample: float) -> float:
        """Push one input sample and return the filtered output."""
        self._history.appendleft(float(sample))
        return sum(c * x for c, x in zip(self._coefficients, self._history))