"""Least-mean-squares adaptive FIR filter."""

from __future__ import annotations

from collections import deque


class LmsFilter:
    """Adaptive FIR filter whose taps follow the LMS update rule."""

    def __init__(self, length: int, mu: float) -> None:
        if length <= 0:
            raise ValueError("filter length must be positive")
        if mu <= 0.0:
            raise ValueError("step size mu must be positive")
        self.mu = float(mu)
        self._weights = [0.0] * length
        self._history: deque[float] = deque([0.0] * length, maxlen=length)

    @property
    def weights(self) -> tuple[float, ...]:
        """Current tap weights, first weight applied to the newest sample."""
        return tuple(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def process(self, sample: float, desired: float) -> float:
        """Filter one sample, adapt towards ``desired`` and return the output."""
        self._history.appendleft(float(sample))
        output = sum(w * x for w, x in zip(self._weights, self._history))
        step = self.mu * (desired - output)
        self._weights = [w + step * x for w, x in zip(self._weights, self._history)]
        return output