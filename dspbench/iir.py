"""Cascaded second-order (biquad) IIR filter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class _Section:
    b: list[float]
    a: list[float]
    x1: float = 0.0
    x2: float = 0.0
    y1: float = 0.0
    y2: float = 0.0

    def step(self, x: float) -> float:
        b0, b1, b2 = self.b
        a0, a1, a2 = self.a
        y = (b0 * x + b1 * self.x1 + b2 * self.x2 - a1 * self.y1 - a2 * self.y2) / a0
        self.x2, self.x1 = self.x1, x
        self.y2, self.y1 = self.y1, y
        return y


class IirFilter:
    """IIR filter built from biquad sections, three coefficients per section."""

    def __init__(self, b_coeffs: Sequence[float], a_coeffs: Sequence[float]) -> None:
        b = [float(v) for v in b_coeffs]
        a = [float(v) for v in a_coeffs]
        if len(b) % 3 or len(a) % 3 or len(b) != len(a):
            raise ValueError(
                "numerator and denominator must have the same length, a multiple of 3"
            )
        self._sections = [
            _Section(b[i : i + 3], a[i : i + 3]) for i in range(0, len(b), 3)
        ]

    @property
    def num_sections(self) -> int:
        """Number of biquad sections in the cascade."""
        return len(self._sections)

    def set_section(
        self,
        section: int,
        b0: float,
        b1: float,
        b2: float,
        a0: float,
        a1: float,
        a2: float,
    ) -> None:
        """Replace the coefficients of one section, keeping its state."""
        if not 0 <= section < len(self._sections):
            raise IndexError(f"section {section} out of range")
        target = self._sections[section]
        target.b = [float(b0), float(b1), float(b2)]
        target.a = [float(a0), float(a1), float(a2)]

    def process(self, sample: float) -> float:
        """Run one sample through every section in turn."""
        output = float(sample)
        for section in self._sections:
            output = section.step(output)
        return output