"""QPSK modulation onto a complex carrier and matching demodulation."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice

_TWO_PI = 2.0 * math.pi
_AMPLITUDE = 1.0 / math.sqrt(2.0)

# Dibit value (first bit as MSB) to constellation point.
_SYMBOLS = {
    0: complex(_AMPLITUDE, _AMPLITUDE),
    1: complex(-_AMPLITUDE, _AMPLITUDE),
    2: complex(_AMPLITUDE, -_AMPLITUDE),
    3: complex(-_AMPLITUDE, -_AMPLITUDE),
}


@dataclass(frozen=True)
class QpskParams:
    """Carrier frequency and sample rate in hertz, and samples per symbol."""

    f_center: float
    fs: float
    samples_per_sym: int

    def __post_init__(self) -> None:
        if self.fs <= 0:
            raise ValueError("sample rate must be positive")
        if self.samples_per_sym <= 0:
            raise ValueError("samples per symbol must be positive")


def _carrier(count: int, params: QpskParams) -> Iterator[complex]:
    """Yield ``count`` unit phasors of the carrier, starting at phase zero."""
    phase_inc = _TWO_PI * params.f_center / params.fs
    phase = 0.0
    for _ in range(count):
        yield complex(math.cos(phase), math.sin(phase))
        phase += phase_inc
        if phase > _TWO_PI:
            phase -= _TWO_PI


def _decide(point: complex) -> int:
    """Map a received point to a dibit value by its angle."""
    angle = math.atan2(point.imag, point.real)
    quarter = math.pi / 4
    if -quarter <= angle < quarter:
        return 0
    if quarter <= angle < 3 * quarter:
        return 1
    if -3 * quarter <= angle < -quarter:
        return 2
    return 3


def modulate(bits: Iterable[int], params: QpskParams) -> list[complex]:
    """Modulate bits, two per symbol, onto the carrier.

    A trailing odd bit is ignored.
    """
    bits = list(bits)
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError("bits must be 0 or 1")
    symbols = [_SYMBOLS[(hi << 1) | lo] for hi, lo in zip(bits[0::2], bits[1::2])]
    sps = params.samples_per_sym
    carrier = _carrier(len(symbols) * sps, params)
    return [symbol * phasor for symbol in symbols for phasor in islice(carrier, sps)]


def demodulate(
    signal: Sequence[complex], params: QpskParams, delay: int = 0
) -> tuple[list[int], list[complex]]:
    """Recover bits from a modulated signal.

    The first ``delay`` samples are skipped (at most all but one). Returns the
    decoded bits and the averaged constellation point of each symbol.
    """
    samples = list(signal)
    if not samples:
        raise ValueError("signal is empty")
    if delay < 0:
        raise ValueError("delay must not be negative")
    processed = samples[min(delay, len(samples) - 1):]

    baseband = [
        sample * phasor.conjugate()
        for sample, phasor in zip(processed, _carrier(len(processed), params))
    ]

    sps = params.samples_per_sym
    length = len(baseband)
    num_symbols = -(-length // sps)
    bits: list[int] = []
    constellation: list[complex] = []
    for symbol_index in range(num_symbols):
        start = symbol_index * sps + sps // 4
        end = min(start + sps // 2, length - 1)
        window = baseband[start:end]
        if window:
            average = sum(window) / len(window)
        else:
            average = complex(math.nan, math.nan)
        constellation.append(average)
        symbol = _decide(average)
        bits.extend(((symbol >> 1) & 1, symbol & 1))
    return bits, constellation