import math

import pytest

from dspbench.qpsk import QpskParams, demodulate, modulate

A = 1.0 / math.sqrt(2.0)
BASEBAND = QpskParams(f_center=0.0, fs=1.0, samples_per_sym=8)
RF = QpskParams(f_center=2140e6, fs=5e9, samples_per_sym=100)

GRAY_MAP = [
    ([0, 0], complex(A, A)),
    ([0, 1], complex(-A, A)),
    ([1, 0], complex(A, -A)),
    ([1, 1], complex(-A, -A)),
]


def test_modulate_length_ignores_trailing_bit():
    signal = modulate([0, 1, 1, 0, 1], BASEBAND)
    assert len(signal) == 2 * BASEBAND.samples_per_sym


@pytest.mark.parametrize("bits, expected", GRAY_MAP)
def test_modulate_gray_map_at_zero_carrier(bits, expected):
    signal = modulate(bits, BASEBAND)
    assert len(signal) == BASEBAND.samples_per_sym
    assert all(sample == pytest.approx(expected) for sample in signal)


def test_modulated_envelope_is_unit():
    signal = modulate([0, 0, 0, 1, 1, 0, 1, 1], RF)
    assert all(abs(sample) == pytest.approx(1.0, abs=1e-9) for sample in signal)


def test_modulate_rejects_non_binary():
    with pytest.raises(ValueError):
        modulate([0, 2], BASEBAND)


def test_params_validation():
    with pytest.raises(ValueError):
        QpskParams(f_center=1.0, fs=10.0, samples_per_sym=0)
    with pytest.raises(ValueError):
        QpskParams(f_center=1.0, fs=0.0, samples_per_sym=4)


def test_constellation_recovers_symbols_at_rf():
    bits = [b for pair, _ in GRAY_MAP for b in pair]
    signal = modulate(bits, RF)
    decoded, constellation = demodulate(signal, RF, 0)
    assert len(constellation) == len(GRAY_MAP)
    assert len(decoded) == len(bits)
    for point, (_, expected) in zip(constellation, GRAY_MAP):
        assert point == pytest.approx(expected, abs=1e-6)


@pytest.mark.parametrize(
    "point, expected_bits",
    [
        (complex(1, 0), [0, 0]),
        (complex(0, 1), [0, 1]),
        (complex(1, 1), [0, 1]),
        (complex(0, -1), [1, 0]),
        (complex(-1, 0), [1, 1]),
    ],
)
def test_decision_regions(point, expected_bits):
    signal = [point] * (2 * BASEBAND.samples_per_sym)
    bits, constellation = demodulate(signal, BASEBAND, 0)
    assert bits == expected_bits * 2
    assert all(p == pytest.approx(point) for p in constellation)


def test_delay_adds_partial_symbol():
    signal = modulate([0, 0, 1, 1], BASEBAND)
    bits, constellation = demodulate(signal, BASEBAND, 3)
    sps = BASEBAND.samples_per_sym
    assert len(constellation) == math.ceil((len(signal) - 3) / sps)
    assert len(bits) == 2 * len(constellation)


def test_delay_is_clamped_and_empty_window_decodes_as_last_symbol():
    signal = modulate([0, 0, 1, 1], BASEBAND)
    bits, constellation = demodulate(signal, BASEBAND, 100)
    assert bits == [1, 1]
    assert len(constellation) == 1
    assert math.isnan(constellation[0].real)


def test_demodulate_errors():
    with pytest.raises(ValueError):
        demodulate([], BASEBAND, 0)
    with pytest.raises(ValueError):
        demodulate([complex(1, 0)] * 8, BASEBAND, -1)