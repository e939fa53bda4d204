# dspbench

Digital filters that work one sample at a time, and a Gray-coded QPSK
modulator and demodulator on a complex carrier. Everything is plain Python
with no dependencies outside the standard library.

## Modules

### `dspbench.fir`

`FirFilter(coefficients)` is a direct-form FIR filter over a delay line of
past inputs. The first coefficient is applied to the newest sample.

- `process(sample)` pushes one sample and returns the filtered output.
- `coefficients` is the tuple of taps; `len(filter)` is the number of taps.
- An empty coefficient list raises `ValueError`.

### `dspbench.iir`

`IirFilter(b_coeffs, a_coeffs)` is a cascade of second-order (biquad)
sections. Both lists hold three coefficients per section, `b0, b1, b2` and
`a0, a1, a2`, and must have the same length, a multiple of three; otherwise
`ValueError` is raised. Each section computes

    y = (b0*x + b1*x[n-1] + b2*x[n-2] - a1*y[n-1] - a2*y[n-2]) / a0

and feeds its output to the next section.

- `process(sample)` runs one sample through all sections.
- `set_section(section, b0, b1, b2, a0, a1, a2)` replaces one section's
  coefficients and keeps its state; an index out of range raises `IndexError`.
- `num_sections` is the number of sections.

### `dspbench.lms`

`LmsFilter(length, mu)` is an adaptive FIR filter with all weights starting at
zero. A non-positive length or step size raises `ValueError`.

- `process(sample, desired)` returns the output computed with the current
  weights, then moves each weight by `mu * (desired - output) * input`.
- `weights` is a tuple of the current weights, newest-sample weight first;
  `mu` is the step size; `len(filter)` is the number of taps.

### `dspbench.qpsk`

- `QpskParams(f_center, fs, samples_per_sym)` – frozen dataclass with carrier
  frequency and sample rate in hertz and samples per symbol. A non-positive
  sample rate or samples-per-symbol raises `ValueError`.
- `modulate(bits, params)` maps bit pairs (first bit as MSB) to the points
  `00 → (+,+)`, `01 → (−,+)`, `10 → (+,−)`, `11 → (−,−)` of amplitude
  `1/√2`, holds each point for `samples_per_sym` samples and multiplies it by
  the carrier phasor. It returns a list of complex samples. A trailing odd bit
  is ignored; a bit other than 0 or 1 raises `ValueError`.
- `demodulate(signal, params, delay=0)` skips the first `delay` samples (at
  most all but one), mixes the rest down with the conjugate carrier, averages
  the middle half of each symbol period and decides each symbol by the angle
  of the average. It returns `(bits, constellation)`: two bits per symbol,
  with the last symbol possibly partial, and the averaged point of each
  symbol. An empty signal or a negative delay raises `ValueError`.

## Example

```python
import random

from dspbench.fir import FirFilter
from dspbench.lms import LmsFilter
from dspbench.qpsk import QpskParams, demodulate, modulate

rng = random.Random(1)
params = QpskParams(2140e6, 5e9, 100)

bits = [rng.randint(0, 1) for _ in range(1000)]
signal = modulate(bits, params)

decoded, constellation = demodulate(signal, params)
errors = sum(a != b for a, b in zip(bits, decoded))
print(f"bit errors: {errors} of {len(bits)}")

# Filter the real part with a moving average
fir = FirFilter([0.25, 0.25, 0.25, 0.25])
smoothed = [fir.process(s.real) for s in signal]

# Let an LMS filter learn to reproduce the real part of the signal
lms = LmsFilter(16, 0.01)
outputs = [lms.process(s.real, s.real) for s in signal]
print(lms.weights[:4])
```

## What it does not do

The package provides the filters and the modem only. It has no RLS filter, no
noise or interference generator, no random bit source, and no harness that
times filters or reports bit error rates; there is no command-line program.
Callers build test signals and measure results themselves, as in the example
above.

## Tests

The test suite uses pytest and is installed with the `test` extra.