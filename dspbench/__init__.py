"""Sample-by-sample FIR, IIR and LMS filters and a QPSK modem."""

__version__ = "0.1.0"
__all__ = ["fir", "iir", "lms", "qpsk"]