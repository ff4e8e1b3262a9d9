"""Small utilities: colour and key tables, hex and base64 codecs, a PRNG, a FIFO, observers, elliptic-curve crypto and a bitmap font."""

__version__ = "0.1.0"