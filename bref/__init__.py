"""bref: a small URL shortener with time-based base62 keys."""

__version__ = '0.1.0'
