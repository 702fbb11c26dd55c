"""Key generation utilities

This module provides the two ways of producing a Key:

Functions:
    generate_key(clock=SYSTEM_CLOCK) -> Key
        Time-based key: base62 of the whole seconds elapsed since the Unix
        epoch. Used for every new short URL.
    derive_key(content) -> Key
        Deterministic key: base62 of the 64-bit xxHash of `content`. Kept
        separate from the shorten workflow for content-addressed keys.

Example:
    >>> from bref.utils.clock import FrozenClock
    >>> from bref.utils.shortener import generate_key, derive_key
    >>> generate_key(FrozenClock(1000))
    Key(value='G8')
    >>> derive_key('https://example.com') == derive_key('https://example.com')
    True

NOTE:
    - Time-based keys have one-second resolution: two calls within the same
      second return the same key, calls in different seconds never collide.
      Uniqueness is guaranteed by monotonic time, not by randomness.
    - Current timestamps encode to 6 characters, and will until the year 3769.
"""

import logging

import xxhash
from beartype import beartype

from bref.exceptions import ClockError
from bref.models import Key
from bref.utils.base62 import encode
from bref.utils.clock import Clock, SYSTEM_CLOCK


logger = logging.getLogger(__name__)


def generate_key(clock: Clock = SYSTEM_CLOCK) -> Key:
    """Generate a new time-based key.

    Args:
        clock (Clock, optional):
            Source of whole seconds since the Unix epoch.
            Defaults to the system wall clock.

    Returns:
        Key: base62 encoding of the current second.

    Raises:
        ClockError:
            If the clock reports a time before the Unix epoch.
    """
    seconds = clock.seconds()
    if seconds < 0:
        logger.critical('System clock reports a time before the Unix epoch.', extra={'seconds': seconds})
        raise ClockError(f'Clock reports a time before the Unix epoch ({seconds}s).')

    return Key(encode(seconds))


@beartype
def derive_key(content: str | bytes) -> Key:
    """Derive a deterministic key from arbitrary content.

    Strings are hashed as their UTF-8 bytes. Distinct contents may collide
    only if their 64-bit hashes collide.

    Args:
        content (str | bytes):
            Content to derive the key from.

    Returns:
        Key: base62 encoding of the content's xxHash64 digest.

    Example:
        >>> derive_key(b'') == derive_key('')
        True
    """
    if isinstance(content, str):
        content = content.encode('utf-8')

    # NOTE: uses xxhash instead of hash() which is salted per process
    return Key(encode(xxhash.xxh64_intdigest(content)))
