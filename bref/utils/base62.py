"""Base62 codec for unsigned 64-bit integers

Keys are the base62 representation of an integer, most significant digit
first, over the alphabet 0-9, A-Z, a-z (in that digit-value order). The
output is byte-for-byte stable so keys stored by older deployments keep
resolving.

Functions:
    encode(n) -> str
        Convert a non-negative integer (< 2**64) to its base62 string.
    decode(encoded) -> int
        Convert a base62 string back to the integer it represents.

Example:
    >>> from bref.utils.base62 import encode, decode
    >>> encode(62)
    '10'
    >>> decode('zz')
    3843
"""

import string


ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE = len(ALPHABET)
INDEX = {character: value for value, character in enumerate(ALPHABET)}

MAX_VALUE = 2**64 - 1


def encode(n: int) -> str:
    """Encode a non-negative 64-bit integer into base62.

    The result is the minimal-length representation, with no leading zero
    symbols. Zero encodes to the single zero symbol ``'0'`` so every encoded
    value is a non-empty key.

    Args:
        n (int):
            Integer in the unsigned 64-bit range [0, 2**64 - 1].

    Returns:
        str: base62 representation of `n`.

    Raises:
        TypeError: If `n` is not an integer.
        ValueError: If `n` is outside the unsigned 64-bit range.

    Example:
        >>> encode(3843)
        'zz'
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f'Value must be of type integer (given type: {type(n)}).')
    if not 0 <= n <= MAX_VALUE:
        raise ValueError(f'Value must fit in an unsigned 64-bit integer (given value: {n}).')

    if n == 0:
        return ALPHABET[0]

    digits = []
    while n > 0:
        n, remainder = divmod(n, BASE)
        digits.append(ALPHABET[remainder])

    return ''.join(reversed(digits))


def decode(encoded: str) -> int:
    """Decode a base62 string back into an integer.

    Args:
        encoded (str):
            Non-empty string made only of base62 alphabet characters.

    Returns:
        int: the integer `encoded` represents.

    Raises:
        ValueError:
            If `encoded` is empty, contains characters outside the alphabet,
            or represents a value beyond the unsigned 64-bit range.
    """
    if not encoded:
        raise ValueError('Cannot decode an empty string.')

    n = 0
    for character in encoded:
        try:
            n = n * BASE + INDEX[character]
        except KeyError:
            raise ValueError(f'Invalid base62 character {character!r} in {encoded!r}.') from None

    if n > MAX_VALUE:
        raise ValueError(f'Decoded value of {encoded!r} does not fit in an unsigned 64-bit integer.')
    return n


def is_base62(value: str) -> bool:
    """Return True if `value` is a non-empty string of base62 characters."""
    return bool(value) and all(character in INDEX for character in value)
