from dataclasses import dataclass

from bref.utils.base62 import is_base62


@dataclass(frozen=True)
class Key:
    """Short, opaque identifier of a shortened URL.

    A key is made only of base62 alphabet characters (0-9, A-Z, a-z). Its
    UTF-8 bytes are used as the storage key.

    Attributes:
        value (str):
            The key's string representation, e.g. '1dFhvQ'.

    Raises:
        ValueError:
            If `value` is empty or contains non-base62 characters.

    Example:
        >>> key = Key('1dFhvQ')
        >>> str(key)
        '1dFhvQ'
        >>> bytes(key)
        b'1dFhvQ'
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not is_base62(self.value):
            raise ValueError(f'Key must be a non-empty base62 string (given value: {self.value!r}).')

    def __str__(self) -> str:
        return self.value

    def __bytes__(self) -> bytes:
        return self.value.encode('utf-8')
