from dataclasses import dataclass

from bref.models.key import Key


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        key (Key):
            The short identifier representing the shortened URL.
        target (str):
            The original long URL that the key resolves to. Stored as-is,
            without URL validation.

    Example:
        >>> url = ShortURLModel(key=Key('1dFhvQ'), target='https://example.com/article/123')
        >>> url.target
        'https://example.com/article/123'
        >>> str(url.key)
        '1dFhvQ'
    """

    key: Key
    target: str
