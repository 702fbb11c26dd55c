from bref.models.key import Key
from bref.models.short_url_model import ShortURLModel


__all__ = [
    'Key',
    'ShortURLModel',
]
