from bref.dao.base import ShortURLBaseDAO
from bref.dao.factory import create_short_url_dao


__all__ = [
    'ShortURLBaseDAO',
    'create_short_url_dao',
]
