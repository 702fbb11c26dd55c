from bref.dao.sqlite.mixins import SQLiteClientMixin
from bref.dao.sqlite.short_url_sqlite_dao import ShortURLSQLiteDAO


__all__ = [
    'SQLiteClientMixin',
    'ShortURLSQLiteDAO',
]
