import pytest

from bref.dao.sqlite import ShortURLSQLiteDAO


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / 'bref'


@pytest.fixture
def dao(db_path):
    """Create a ShortURLSQLiteDAO backed by a temporary database."""
    _dao = ShortURLSQLiteDAO(path=db_path)
    yield _dao
    _dao.close()
