"""Unit tests for the Key model.

Test coverage includes:

1. Construction and validation
2. Representations (str, bytes)
3. Immutability and equality
"""

import dataclasses

import pytest

from bref.models import Key


# -------------------------------
# 1. Construction and validation
# -------------------------------


@pytest.mark.parametrize('value', ['0', 'G8', '1dFhvQ', 'LygHa16AHYF'])
def test_key_accepts_base62_strings(value):
    assert Key(value).value == value


@pytest.mark.parametrize('value', ['', 'abc-123', 'abc 123', 'ключ', '../etc'])
def test_key_rejects_non_base62_strings(value):
    with pytest.raises(ValueError, match='non-empty base62 string'):
        Key(value)


@pytest.mark.parametrize('value', [None, 123, b'abc'])
def test_key_rejects_non_strings(value):
    with pytest.raises(ValueError):
        Key(value)


# -------------------------------
# 2. Representations
# -------------------------------


def test_key_str():
    assert str(Key('1dFhvQ')) == '1dFhvQ'


def test_key_bytes():
    assert bytes(Key('1dFhvQ')) == b'1dFhvQ'


# -------------------------------
# 3. Immutability and equality
# -------------------------------


def test_key_is_immutable():
    key = Key('1dFhvQ')
    with pytest.raises(dataclasses.FrozenInstanceError):
        key.value = 'other'


def test_key_equality_and_hashing():
    assert Key('abc') == Key('abc')
    assert Key('abc') != Key('abd')
    assert len({Key('abc'), Key('abc'), Key('abd')}) == 2
