
import pytest

from patlayout.common import Level, FINEST, DEBUG, INFO, WARNING, CRITICAL
from patlayout.common import DEFAULT_LEVEL, BUILTIN_LEVELS
from patlayout.common import get_level, get_next_level, get_prev_level
from patlayout.common import register_level, level_string


def test_default_level_ordering():
    assert DEBUG != INFO != CRITICAL
    assert FINEST < DEBUG < INFO < WARNING < CRITICAL
    assert DEBUG <= INFO <= CRITICAL
    assert DEBUG == DEBUG
    assert [int(lvl) for lvl in BUILTIN_LEVELS] == list(range(8))


def test_new_level_equality():
    assert DEBUG == Level('debug', 2)
    assert INFO == 'INFO'
    assert INFO == 4


def test_short_name_equality():
    assert WARNING == 'WARN'
    assert WARNING == 'warn'
    assert get_level('WARN') == 'WARN'
    assert DEBUG == 'DEBG'
    assert WARNING != 'EROR'


def test_level_getting():
    assert get_level('debug') == DEBUG
    assert get_level('CRITICAL') == CRITICAL
    assert get_level('WARN') is WARNING
    assert get_level(int(INFO.value)) == INFO
    assert get_level(DEFAULT_LEVEL) == DEFAULT_LEVEL
    assert get_level('nope') is DEFAULT_LEVEL


def test_level_adjacency():
    assert get_next_level(DEBUG) > DEBUG
    assert get_prev_level(CRITICAL) < CRITICAL
    assert get_next_level(CRITICAL) is CRITICAL
    assert get_prev_level(FINEST) is FINEST


def test_level_strings():
    expected = ['FNST', 'FINE', 'DEBG', 'TRAC', 'INFO', 'WARN', 'EROR', 'CRIT']
    assert [level_string(i) for i in range(8)] == expected
    assert level_string(WARNING) == 'WARN'
    assert level_string('error') == 'EROR'
    assert level_string(99) == '99'


def test_register_level():
    with pytest.raises(TypeError):
        register_level('loud')
