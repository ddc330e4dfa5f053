# -*- coding: utf-8 -*-
"""Levels, boolean coercion, and the option errors shared by
:class:`~patlayout.layout.PatternLayout` and its callers.
"""

from boltons.funcutils import total_ordering


class OptionError(ValueError):
    "Base type for errors raised while setting a layout option."


class BadOptionError(OptionError):
    "Raised for an option name the layout does not recognize."


class BadValueError(OptionError):
    "Raised when a recognized option gets a value of the wrong shape."


class BoolCoercionError(BadValueError):
    pass


_TRUE_STRS = ('1', 't', 'T', 'TRUE', 'true', 'True')
_FALSE_STRS = ('0', 'f', 'F', 'FALSE', 'false', 'False')


def to_bool(value):
    """Coerce *value* to a :class:`bool`. Accepts bools, the integers 0
    and 1, and the usual textual spellings (``"t"``, ``"TRUE"``,
    ``"0"``, etc.), as text or bytes. Everything else raises
    :exc:`BoolCoercionError`.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise BoolCoercionError('expected 0 or 1, not %r' % value)
    if isinstance(value, bytes):
        try:
            text = value.decode('ascii')
        except UnicodeDecodeError:
            raise BoolCoercionError('expected boolean text, not %r' % value)
    elif isinstance(value, str):
        text = value
    else:
        raise BoolCoercionError('expected bool, int, or text, not %r' % value)
    text = text.strip()
    if text in _TRUE_STRS:
        return True
    if text in _FALSE_STRS:
        return False
    raise BoolCoercionError('unrecognized boolean text: %r' % value)


@total_ordering
class Level(object):
    def __init__(self, name, value, short_name=None):
        self.name = name.lower()
        self.short_name = (short_name or name[:4]).upper()
        self._value = value

    @property
    def value(self):
        return self._value

    def __int__(self):
        return self._value

    def __hash__(self):
        return hash(self._value)

    def __eq__(self, other):
        if self is other:
            return True
        elif isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        elif self._value == getattr(other, '_value', None):
            return True
        elif isinstance(other, str):
            return (self.name == other.lower()
                    or self.short_name == other.upper())
        return False

    def __lt__(self, other):
        if self is other:
            return False
        if isinstance(other, int):
            return self._value < other
        elif self._value < getattr(other, '_value', 100):
            return True
        return False

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.name, self._value)


FINEST = Level('finest', 0, 'FNST')
FINE = Level('fine', 1, 'FINE')
DEBUG = Level('debug', 2, 'DEBG')
TRACE = Level('trace', 3, 'TRAC')
INFO = Level('info', 4, 'INFO')
WARNING = Level('warning', 5, 'WARN')
ERROR = Level('error', 6, 'EROR')
CRITICAL = Level('critical', 7, 'CRIT')
DEFAULT_LEVEL = INFO
BUILTIN_LEVELS = (FINEST, FINE, DEBUG, TRACE, INFO, WARNING, ERROR, CRITICAL)


def register_level(level_obj):
    if not isinstance(level_obj, Level):
        raise TypeError('expected Level object, not %r' % level_obj)

    LEVEL_ALIAS_MAP[level_obj.name.lower()] = level_obj
    LEVEL_ALIAS_MAP[level_obj.name.upper()] = level_obj
    LEVEL_ALIAS_MAP[level_obj.short_name] = level_obj
    LEVEL_ALIAS_MAP[level_obj._value] = level_obj
    LEVEL_LIST[:] = sorted(set(LEVEL_ALIAS_MAP.values()))


LEVEL_LIST = []
LEVEL_ALIAS_MAP = {}
for level in BUILTIN_LEVELS:
    register_level(level)
del level


def get_level(key, default=DEFAULT_LEVEL):
    if isinstance(key, Level):
        return key
    return LEVEL_ALIAS_MAP.get(key, default)


def get_next_level(key, delta=1):
    level = get_level(key)
    next_i = min(LEVEL_LIST.index(level) + delta, len(LEVEL_LIST) - 1)
    return LEVEL_LIST[next_i]


def get_prev_level(key, delta=1):
    level, delta = get_level(key), abs(delta)
    prev_i = max(LEVEL_LIST.index(level) - delta, 0)
    return LEVEL_LIST[prev_i]


def level_string(level):
    """Display text for *level*, e.g., ``'INFO'`` or ``'EROR'``. Ordinals
    with no registered level come back as their decimal digits.
    """
    level_obj = get_level(level, None)
    if level_obj is None:
        return str(int(level)) if isinstance(level, int) else str(level)
    return level_obj.short_name
