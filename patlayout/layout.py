# -*- coding: utf-8 -*-
"""Implements :class:`PatternLayout`, which renders
:class:`~patlayout.record.LogRecord` instances into bytes according to
a ``%``-coded pattern.
"""

import datetime
import threading
from collections import namedtuple

from boltons.timeutils import UTC, LocalTZ

from patlayout.context import note
from patlayout.common import (OptionError, BadOptionError, BadValueError,
                              to_bool, level_string)
from patlayout.formatutils import itoa, format222, format_ccyymmdd, to_bytes


__all__ = ['PatternLayout', 'PATTERN_DEFAULT', 'PATTERN_SHORT',
           'PATTERN_ABBREV', 'PATTERN_JSON', 'NIL_OUTPUT']


# date, time, zone, level, source, line, and message
PATTERN_DEFAULT = '[%D %T %z] [%L] (%s:%N) %M\n'
# short time, short date, level, and message
PATTERN_SHORT = '[%h:%m %d] [%L] %M\n'
PATTERN_ABBREV = '[%L] %M\n'
# JSON-shaped, but nothing is escaped
PATTERN_JSON = ('{"Level":%l,"Created":"%YT%U%Z","Prefix":"%P",'
                '"Source":"%S","Line":%N,"Message":"%M"}')

NIL_OUTPUT = b'<nil>'

_COLON, _DOT, _SLASH, _DASH = b':./-'


CODE_MAP = {}


class PatternCode(object):
    """One single-character pattern code. *writer* is called as
    ``writer(out, record, dt, zone)`` and appends to the *out*
    bytearray. *dt* is only computed for codes with *uses_time* set.
    """
    def __init__(self, code, writer, uses_time=False):
        self.code = code
        self.writer = writer
        self.uses_time = uses_time

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(%r, uses_time=%r)' % (cn, self.code, self.uses_time)


def _register_code(pattern_code):
    CODE_MAP[ord(pattern_code.code)] = pattern_code


def _write_time_us(out, rec, dt, zone):
    format222(out, dt.hour, dt.minute, dt.second, _COLON)
    out.append(_DOT)
    itoa(out, dt.microsecond, 6)


def _write_time(out, rec, dt, zone):
    format222(out, dt.hour, dt.minute, dt.second, _COLON)


def _write_date_slash(out, rec, dt, zone):
    cc, yy = divmod(dt.year, 100)
    format_ccyymmdd(out, cc, yy, dt.month, dt.day, _SLASH)


def _write_date_dash(out, rec, dt, zone):
    cc, yy = divmod(dt.year, 100)
    format_ccyymmdd(out, cc, yy, dt.month, dt.day, _DASH)


def _write_short_source(out, rec, dt, zone):
    source = rec.source
    out += to_bytes(source[source.rfind('/') + 1:])


def _literal(text):
    def _write_literal(out, rec, dt, zone):
        out += text
    return _write_literal


_PC = PatternCode
BUILTIN_CODES = [
    _PC('U', _write_time_us, uses_time=True),
    _PC('T', _write_time, uses_time=True),
    _PC('h', lambda out, r, dt, z: itoa(out, dt.hour, 2), uses_time=True),
    _PC('m', lambda out, r, dt, z: itoa(out, dt.minute, 2), uses_time=True),
    _PC('Z', lambda out, r, dt, z: out.extend(z.long_zone)),
    _PC('z', lambda out, r, dt, z: out.extend(z.short_zone)),
    _PC('D', _write_date_slash, uses_time=True),
    _PC('Y', _write_date_dash, uses_time=True),
    # day first, then month and two-digit year
    _PC('d', lambda out, r, dt, z: format222(out, dt.day, dt.month,
                                             dt.year % 100, _SLASH),
        uses_time=True),
    _PC('L', lambda out, r, dt, z: out.extend(to_bytes(level_string(r.level)))),
    _PC('l', lambda out, r, dt, z: itoa(out, int(r.level))),
    _PC('P', lambda out, r, dt, z: out.extend(to_bytes(r.prefix))),
    _PC('S', lambda out, r, dt, z: out.extend(to_bytes(r.source))),
    _PC('s', _write_short_source),
    _PC('N', lambda out, r, dt, z: itoa(out, r.line)),
    _PC('M', lambda out, r, dt, z: out.extend(to_bytes(r.message))),
    _PC('t', _literal(b'\t')),
    _PC('r', _literal(b'\r')),
    _PC('n', _literal(b'\n')),
    _PC('R', _literal(b'\n'))]

for pc in BUILTIN_CODES:
    _register_code(pc)
del pc


# prefix is the literal text before the first %, pieces is a tuple of
# (writer, tail) pairs. writer is None for unknown codes.
CompiledPattern = namedtuple('CompiledPattern',
                             'raw prefix pieces uses_time')

ZoneCache = namedtuple('ZoneCache', 'utc tz short_zone long_zone')


def compile_pattern(pattern):
    if isinstance(pattern, str):
        raw = pattern.encode('utf-8')
    elif isinstance(pattern, (bytes, bytearray)):
        raw = bytes(pattern)
    else:
        raise BadValueError('expected text or bytes pattern, not %r'
                            % (pattern,))
    segments = raw.split(b'%')
    pieces, uses_time = [], False
    for seg in segments[1:]:
        if not seg:
            # from %% or a trailing %, renders nothing
            continue
        pattern_code = CODE_MAP.get(seg[0])
        if pattern_code is None:
            pieces.append((None, seg[1:]))
            continue
        uses_time = uses_time or pattern_code.uses_time
        pieces.append((pattern_code.writer, seg[1:]))
    return CompiledPattern(raw, segments[0], tuple(pieces), uses_time)


def format_utc_offset(offset):
    """Render a :class:`~datetime.timedelta` the way ISO 8601 zone
    designators read: ``b'Z'`` for UTC, else ``b'+08:00'`` and
    similar. Seconds are dropped.
    """
    minutes = int(offset.total_seconds()) // 60
    if not minutes:
        return b'Z'
    out = bytearray(b'+' if minutes > 0 else b'-')
    hours, minutes = divmod(abs(minutes), 60)
    itoa(out, hours, 2)
    out.append(_COLON)
    itoa(out, minutes, 2)
    return bytes(out)


def get_zone_cache(utc):
    """Compute the zone strings for right now. The result is not
    refreshed per record, so a layout keeps the same zone name across
    daylight saving transitions until ``utc`` is set again.
    """
    tz = UTC if utc else LocalTZ
    now = datetime.datetime.now(tz)
    return ZoneCache(utc, tz, to_bytes(now.tzname() or ''),
                     format_utc_offset(now.utcoffset()))


def _get_record_datetime(created, tz):
    """Convert a record's *created* timestamp (or datetime) into *tz*.
    Timestamps outside the range :class:`~datetime.datetime` can
    represent are noted and rendered as the epoch.
    """
    try:
        if isinstance(created, datetime.datetime):
            return created.astimezone(tz)
        return datetime.datetime.fromtimestamp(created, tz=tz)
    except (ValueError, OverflowError, OSError, TypeError) as e:
        note('layout_format', 'got %r converting created time %r', e, created)
    return datetime.datetime.fromtimestamp(0, tz=tz)


class PatternLayout(object):
    """Renders records into bytes according to a pattern of literal text
    and ``%``-prefixed, single-character codes. The pattern is
    compiled once, when set, and reused for every record.

    Args:
        pattern (str): The pattern to use. Defaults to
            :data:`PATTERN_DEFAULT` when empty.

    Known pattern codes are:

      * ``%U`` - Time (15:04:05.000000)
      * ``%T`` - Time (15:04:05)
      * ``%h`` - Hour
      * ``%m`` - Minute
      * ``%Z`` - Zone offset (-07:00, or Z for UTC)
      * ``%z`` - Zone name (MST)
      * ``%D`` - Date (2006/01/02)
      * ``%Y`` - Date (2006-01-02)
      * ``%d`` - Date (02/01/06)
      * ``%L`` - Level (FNST, FINE, DEBG, TRAC, INFO, WARN, EROR, CRIT)
      * ``%l`` - Level ordinal
      * ``%P`` - Prefix
      * ``%S`` - Source
      * ``%s`` - Short source, after the last ``/``
      * ``%N`` - Line number
      * ``%M`` - Message
      * ``%t``, ``%r``, ``%n`` (or ``%R``) - tab, return, newline

    Other codes are ignored, though any text following them is kept.

    >>> from patlayout.record import LogRecord
    >>> layout = PatternLayout(PATTERN_ABBREV)
    >>> layout.format(LogRecord('info', 'hello'))
    b'[INFO] hello\\n'

    Setting options and formatting share a single lock, so a record
    is never rendered with half of a new configuration.
    """
    def __init__(self, pattern=''):
        self._lock = threading.Lock()
        self._template = None
        self._zone = None
        if not pattern:
            pattern = PATTERN_DEFAULT
        self.set('pattern', pattern).set('utc', False)

    def set(self, name, value):
        """Set option *name* to *value* and return the layout, for
        chaining. Errors are noted and discarded. Use
        :meth:`set_option` when they matter.
        """
        try:
            self.set_option(name, value)
        except OptionError as oe:
            note('layout_set', 'discarded %r setting %r on %r',
                 oe, name, self)
        return self

    def set_option(self, name, value):
        """Set option *name* to *value*, raising
        :exc:`~patlayout.common.OptionError` subtypes on failure. A
        failed set leaves the layout unchanged.

        Options:
            pattern: The pattern text (or bytes). ``format`` is an alias.
            utc: Anything :func:`~patlayout.common.to_bool` accepts.
                Render times in UTC instead of local time, and
                recompute the cached zone strings.
        """
        with self._lock:
            if name in ('pattern', 'format'):
                self._template = compile_pattern(value)
            elif name == 'utc':
                self._zone = get_zone_cache(to_bool(value))
            else:
                raise BadOptionError('unrecognized layout option: %r'
                                     % (name,))
        return

    def format(self, record):
        """Render *record* into bytes. A missing record renders as
        :data:`NIL_OUTPUT` and an unrepresentable timestamp as the epoch.
        """
        with self._lock:
            if record is None:
                return NIL_OUTPUT
            tmpl = self._template
            if tmpl is None:
                return b''
            zone = self._zone
            dt = None
            if tmpl.uses_time:
                dt = _get_record_datetime(record.created, zone.tz)

            out = bytearray(tmpl.prefix)
            for writer, tail in tmpl.pieces:
                if writer is not None:
                    writer(out, record, dt, zone)
                if tail:
                    out += tail
            return bytes(out)

    __call__ = format

    @property
    def pattern(self):
        with self._lock:
            return self._template.raw if self._template else b''

    @property
    def utc(self):
        with self._lock:
            return self._zone.utc if self._zone else False

    @property
    def short_zone(self):
        with self._lock:
            return self._zone.short_zone if self._zone else b''

    @property
    def long_zone(self):
        with self._lock:
            return self._zone.long_zone if self._zone else b''

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s pattern=%r utc=%r>' % (cn, self.pattern, self.utc)
