# -*- coding: utf-8 -*-
"""Cheap integer and calendar encoders. Each writes ASCII digits
straight onto the end of a :class:`bytearray`, so a layout can build a
line without any intermediate strings or ``%``-formatting.

The fixed-width encoders do no range checking. Fields outside 0..99
produce out-of-alphabet bytes (each wrapped to 0..255), not an exception.
"""

_ZERO = 0x30  # ord('0')


def itoa(buf, i, wid=0):
    """Append the decimal form of *i* to *buf*, left-padded with zeros to
    *wid* digits. A *wid* of 1 or less means natural width.

    >>> buf = bytearray()
    >>> itoa(buf, 7, 3)
    >>> bytes(buf)
    b'007'
    """
    if i < 0:
        buf.append(0x2d)  # '-'
        i = -i
    # assemble in reverse, then flip
    digits = bytearray()
    while i >= 10 or wid > 1:
        wid -= 1
        i, rem = divmod(i, 10)
        digits.append(_ZERO + rem)
    digits.append(_ZERO + i)
    digits.reverse()
    buf += digits


def format222(buf, hh, mm, ss, sep):
    """Append exactly 8 bytes: three 2-digit fields joined by the *sep*
    byte, e.g., ``15:04:05``.
    """
    buf += bytes([b & 0xFF for b in (_ZERO + hh // 10, _ZERO + hh % 10, sep,
                                     _ZERO + mm // 10, _ZERO + mm % 10, sep,
                                     _ZERO + ss // 10, _ZERO + ss % 10)])


def format_ccyymmdd(buf, cc, yy, mm, dd, sep):
    "Append exactly 10 bytes, e.g., ``2006/01/02``."
    buf += bytes([b & 0xFF for b in (_ZERO + cc // 10, _ZERO + cc % 10,
                                     _ZERO + yy // 10, _ZERO + yy % 10, sep,
                                     _ZERO + mm // 10, _ZERO + mm % 10, sep,
                                     _ZERO + dd // 10, _ZERO + dd % 10)])


def to_bytes(value, encoding='utf-8', errors='backslashreplace'):
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        value = str(value)
    return value.encode(encoding, errors)
