# -*- coding: utf-8 -*-

import sys
import time

from boltons.tbutils import Callpoint

from patlayout.common import get_level


class LogRecord(object):
    """The ``LogRecord`` is the read-only input to a layout. It carries
    everything a pattern code can ask for.

    Args:
        level: A :class:`~patlayout.common.Level`, level name, or
            ordinal. Normalized through
            :func:`~patlayout.common.get_level`.
        message (str): The already-formatted log message.
        source (str): Source location, usually a file path.
        line (int): Line number within *source*.
        prefix (str): Free text set by the logger, often its name.
        created (float): POSIX timestamp. Defaults to the current time.

    >>> rec = LogRecord('info', 'hello', source='app/main.py', line=12)
    >>> rec.level.short_name
    'INFO'
    """
    def __init__(self, level, message, source='', line=0, prefix='',
                 created=None):
        self.level = get_level(level)
        self.message = message
        self.source = source
        self.line = line
        self.prefix = prefix
        self.created = time.time() if created is None else created

    @classmethod
    def from_frame(cls, level, message, frame=None, **kwargs):
        "Create a LogRecord whose source and line point at *frame*."
        if frame is None:
            frame = sys._getframe(1)
        callpoint = Callpoint.from_frame(frame)
        kwargs.setdefault('source', callpoint.module_path or '')
        kwargs.setdefault('line', callpoint.lineno)
        return cls(level, message, **kwargs)

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s %s %r %s:%s>'
                % (cn, self.level.short_name, self.message,
                   self.source, self.line))
