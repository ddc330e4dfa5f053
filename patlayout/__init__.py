# -*- coding: utf-8 -*-

from patlayout.context import get_context, set_context

from patlayout.common import (Level,
                              FINEST, FINE, DEBUG, TRACE,
                              INFO, WARNING, ERROR, CRITICAL,
                              OptionError, BadOptionError,
                              BadValueError, BoolCoercionError,
                              get_level, level_string, to_bool)
from patlayout.record import LogRecord
from patlayout.layout import (PatternLayout,
                              PATTERN_DEFAULT,
                              PATTERN_SHORT,
                              PATTERN_ABBREV,
                              PATTERN_JSON,
                              NIL_OUTPUT)
