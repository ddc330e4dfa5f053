# -*- coding: utf-8 -*-

PATLAYOUT_CONTEXT = None


def get_context():
    if not PATLAYOUT_CONTEXT:
        set_context(LayoutContext())

    return PATLAYOUT_CONTEXT


def set_context(context):
    global PATLAYOUT_CONTEXT

    PATLAYOUT_CONTEXT = context

    return context


def note(name, message, *a, **kw):
    return get_context().note(name, message, *a, **kw)


class LayoutContext(object):
    def __init__(self, note_handlers=None):
        self.note_handlers = list(note_handlers or [])

    def note(self, name, message, *a, **kw):
        """A layout sits underneath the logging system, so it can't log
        through it. This is a hook for recording the error conditions
        that need to be robustly ignored, such as an option error
        discarded by a chained :meth:`~patlayout.layout.PatternLayout.set`.
        """
        if not self.note_handlers:
            return
        if a:
            try:
                message = message % a
            except Exception:
                pass
        for nh in self.note_handlers:
            nh(name, message)
        return

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s note_handlers=%r>' % (cn, self.note_handlers)
