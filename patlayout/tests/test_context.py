# -*- coding: utf-8 -*-

from patlayout.context import LayoutContext, get_context, set_context, note


def test_note_handlers():
    ctx = LayoutContext()
    notes = []

    ctx.note('quiet', 'no handlers, %s', 'no problem')

    ctx.note_handlers.append(lambda name, message: notes.append((name, message)))
    ctx.note('fmt', 'got %r on %s', ValueError('x'), 'set')
    ctx.note('badfmt', 'only %s and %s', 'one')

    assert notes[0] == ('fmt', "got ValueError('x') on set")
    assert notes[1] == ('badfmt', 'only %s and %s')
    assert 'note_handlers' in repr(ctx)


def test_module_note_uses_current_context():
    prev_ctx = get_context()
    notes = []
    set_context(LayoutContext([lambda name, message: notes.append(name)]))
    try:
        note('module_level', 'hello')
    finally:
        set_context(prev_ctx)
    assert notes == ['module_level']
    assert get_context() is prev_ctx
