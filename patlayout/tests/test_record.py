# -*- coding: utf-8 -*-

import time

from patlayout.common import INFO, CRITICAL, DEFAULT_LEVEL
from patlayout.record import LogRecord


def make_record():
    return LogRecord.from_frame('critical', 'made here', prefix='rec_test')


def test_record_defaults():
    before = time.time()
    rec = LogRecord('info', 'hello')
    assert rec.level is INFO
    assert rec.source == ''
    assert rec.line == 0
    assert rec.prefix == ''
    assert before <= rec.created <= time.time()
    assert 'hello' in repr(rec)


def test_record_level_normalization():
    assert LogRecord(7, 'x').level is CRITICAL
    assert LogRecord('CRIT', 'x').level is CRITICAL
    assert LogRecord(None, 'x').level is DEFAULT_LEVEL


def test_record_created_passthrough():
    assert LogRecord('info', 'x', created=0.0).created == 0.0


def test_record_from_frame():
    rec = make_record()
    assert rec.level is CRITICAL
    assert rec.prefix == 'rec_test'
    assert rec.source.endswith('test_record.py')
    assert rec.line > 0

    rec = LogRecord.from_frame('info', 'explicit', source='x.py', line=3)
    assert (rec.source, rec.line) == ('x.py', 3)
