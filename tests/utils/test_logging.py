import re

import geocentric.utils.logging as gc_logging
from geocentric.utils.logging import warn_once


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr(gc_logging, '_WARNINGS', set())

    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1
