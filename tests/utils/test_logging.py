import re

from usngtools import LOGGER
from usngtools.utils.logging import warn_once


def test_logger():
    assert LOGGER.name == 'usngtools'


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text
    assert caplog.records[-1].name == 'usngtools'

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1
