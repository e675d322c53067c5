import logging

from geodistance.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


def test_logging_mixin(caplog):
    foo = Foo()
    assert foo.logger.name == f'{__name__}.Foo'

    foo.logger.warning('test %s', 'test')
    assert 'test test' in caplog.text

    assert Foo('bar').logger.name == f'{__name__}.Foo.bar'


def test_logging_mixin_level(caplog):
    caplog.set_level(logging.DEBUG)
    Foo().logger.debug('debugging')
    assert 'debugging' in caplog.text
