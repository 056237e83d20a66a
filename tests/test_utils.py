"""
This file contains all the unit tests for our framework's utilities support.
"""
# noinspection PyPackageRequirements
import pytest

from toolchains.utils import GlobalOptions, out, verbose_out, labeled_out, warn, end
from tests.test_support import FakeEcho, Options, ExpectedEcho


class TestGlobalOptions(object):
    def test_quiet(self):
        options = GlobalOptions()

        assert options.quiet() is False

        options.set_quiet(True)

        assert options.quiet() is True

    def test_verbose(self):
        options = GlobalOptions()

        assert options.verbose() == 0

        options.set_verbose(2)

        assert options.verbose() == 2

    def test_fluency(self):
        options = GlobalOptions()

        assert options.set_quiet(True).set_verbose(1) is options


class TestOutput(object):
    def test_out(self):
        with Options(quiet=False):
            with FakeEcho.simple('Hello', fg='white'):
                out('Hello', fg='white')

    def test_out_quiet(self):
        with Options(quiet=True):
            with FakeEcho() as echo:
                out('Hello')

                assert not echo.was_called()

            with FakeEcho.simple('Hello'):
                out('Hello', respect_quiet=False)

    def test_verbose_out(self):
        with Options(verbose=0):
            with FakeEcho() as echo:
                verbose_out('Hello')

                assert not echo.was_called()

        with Options(verbose=1):
            with FakeEcho.simple('Hello', fg='green'):
                verbose_out('Hello')

            with FakeEcho.simple('Hello', fg='yellow'):
                verbose_out('Hello', fg='yellow')

    def test_labeled_out(self):
        with Options(quiet=False):
            with FakeEcho.simple('Note: Hello'):
                labeled_out('Hello', 'Note')

            with FakeEcho.simple('Hello'):
                labeled_out('Hello')

    def test_warn(self):
        with Options(quiet=True):
            with FakeEcho.simple('Warning: Careful', fg='yellow'):
                warn('Careful')

    def test_end(self):
        expected = [
            ExpectedEcho('ERROR: line 1', fg='bright_red'),
            ExpectedEcho('ERROR: line 2', fg='bright_red')
        ]

        with FakeEcho(expected):
            with pytest.raises(SystemExit) as info:
                end('line 1', 'line 2')

        assert info.value.code == 1

    def test_end_with_rc(self):
        with FakeEcho.simple('Oops: bad', fg='bright_red'):
            with pytest.raises(SystemExit) as info:
                end('bad', label='Oops', rc=3)

        assert info.value.code == 3
