"""
This library provides the console output support shared by the rest of the tool.
"""
import sys
from typing import Any, Callable, Optional

import click

# Types for function references.
Echo = Callable[[str, Any], None]

# Replaceable so that tests can capture output.
_echo = click.secho


class GlobalOptions(object):
    """
    A class that holds the command line options that govern output for the current
    run.
    """
    def __init__(self):
        self._quiet = False
        self._verbose = 0

    def set_quiet(self, value: bool) -> 'GlobalOptions':
        """
        This function records whether normal output should be suppressed.

        :param value: ``True`` to suppress normal output.
        :return: this object, for fluency.
        """
        self._quiet = value
        return self

    def set_verbose(self, value: int) -> 'GlobalOptions':
        """
        This function records how many times the verbose option was given.

        :param value: the verbosity level.  Zero means no extra output.
        :return: this object, for fluency.
        """
        self._verbose = value
        return self

    def quiet(self) -> bool:
        return self._quiet

    def verbose(self) -> int:
        return self._verbose


def out(text: str = '', respect_quiet: bool = True, **kwargs):
    """
    This function writes a line through ``click.secho`` unless the user asked for quiet
    operation.

    :param text: the line to write.
    :param respect_quiet: when ``False``, the line is written even in quiet mode.
    """
    if not (global_options.quiet() and respect_quiet):
        _echo(text, **kwargs)


def verbose_out(text, **kwargs):
    """
    This function writes a line, green unless told otherwise, only when verbose output
    was requested.

    :param text: the line to write.
    """
    if global_options.verbose() > 0:
        kwargs.setdefault('fg', 'green')
        _echo(text, **kwargs)


def labeled_out(text, label: Optional[str] = None, respect_quiet: bool = True, **kwargs):
    """
    This function writes a line with an optional ``label: `` prefix.

    :param text: the line to write.
    :param label: the label, if any, to put in front of the text.
    :param respect_quiet: when ``False``, the line is written even in quiet mode.
    """
    if label:
        text = f'{label}: {text}'
    out(text, respect_quiet, **kwargs)


def warn(text, label: Optional[str] = 'Warning'):
    """
    This function writes a yellow warning line.  Warnings ignore quiet mode.

    :param text: the warning to write.
    :param label: the label to put in front of the text.
    """
    labeled_out(text, label, respect_quiet=False, fg='yellow')


def end(*args, label: str = 'ERROR', rc=1):
    """
    This function reports each of the given lines as an error and then exits.

    :param args: the lines to write.
    :param label: the label to put in front of each line.
    :param rc: the exit status.
    """
    for line in args:
        labeled_out(line, label, respect_quiet=False, fg='bright_red')
    sys.exit(rc)


def set_echo(echo: Optional[Echo] = None):
    global _echo
    _echo = echo or click.secho


global_options = GlobalOptions()
