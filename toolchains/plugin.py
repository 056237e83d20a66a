"""
This library provides support around loading toolchain plugins.  A plugin is a module
in the ``toolchains`` package that exposes a ``define_plugin(settings)`` function.
"""
import importlib
from typing import Any, Callable, Optional

from toolchains.utils import warn

_import_module = importlib.import_module
ModuleImporter = Callable[[str], Any]


class Plugin(object):
    def __init__(self, module, name: str):
        self.name = name
        self._define = getattr(module, 'define_plugin', None)

        if self._define is None:
            raise ValueError(f'The "{name}" plugin does not provide a define_plugin() function.')

    # noinspection PyUnresolvedReferences
    def apply(self, settings: 'Settings'):
        """
        A function that applies this plugin to the given settings, letting it register
        resolvers and add repositories.

        :param settings: the settings to apply the plugin to.
        """
        self._define(settings)


def get_plugin(name: str) -> Optional[Plugin]:
    """
    A function for loading a plugin by name.  A plugin that cannot be found isn't
    considered fatal here; a warning is printed and ``None`` is returned so the caller
    can report every missing plugin at once.

    :param name: the name of the plugin to load.
    :return: the loaded plugin or ``None``.
    """
    try:
        return Plugin(_import_module(f'toolchains.{name}'), name)
    except ModuleNotFoundError as exception:
        warn(f'Exception loading plugin {name}: {str(exception)}')
        return None


def set_module_import(importer: Optional[ModuleImporter] = None):
    global _import_module
    _import_module = importer or importlib.import_module
