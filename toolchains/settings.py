"""
This library provides an object that represents the toolchain settings for a run.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from toolchains.models import JavaLanguageVersion, JvmVendorSpec
from toolchains.plugin import get_plugin
from toolchains.registry import JavaToolchainResolverRegistry, ToolchainManagement
from toolchains.schema import ArraySchema, IntegerSchema, ObjectSchema, StringSchema
from toolchains.schema_validator import SchemaValidator

SETTINGS_FILE_NAME = 'toolchains.yaml'
DEFAULT_PLUGINS = ['corretto']

_schema = ObjectSchema() \
    .properties(
        plugins=ArraySchema()
            .items(StringSchema().pattern(r'^[a-z_][a-z0-9_]*$'))
            .unique_items(True),
        toolchain=ObjectSchema()
            .properties(
                vendor=StringSchema().min_length(1),
                version=IntegerSchema().minimum(1)
            )
            .additional_properties(False),
        repositories=ObjectSchema()
            .additional_properties(StringSchema().min_length(1))
    )\
    .additional_properties(False)
_settings_file_schema = SchemaValidator(schema=_schema)


class Settings(object):
    """
    Instances of this class represent the toolchain settings in force.  They own the
    resolver registry and the toolchain management configuration that plugins add to.
    """
    @classmethod
    def from_file(cls, path: Path) -> 'Settings':
        """
        This class function creates a settings object by reading and validating a
        ``toolchains.yaml`` file.

        :param path: the path to the settings file to read.
        :return: the resulting settings object.
        :raises ValueError: if the settings file cannot be read or validated.
        """
        try:
            with path.open(encoding='utf-8') as fd:
                content = yaml.safe_load(fd)
        except (yaml.YAMLError, UnicodeDecodeError) as error:
            raise ValueError(f'Bad settings file format: {error}')
        if content is None:
            content = {}
        if not _settings_file_schema.validate(content):
            raise ValueError(f'Bad settings file format: {_settings_file_schema.error}')
        return cls(path.parent, content)

    @classmethod
    def from_dir(cls, path: Path) -> 'Settings':
        """
        This class function creates a settings object with default content.

        :param path: the directory the settings belong to.
        :return: the resulting settings object.
        """
        return cls(path, {})

    def __init__(self, directory: Path, content: Dict[str, Any]):
        """
        A function to create an instance of the ``Settings`` class.  Use either the
        ``Settings.from_file()`` or ``Settings.from_dir()`` functions to create instances;
        do not use this function directly.
        """
        self._directory = directory
        self._content = content
        self._toolchain = content.get('toolchain', {})
        self.toolchain_resolver_registry = JavaToolchainResolverRegistry()
        self.toolchain_management = ToolchainManagement(self.toolchain_resolver_registry)
        self._plugins = content.get('plugins', DEFAULT_PLUGINS)

        self._apply_plugins()
        self._add_repositories(content.get('repositories', {}))

    def _apply_plugins(self):
        """
        This function loads and applies each configured plugin, in order.  If any plugin
        cannot be loaded, none are applied.
        """
        plugins = {name: get_plugin(name) for name in self._plugins}
        unknowns = [name for name, plugin in plugins.items() if plugin is None]

        if unknowns:
            raise ValueError(f'Unknown plugin(s) specified in {SETTINGS_FILE_NAME}: {", ".join(unknowns)}')

        for plugin in plugins.values():
            plugin.apply(self)

    def _add_repositories(self, repositories: Dict[str, str]):
        """
        This function adds the repositories named in the settings file.  Each one refers
        to a resolver, by name, that a plugin has registered.

        :param repositories: the map of repository names to resolver names.
        """
        for name, resolver_name in repositories.items():
            resolver_class = self.toolchain_resolver_registry.get(resolver_name)

            if resolver_class is None:
                known = ', '.join(self.toolchain_resolver_registry.resolver_names()) or 'none'
                raise ValueError(f'The "{name}" repository refers to an unknown resolver, "{resolver_name}".  '
                                 f'Known resolvers: {known}.')

            self.toolchain_management.repository(name, resolver_class)

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def plugins(self) -> List[str]:
        return list(self._plugins)

    @property
    def default_vendor(self) -> JvmVendorSpec:
        """
        A read-only property that returns the vendor spec from the ``toolchain`` section
        of the settings.  When none is configured, the "any" vendor is returned.

        :return: the default vendor spec.
        """
        return JvmVendorSpec.parse(self._toolchain.get('vendor'))

    @property
    def default_version(self) -> Optional[JavaLanguageVersion]:
        """
        A read-only property that returns the language version from the ``toolchain``
        section of the settings, if there is one.

        :return: the default language version or ``None``.
        """
        version = self._toolchain.get('version')

        return None if version is None else JavaLanguageVersion.of(version)


def get_settings(directory: Path) -> Settings:
    """
    A function to create a ``Settings`` object for a directory.  If the directory
    contains a ``toolchains.yaml`` file, it is read as the source of the settings.
    Otherwise, default settings are created.

    :param directory: the directory to create the settings object for.
    :return: the appropriately initialized settings object.
    """
    settings_file_path = directory / SETTINGS_FILE_NAME

    return Settings.from_file(settings_file_path)\
        if settings_file_path.exists()\
        else Settings.from_dir(directory)
