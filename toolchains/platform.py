"""
This library provides the model of a build platform; i.e., the operating system
and CPU architecture a toolchain is being provisioned for.
"""
import platform
from enum import Enum
from typing import Dict, Optional

_os_aliases = {
    'linux': 'LINUX',
    'unix': 'UNIX',
    'windows': 'WINDOWS',
    'win': 'WINDOWS',
    'win32': 'WINDOWS',
    'macos': 'MAC_OS',
    'mac': 'MAC_OS',
    'osx': 'MAC_OS',
    'darwin': 'MAC_OS',
    'solaris': 'SOLARIS',
    'sunos': 'SOLARIS',
    'freebsd': 'FREE_BSD',
}
_arch_aliases = {
    'x86': 'X86',
    'i386': 'X86',
    'i486': 'X86',
    'i586': 'X86',
    'i686': 'X86',
    'x86_64': 'X86_64',
    'x64': 'X86_64',
    'amd64': 'X86_64',
    'aarch64': 'AARCH64',
    'arm64': 'AARCH64',
}


def _lookup(enum_class, aliases: Dict[str, str], text: str, what: str):
    key = text.strip().lower().replace('-', '_')
    name = aliases.get(key, key.upper())

    if name not in enum_class.__members__:
        raise ValueError(f'The text, "{text}", is not a known {what}.')

    return enum_class[name]


class OperatingSystem(Enum):
    LINUX = 'Linux'
    UNIX = 'Unix'
    WINDOWS = 'Windows'
    MAC_OS = 'Mac OS X'
    SOLARIS = 'Solaris'
    FREE_BSD = 'FreeBSD'

    @classmethod
    def from_name(cls, text: str) -> 'OperatingSystem':
        """
        A function that turns a user supplied name into an operating system.  Both
        member names and the usual aliases (``macos``, ``darwin``, ``win``, etc.) are
        accepted, without regard to case.

        :param text: the name to convert.
        :return: the matching operating system.
        :raises ValueError: if the name does not refer to a known operating system.
        """
        return _lookup(cls, _os_aliases, text, 'operating system')

    @property
    def display_name(self) -> str:
        return self.value


class Architecture(Enum):
    X86 = 'x86'
    X86_64 = 'x86-64'
    AARCH64 = 'aarch64'

    @classmethod
    def from_name(cls, text: str) -> 'Architecture':
        """
        A function that turns a user supplied name into an architecture.  Both member
        names and the usual aliases (``amd64``, ``x64``, ``arm64``, etc.) are accepted,
        without regard to case.

        :param text: the name to convert.
        :return: the matching architecture.
        :raises ValueError: if the name does not refer to a known architecture.
        """
        return _lookup(cls, _arch_aliases, text, 'architecture')

    @property
    def display_name(self) -> str:
        return self.value


class BuildPlatform(object):
    """
    Instances of this class represent the operating system and architecture pair
    for which a toolchain is requested.  Instances are immutable.
    """
    __slots__ = ('_operating_system', '_architecture')

    @classmethod
    def current(cls, system: Optional[str] = None, machine: Optional[str] = None) -> 'BuildPlatform':
        """
        A function that detects the platform we are currently running on.  The system
        and machine names may be supplied to override what the ``platform`` module
        reports.

        :param system: the system name to use instead of ``platform.system()``.
        :param machine: the machine name to use instead of ``platform.machine()``.
        :return: the current build platform.
        :raises ValueError: if the system or machine cannot be mapped.
        """
        system = system or platform.system()
        machine = machine or platform.machine()

        if not system or not machine:
            raise ValueError('Cannot determine the current platform.')

        return cls(OperatingSystem.from_name(system), Architecture.from_name(machine))

    def __init__(self, operating_system: OperatingSystem, architecture: Architecture):
        object.__setattr__(self, '_operating_system', operating_system)
        object.__setattr__(self, '_architecture', architecture)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} objects are immutable.')

    @property
    def operating_system(self) -> OperatingSystem:
        return self._operating_system

    @property
    def architecture(self) -> Architecture:
        return self._architecture

    def __eq__(self, other):
        if not isinstance(other, BuildPlatform):
            return NotImplemented

        return self._operating_system is other._operating_system and self._architecture is other._architecture

    def __hash__(self):
        return hash((self._operating_system, self._architecture))

    def __str__(self) -> str:
        return f'{self._operating_system.display_name}/{self._architecture.display_name}'

    def __repr__(self) -> str:
        return f'BuildPlatform[os={self._operating_system.name}, arch={self._architecture.name}]'
