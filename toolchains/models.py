"""
This library provides our core data model: the vendor, version and request values
that describe a desired toolchain and the download that satisfies one.
"""
from enum import Enum
from typing import Optional

from toolchains.platform import BuildPlatform


class KnownJvmVendor(Enum):
    ADOPTIUM = ('adoptium', 'Eclipse Temurin')
    ADOPTOPENJDK = ('adoptopenjdk', 'AdoptOpenJDK')
    AMAZON = ('amazon', 'Amazon Corretto')
    APPLE = ('apple', 'Apple')
    AZUL = ('azul', 'Azul Zulu')
    BELLSOFT = ('bellsoft', 'BellSoft Liberica')
    GRAAL_VM = ('graalvm', 'GraalVM Community')
    HEWLETT_PACKARD = ('hewlett-packard', 'HP-UX')
    IBM = ('ibm', 'IBM')
    JETBRAINS = ('jetbrains', 'JetBrains')
    MICROSOFT = ('microsoft', 'Microsoft')
    ORACLE = ('oracle', 'Oracle')
    SAP = ('sap se', 'SAP SapMachine')
    TENCENT = ('tencent', 'Tencent')

    def __init__(self, indicator: str, display_name: str):
        self.indicator = indicator
        self.display_name = display_name

    @classmethod
    def parse(cls, text: str) -> Optional['KnownJvmVendor']:
        """
        A function that finds the known vendor for the given text.  The text may be
        either the name of the vendor or its indicator string, in any case.

        :param text: the text to look up.
        :return: the matching known vendor or ``None``.
        """
        text = text.strip().lower()

        for vendor in cls:
            if text == vendor.name.lower() or text == vendor.indicator:
                return vendor

        return None


class JvmVendorSpec(object):
    """
    Instances of this class describe which JVM vendor a toolchain request will accept.
    A spec is one of three things: a known vendor, a free-form text match or the
    "any" wildcard, which means the requester did not state a preference.
    """
    __slots__ = ('_known', '_match')

    _any = None

    @classmethod
    def of(cls, vendor: KnownJvmVendor) -> 'JvmVendorSpec':
        return cls(known=vendor)

    @classmethod
    def matching(cls, text: str) -> 'JvmVendorSpec':
        return cls(match=text.strip().lower())

    @classmethod
    def any(cls) -> 'JvmVendorSpec':
        if cls._any is None:
            cls._any = cls()
        return cls._any

    @classmethod
    def parse(cls, text: Optional[str]) -> 'JvmVendorSpec':
        """
        A function that creates a vendor spec from user supplied text.  An empty value
        or ``any`` produces the wildcard.  The name or indicator of a known vendor
        produces a spec for that vendor.  Anything else becomes a matching spec.

        :param text: the text to parse.
        :return: the appropriate vendor spec.
        """
        if text is None or text.strip() == '' or text.strip().lower() == 'any':
            return cls.any()

        vendor = KnownJvmVendor.parse(text)

        return cls.of(vendor) if vendor else cls.matching(text)

    def __init__(self, known: Optional[KnownJvmVendor] = None, match: Optional[str] = None):
        object.__setattr__(self, '_known', known)
        object.__setattr__(self, '_match', match)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} objects are immutable.')

    def matches(self, vendor: str) -> bool:
        """
        A function that reports whether the given vendor string, as reported by a JVM,
        satisfies this spec.

        :param vendor: the vendor text to test.
        :return: ``True`` if the vendor is acceptable or ``False`` if not.
        """
        vendor = vendor.lower()

        if self._known is not None:
            return self._known.indicator in vendor
        if self._match is not None:
            return self._match in vendor

        return True

    def __eq__(self, other):
        if not isinstance(other, JvmVendorSpec):
            return NotImplemented

        return self._known is other._known and self._match == other._match

    def __hash__(self):
        return hash((self._known, self._match))

    def __str__(self) -> str:
        if self._known is not None:
            return self._known.name
        if self._match is not None:
            return f'vendor matching("{self._match}")'
        return 'any vendor'

    def __repr__(self) -> str:
        return f'JvmVendorSpec[{self}]'


class JavaLanguageVersion(object):
    """
    Instances of this class represent the major version of the Java language.
    """
    __slots__ = ('_version',)

    @classmethod
    def of(cls, version: int) -> 'JavaLanguageVersion':
        """
        A function that creates a language version from an integer.

        :param version: the major version number.
        :return: the language version.
        :raises ValueError: if the version is not a positive integer.
        """
        if not isinstance(version, int) or isinstance(version, bool) or version < 1:
            raise ValueError(f'A Java language version must be a positive integer, not {version!r}.')

        return cls(version)

    def __init__(self, version: int):
        object.__setattr__(self, '_version', version)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} objects are immutable.')

    def as_int(self) -> int:
        return self._version

    def __eq__(self, other):
        if not isinstance(other, JavaLanguageVersion):
            return NotImplemented

        return self._version == other._version

    def __hash__(self):
        return hash(self._version)

    def __str__(self) -> str:
        return str(self._version)

    def __repr__(self) -> str:
        return f'JavaLanguageVersion[{self._version}]'


class JavaToolchainSpec(object):
    """
    Instances of this class hold the vendor and language version a build wants.
    """
    def __init__(self, language_version: JavaLanguageVersion, vendor: Optional[JvmVendorSpec] = None):
        self.language_version = language_version
        self.vendor = vendor or JvmVendorSpec.any()

    def __str__(self) -> str:
        return f'{{languageVersion={self.language_version}, vendor={self.vendor}}}'


class JavaToolchainRequest(object):
    """
    Instances of this class represent a single request, made by the host, for a
    toolchain on a particular build platform.
    """
    def __init__(self, java_toolchain_spec: JavaToolchainSpec, build_platform: BuildPlatform):
        self.java_toolchain_spec = java_toolchain_spec
        self.build_platform = build_platform

    def __str__(self) -> str:
        return f'{self.java_toolchain_spec} on {self.build_platform}'


class JavaToolchainDownload(object):
    """
    Instances of this class represent the successful outcome of resolving a toolchain
    request: the location from which the toolchain may be downloaded.
    """
    __slots__ = ('_uri',)

    @classmethod
    def from_uri(cls, uri: str) -> 'JavaToolchainDownload':
        return cls(uri)

    def __init__(self, uri: str):
        object.__setattr__(self, '_uri', uri)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} objects are immutable.')

    @property
    def uri(self) -> str:
        return self._uri

    def __eq__(self, other):
        if not isinstance(other, JavaToolchainDownload):
            return NotImplemented

        return self._uri == other._uri

    def __hash__(self):
        return hash(self._uri)

    def __str__(self) -> str:
        return self._uri

    def __repr__(self) -> str:
        return f'JavaToolchainDownload[{self._uri}]'
