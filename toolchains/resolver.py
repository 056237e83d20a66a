"""
This library provides the toolchain resolver support: the interface a resolver
implements and the resolver for Amazon Corretto JDKs.
"""
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Optional

from toolchains.models import JavaToolchainDownload, JavaToolchainRequest, JvmVendorSpec, KnownJvmVendor
from toolchains.platform import Architecture, OperatingSystem

_download_url = 'https://corretto.aws/downloads/latest/amazon-corretto-{version}-{arch}-{os}-jdk.{ext}'
_supported_vendors = (
    JvmVendorSpec.of(KnownJvmVendor.AMAZON),
    JvmVendorSpec.any(),
)

ARCHITECTURE_LABELS = MappingProxyType({
    Architecture.X86_64: 'x64',
    Architecture.AARCH64: 'aarch64',
})
# The resolver cannot tell which libc a Linux machine uses, so Linux always means
# the Alpine (musl) build.
OPERATING_SYSTEM_LABELS = MappingProxyType({
    OperatingSystem.LINUX: 'alpine',
    OperatingSystem.WINDOWS: 'windows',
    OperatingSystem.MAC_OS: 'macos',
})
ARCHIVE_EXTENSIONS = MappingProxyType({
    OperatingSystem.WINDOWS: 'zip',
    OperatingSystem.LINUX: 'tar.gz',
    OperatingSystem.MAC_OS: 'tar.gz',
})


class JavaToolchainResolver(ABC):
    """
    This is the interface every toolchain resolver implements.  A resolver either
    produces a download for a request or returns ``None`` to say it declines the
    request; declining is not an error since other resolvers may still succeed.
    Resolvers are known to the registry by their ``name``.
    """
    name: str = None

    @abstractmethod
    def resolve(self, request: JavaToolchainRequest) -> Optional[JavaToolchainDownload]:
        raise NotImplementedError()


class AmazonCorrettoJavaToolchainResolver(JavaToolchainResolver):
    """
    A toolchain resolver for Amazon Corretto JDKs.  Only the Amazon vendor (or no
    vendor preference at all) is served; requests for any other vendor, or for a
    platform Corretto does not ship, are declined.
    """
    name = 'corretto'

    def resolve(self, request: JavaToolchainRequest) -> Optional[JavaToolchainDownload]:
        """
        A function that maps a toolchain request to the download URI of the latest
        Corretto build of the requested major version.  No I/O is performed.

        :param request: the toolchain request to resolve.
        :return: the download for the request or ``None`` if it is unsupported.
        """
        spec = request.java_toolchain_spec
        build_platform = request.build_platform

        if spec.vendor not in _supported_vendors:
            return None

        architecture = ARCHITECTURE_LABELS.get(build_platform.architecture)

        if architecture is None:
            return None

        operating_system = OPERATING_SYSTEM_LABELS.get(build_platform.operating_system)

        if operating_system is None:
            return None

        extension = ARCHIVE_EXTENSIONS[build_platform.operating_system]
        uri = _download_url.format(
            version=spec.language_version.as_int(), arch=architecture, os=operating_system, ext=extension
        )

        return JavaToolchainDownload.from_uri(uri)
