"""
This file contains all the unit tests for our toolchain management support.
"""
from typing import Optional

# noinspection PyPackageRequirements
import pytest

from toolchains.models import JavaToolchainDownload, JavaToolchainRequest, JvmVendorSpec, KnownJvmVendor
from toolchains.platform import OperatingSystem
from toolchains.registry import JavaToolchainResolverRegistry, ToolchainManagement, JavaToolchainRepository
from toolchains.resolver import AmazonCorrettoJavaToolchainResolver, JavaToolchainResolver
from tests.test_support import make_request, FakeEcho, ExpectedEcho, Options


class SolarisResolver(JavaToolchainResolver):
    name = 'solaris'

    def resolve(self, request: JavaToolchainRequest) -> Optional[JavaToolchainDownload]:
        if request.build_platform.operating_system is OperatingSystem.SOLARIS:
            return JavaToolchainDownload.from_uri('https://example.com/solaris-jdk.tar.gz')
        return None


class EverythingResolver(JavaToolchainResolver):
    name = 'everything'

    def resolve(self, request: JavaToolchainRequest) -> Optional[JavaToolchainDownload]:
        return JavaToolchainDownload.from_uri(f'https://example.com/jdk-{request.java_toolchain_spec.language_version}')


class ImposterResolver(JavaToolchainResolver):
    name = 'corretto'

    def resolve(self, request: JavaToolchainRequest) -> Optional[JavaToolchainDownload]:
        return None


class NamelessResolver(JavaToolchainResolver):
    def resolve(self, request: JavaToolchainRequest) -> Optional[JavaToolchainDownload]:
        return None


def _management(*resolver_classes) -> ToolchainManagement:
    registry = JavaToolchainResolverRegistry()

    for resolver_class in resolver_classes:
        registry.register(resolver_class)

    return ToolchainManagement(registry)


class TestJavaToolchainResolverRegistry(object):
    def test_register(self):
        registry = JavaToolchainResolverRegistry()

        assert registry.resolver_names() == []
        assert registry.get('corretto') is None

        registry.register(AmazonCorrettoJavaToolchainResolver)
        registry.register(SolarisResolver)

        assert registry.resolver_names() == ['corretto', 'solaris']
        assert registry.get('corretto') is AmazonCorrettoJavaToolchainResolver
        assert registry.is_registered(SolarisResolver)
        assert not registry.is_registered(EverythingResolver)

    def test_register_twice_is_harmless(self):
        registry = JavaToolchainResolverRegistry()

        registry.register(AmazonCorrettoJavaToolchainResolver)
        registry.register(AmazonCorrettoJavaToolchainResolver)

        assert registry.resolver_names() == ['corretto']

    def test_name_clash(self):
        registry = JavaToolchainResolverRegistry()

        registry.register(AmazonCorrettoJavaToolchainResolver)

        with pytest.raises(ValueError) as info:
            registry.register(ImposterResolver)

        assert info.value.args[0] == 'A different resolver is already registered with the name, "corretto".'
        assert not registry.is_registered(ImposterResolver)

    def test_no_name(self):
        registry = JavaToolchainResolverRegistry()

        with pytest.raises(ValueError) as info:
            registry.register(NamelessResolver)

        assert info.value.args[0] == 'The resolver class, NamelessResolver, does not have a name.'


class TestJavaToolchainRepository(object):
    def test_resolver_is_created_once(self):
        repository = JavaToolchainRepository('default', AmazonCorrettoJavaToolchainResolver)
        resolver = repository.resolver

        assert isinstance(resolver, AmazonCorrettoJavaToolchainResolver)
        assert repository.resolver is resolver
        assert str(repository) == 'default (corretto)'


class TestToolchainManagement(object):
    def test_unregistered_resolver(self):
        management = _management(AmazonCorrettoJavaToolchainResolver)

        with pytest.raises(ValueError) as info:
            management.repository('other', SolarisResolver)

        assert info.value.args[0] == 'The resolver for the "other" repository, SolarisResolver, has not been ' \
                                     'registered.'
        assert management.repositories == []

    def test_repository_order_and_replacement(self):
        management = _management(AmazonCorrettoJavaToolchainResolver, SolarisResolver)

        management.repository('default', AmazonCorrettoJavaToolchainResolver)
        management.repository('solaris', SolarisResolver)
        management.repository('default', SolarisResolver)

        assert [repository.name for repository in management.repositories] == ['default', 'solaris']
        assert management.get_repository('default').resolver_class is SolarisResolver
        assert management.get_repository('missing') is None

    def test_first_match_wins(self):
        management = _management(AmazonCorrettoJavaToolchainResolver, EverythingResolver)

        management.repository('default', AmazonCorrettoJavaToolchainResolver)
        management.repository('fallback', EverythingResolver)

        repository, download = management.resolve(make_request(version=17))

        assert repository.name == 'default'
        assert download.uri == 'https://corretto.aws/downloads/latest/amazon-corretto-17-x64-alpine-jdk.tar.gz'

    def test_declined_requests_fall_through(self):
        management = _management(AmazonCorrettoJavaToolchainResolver, SolarisResolver)

        management.repository('default', AmazonCorrettoJavaToolchainResolver)
        management.repository('solaris', SolarisResolver)

        repository, download = management.resolve(make_request(operating_system=OperatingSystem.SOLARIS))

        assert repository.name == 'solaris'
        assert download.uri == 'https://example.com/solaris-jdk.tar.gz'

    def test_nothing_resolves(self):
        management = _management(AmazonCorrettoJavaToolchainResolver)

        management.repository('default', AmazonCorrettoJavaToolchainResolver)

        assert management.resolve(make_request(vendor=JvmVendorSpec.of(KnownJvmVendor.ORACLE))) is None

    def test_no_repositories(self):
        assert _management().resolve(make_request()) is None

    def test_verbose_output(self):
        management = _management(AmazonCorrettoJavaToolchainResolver, EverythingResolver)

        management.repository('default', AmazonCorrettoJavaToolchainResolver)
        management.repository('fallback', EverythingResolver)
        request = make_request(vendor=JvmVendorSpec.of(KnownJvmVendor.AZUL))
        expected = [
            ExpectedEcho(r'^Repository default \(corretto\) cannot resolve ', fg='green'),
            ExpectedEcho(r'^Repository fallback \(everything\) resolved ', fg='green')
        ]

        with Options(verbose=1):
            with FakeEcho(expected):
                management.resolve(request)

    def test_quiet_when_not_verbose(self):
        management = _management(AmazonCorrettoJavaToolchainResolver)

        management.repository('default', AmazonCorrettoJavaToolchainResolver)

        with Options(verbose=0):
            with FakeEcho() as echo:
                management.resolve(make_request())

                assert not echo.was_called()
