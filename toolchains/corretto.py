"""
This plugin makes Amazon Corretto JDKs available as toolchains.
"""
from toolchains.resolver import AmazonCorrettoJavaToolchainResolver


# noinspection PyUnresolvedReferences
def define_plugin(settings: 'Settings'):
    settings.toolchain_resolver_registry.register(AmazonCorrettoJavaToolchainResolver)
    settings.toolchain_management.repository('default', AmazonCorrettoJavaToolchainResolver)
