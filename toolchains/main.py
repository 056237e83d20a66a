from pathlib import Path

import click

from toolchains import VERSION
from toolchains.models import JavaLanguageVersion, JavaToolchainRequest, JavaToolchainSpec, JvmVendorSpec
from toolchains.platform import Architecture, BuildPlatform, OperatingSystem
from toolchains.resolver import AmazonCorrettoJavaToolchainResolver
from toolchains.settings import Settings, get_settings
from toolchains.utils import global_options, end, out, verbose_out


def _build_request(settings: Settings, vendor, java_version, os_name, arch) -> JavaToolchainRequest:
    """
    A function that builds the toolchain request from the command line options, falling
    back to the settings and, for the platform, to the machine we are running on.

    :raises ValueError: if a value cannot be understood or the version is missing.
    """
    vendor_spec = JvmVendorSpec.parse(vendor) if vendor else settings.default_vendor
    language_version = JavaLanguageVersion.of(java_version) if java_version else settings.default_version

    if language_version is None:
        raise ValueError('No Java version specified with --java-version or in the settings file.')

    current = None if os_name and arch else BuildPlatform.current()
    operating_system = OperatingSystem.from_name(os_name) if os_name else current.operating_system
    architecture = Architecture.from_name(arch) if arch else current.architecture

    return JavaToolchainRequest(
        JavaToolchainSpec(language_version, vendor_spec), BuildPlatform(operating_system, architecture)
    )


def _list_repositories(settings: Settings):
    out('Repositories:', respect_quiet=False, fg='bright_white')
    for repository in settings.toolchain_management.repositories:
        resolver_class = repository.resolver_class
        repository_name = click.style(repository.name, fg='bright_green')
        resolver_name = click.style(f'{resolver_class.name} ({resolver_class.__name__})', fg='green')
        out(f'    {repository_name} -- {resolver_name}', respect_quiet=False)


@click.command()
@click.option('--quiet', '-q', is_flag=True, help='Suppress normal output.')
@click.option('--verbose', '-v', count=True, help='Produce verbose output.  Repeat for more verbosity.')
@click.option('--directory', '-d',
              type=click.Path(exists=True, dir_okay=True, file_okay=False, allow_dash=False, resolve_path=True),
              help='Specify the directory holding the toolchains.yaml file.  The current directory is used when '
                   'this is not specified.')
@click.option('--vendor', '-e', metavar='<vendor>',
              help='The JDK vendor to resolve for.  Use "any" for no preference.  Defaults to the settings file, '
                   'then to "any".')
@click.option('--java-version', '-j', type=click.IntRange(min=1), metavar='<major>',
              help='The major Java language version to resolve for.  Defaults to the settings file.')
@click.option('--os', '-o', 'os_name', metavar='<os>',
              help='The operating system to resolve for.  Defaults to the current one.')
@click.option('--arch', '-a', metavar='<arch>',
              help='The CPU architecture to resolve for.  Defaults to the current one.')
@click.option('--list', '-l', 'list_repositories', is_flag=True, help='List the configured repositories and exit.')
@click.version_option(version=VERSION, help="Show the version of toolchains and exit.")
def cli(quiet, verbose, directory, vendor, java_version, os_name, arch, list_repositories):
    """
    Use this tool to find where a Java toolchain can be downloaded from.

    The request is resolved against each configured repository in turn and the
    download URI of the first one that can service it is printed.
    """
    global_options.\
        set_quiet(quiet).\
        set_verbose(verbose)

    try:
        settings = get_settings(Path(directory) if directory else Path.cwd())

        if list_repositories:
            _list_repositories(settings)
            return

        request = _build_request(settings, vendor, java_version, os_name, arch)
    except ValueError as error:
        end(error.args[0])

    verbose_out(f'Resolving {request}.')

    result = settings.toolchain_management.resolve(request)

    if result is None:
        end(f'No repository can provide a toolchain for {request}.')

    repository, download = result

    if repository.resolver_class is AmazonCorrettoJavaToolchainResolver and \
            request.build_platform.operating_system is OperatingSystem.LINUX:
        verbose_out('Assuming an Alpine Linux (musl) JDK since the libc in use cannot be detected.', fg='yellow')

    out(download.uri, respect_quiet=False)
