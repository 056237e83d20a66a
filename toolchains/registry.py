"""
This library provides the toolchain management side of things: the registry of
known resolver classes and the ordered set of repositories that are consulted
when a toolchain is requested.
"""
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple, Type

from toolchains.models import JavaToolchainDownload, JavaToolchainRequest
from toolchains.resolver import JavaToolchainResolver
from toolchains.utils import verbose_out

ResolverClass = Type[JavaToolchainResolver]


class JavaToolchainResolverRegistry(object):
    """
    Instances of this class hold the resolver classes that plugins have made
    available.  A resolver must be registered before a repository may use it.
    """
    def __init__(self):
        self._resolvers: Dict[str, ResolverClass] = OrderedDict()

    def register(self, resolver_class: ResolverClass):
        """
        A function that registers a resolver class under its name.  Registering the
        same class twice is harmless.

        :param resolver_class: the resolver class to register.
        :raises ValueError: if the class has no name or a different class already
        carries the same name.
        """
        name = resolver_class.name

        if not name:
            raise ValueError(f'The resolver class, {resolver_class.__name__}, does not have a name.')

        existing = self._resolvers.get(name)

        if existing is not None and existing is not resolver_class:
            raise ValueError(f'A different resolver is already registered with the name, "{name}".')

        self._resolvers[name] = resolver_class

    def get(self, name: str) -> Optional[ResolverClass]:
        return self._resolvers.get(name)

    def is_registered(self, resolver_class: ResolverClass) -> bool:
        return self._resolvers.get(resolver_class.name) is resolver_class

    def resolver_names(self) -> Sequence[str]:
        return list(self._resolvers.keys())


class JavaToolchainRepository(object):
    """
    Instances of this class represent a named toolchain repository backed by a
    resolver.
    """
    def __init__(self, name: str, resolver_class: ResolverClass):
        self.name = name
        self.resolver_class = resolver_class
        self._resolver = None

    @property
    def resolver(self) -> JavaToolchainResolver:
        if self._resolver is None:
            self._resolver = self.resolver_class()
        return self._resolver

    def __str__(self) -> str:
        return f'{self.name} ({self.resolver_class.name})'


class ToolchainManagement(object):
    """
    Instances of this class hold the repositories that are asked, in the order
    they were added, to resolve toolchain requests.
    """
    def __init__(self, registry: JavaToolchainResolverRegistry):
        """
        A function that creates instances of the ``ToolchainManagement`` class.

        :param registry: the registry that repository resolvers must belong to.
        """
        self._registry = registry
        self._repositories: Dict[str, JavaToolchainRepository] = OrderedDict()

    def repository(self, name: str, resolver_class: ResolverClass) -> JavaToolchainRepository:
        """
        A function that adds a named repository backed by the given resolver class.
        If a repository with the same name already exists, it is replaced in place.

        :param name: the name of the repository.
        :param resolver_class: the class of the resolver the repository uses.
        :return: the new repository.
        :raises ValueError: if the resolver class has not been registered.
        """
        if not self._registry.is_registered(resolver_class):
            raise ValueError(f'The resolver for the "{name}" repository, {resolver_class.__name__}, has not been '
                             f'registered.')

        repository = JavaToolchainRepository(name, resolver_class)
        self._repositories[name] = repository

        return repository

    def get_repository(self, name: str) -> Optional[JavaToolchainRepository]:
        return self._repositories.get(name)

    @property
    def repositories(self) -> List[JavaToolchainRepository]:
        return list(self._repositories.values())

    def resolve(self, request: JavaToolchainRequest) \
            -> Optional[Tuple[JavaToolchainRepository, JavaToolchainDownload]]:
        """
        A function that asks each repository in turn to resolve the given request.
        The first download produced wins.

        :param request: the toolchain request to resolve.
        :return: the repository that resolved the request along with the download or
        ``None`` if no repository could.
        """
        for repository in self._repositories.values():
            download = repository.resolver.resolve(request)

            if download is not None:
                verbose_out(f'Repository {repository} resolved {request}.')
                return repository, download

            verbose_out(f'Repository {repository} cannot resolve {request}.')

        return None
