"""Registry of admin resources keyed by URL slug."""

import logging
from typing import Dict, Iterable, List, Optional

from tripadmin.admin.resource import Resource
from tripadmin.admin.resources import RESOURCES
from tripadmin.core.exceptions import UnknownResourceError

logger = logging.getLogger(__name__)


class ResourceRegistry:
    def __init__(self, resources: Optional[Iterable[Resource]] = None):
        self._resources: Dict[str, Resource] = {}
        for resource in resources or ():
            self.register(resource)

    def register(self, resource: Resource) -> Resource:
        if resource.slug in self._resources:
            raise ValueError(f"Admin resource '{resource.slug}' is already registered")
        self._resources[resource.slug] = resource
        logger.debug(f"Registered admin resource {resource.slug}")
        return resource

    def get(self, slug: str) -> Resource:
        try:
            return self._resources[slug]
        except KeyError:
            raise UnknownResourceError(slug) from None

    def all(self) -> List[Resource]:
        return list(self._resources.values())

    def __contains__(self, slug: str) -> bool:
        return slug in self._resources

    def __len__(self) -> int:
        return len(self._resources)


def build_default_registry() -> ResourceRegistry:
    return ResourceRegistry(resource_class() for resource_class in RESOURCES)


default_registry = build_default_registry()
