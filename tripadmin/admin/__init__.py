"""
Declarative admin panel: resources describe forms, infolists and tables, and
the generic pages and router serve every resource the same way.
"""

from .registry import ResourceRegistry, default_registry
from .resource import Resource

__all__ = ["Resource", "ResourceRegistry", "default_registry"]
