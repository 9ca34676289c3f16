"""Help system: per-caller command catalog and per-command help pages."""

from .catalog import CatalogEntry, build_catalog, format_alias_tree, qualified_name
from .handler import HelpCommandHandler
from .renderer import collect_permissions, format_parameters, render_command
from .resolver import NotFound, Resolved, resolve

__all__ = [
    "CatalogEntry",
    "HelpCommandHandler",
    "NotFound",
    "Resolved",
    "build_catalog",
    "collect_permissions",
    "format_alias_tree",
    "format_parameters",
    "qualified_name",
    "render_command",
    "resolve",
]
