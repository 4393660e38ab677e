"""Built-in plugins and the default plugin registry."""

from ..registry import Registry
from .after import AfterPlugin
from .base import Plugin
from .before import BeforePlugin
from .imports import ImportEntry, ImportPlugin
from .noop import NoopConfig, NoopPlugin
from .reference import ReferenceConfig, ReferencePlugin
from .templating import TemplatingPlugin

BUILTIN_PLUGINS = (
    BeforePlugin,
    ImportPlugin,
    ReferencePlugin,
    TemplatingPlugin,
    AfterPlugin,
    NoopPlugin,
)


def default_registry() -> Registry[Plugin]:
    """Create a registry holding one instance of every built-in plugin."""
    registry = Registry[Plugin]("plugins")
    for plugin_class in BUILTIN_PLUGINS:
        plugin = plugin_class()
        registry.register(plugin.name, plugin)
    return registry


__all__ = [
    "Plugin",
    "AfterPlugin",
    "BeforePlugin",
    "ImportEntry",
    "ImportPlugin",
    "NoopConfig",
    "NoopPlugin",
    "ReferenceConfig",
    "ReferencePlugin",
    "TemplatingPlugin",
    "BUILTIN_PLUGINS",
    "default_registry",
]
