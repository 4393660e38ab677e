"""Plugin contract and configuration decoding helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from ..exceptions import PluginConfigError

if TYPE_CHECKING:
    from ..resolver import Resolver


class Plugin(ABC):
    """A named transformation step applied to each resolved table.

    ``name`` selects the plugin's configuration from the table's reserved
    ``_`` namespace: a table containing ``_.before = ["base"]`` hands
    ``["base"]`` to the plugin named ``before``. A table without an entry for
    the plugin hands it an empty table.

    :meth:`process` receives the resolver of the running session, the table's
    own values (which it may change in place) and its configuration. It
    decides for itself whether and when to merge the table's values into
    ``resolver.values``.
    """

    name: str = ""

    @abstractmethod
    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        """Apply the plugin to one table.

        Args:
            resolver: Resolver of the running session
            local_values: The table's own values, without the reserved key
            config: The plugin's configuration for this table
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def is_unconfigured(config: Any) -> bool:
    """Check whether a configuration is the empty default."""
    return isinstance(config, dict) and not config


def decode_table_names(plugin_name: str, config: Any) -> list[str]:
    """Decode a configuration holding an ordered list of table names.

    Args:
        plugin_name: Plugin name used to tag errors
        config: Raw configuration value

    Returns:
        Table names; empty when the plugin is not configured

    Raises:
        PluginConfigError: If the configuration is not a list of strings
    """
    if is_unconfigured(config):
        return []
    if not isinstance(config, list):
        raise PluginConfigError(
            plugin_name, f"expected an array of table names, got {type(config).__name__}"
        )
    for item in config:
        if not isinstance(item, str):
            raise PluginConfigError(
                plugin_name, f"expected table name to be a string, got {item!r}"
            )
    return list(config)


def require_table(plugin_name: str, config: Any) -> Dict[str, Any]:
    """Ensure a configuration value is a table.

    Raises:
        PluginConfigError: If it is not
    """
    if not isinstance(config, dict):
        raise PluginConfigError(plugin_name, f"expected a table, got {type(config).__name__}")
    return config


def optional_str(plugin_name: str, data: Dict[str, Any], key: str) -> str | None:
    """Read an optional string field from a configuration table.

    Raises:
        PluginConfigError: If the field is present but not a string
    """
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise PluginConfigError(plugin_name, f"field '{key}' must be a string, got {value!r}")
    return value


def required_str(plugin_name: str, data: Dict[str, Any], key: str) -> str:
    """Read a required string field from a configuration table.

    Raises:
        PluginConfigError: If the field is missing or not a string
    """
    value = optional_str(plugin_name, data, key)
    if value is None:
        raise PluginConfigError(plugin_name, f"missing field '{key}'")
    return value
