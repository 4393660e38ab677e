"""Pull the resolved values of another table into the result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from .base import Plugin, optional_str, require_table

if TYPE_CHECKING:
    from ..resolver import Resolver


@dataclass
class ReferenceConfig:
    """Configuration of the reference plugin.

    Attributes:
        table: Name of the table to reference, if any
        prefix: String prepended to each referenced key
    """

    table: str | None = None
    prefix: str = ""

    @classmethod
    def from_dict(cls, plugin_name: str, data: Any) -> ReferenceConfig:
        """Decode the plugin configuration.

        Raises:
            PluginConfigError: If the configuration does not match the schema
        """
        data = require_table(plugin_name, data)
        return cls(
            table=optional_str(plugin_name, data, "table"),
            prefix=optional_str(plugin_name, data, "prefix") or "",
        )


class ReferencePlugin(Plugin):
    """Resolve a referenced table and merge its values, optionally prefixed.

    The referenced table is resolved on its own: it sees none of the values
    resolved so far, and only the values it produces are merged. The current
    table's values are always merged afterwards.

    Example:
        ```toml
        [app]
        _.reference = { table = "database", prefix = "db_" }
        ```
    """

    name = "reference"

    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        reference = ReferenceConfig.from_dict(self.name, config)

        if reference.table is not None:
            with resolver.detached_values() as referenced:
                resolver.resolve_recursive(reference.table)
            resolver.merge(referenced, prefix=reference.prefix)

        resolver.merge(local_values)
