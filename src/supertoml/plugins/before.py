"""Resolve dependency tables before the current table's values are published."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from .base import Plugin, decode_table_names

if TYPE_CHECKING:
    from ..resolver import Resolver


class BeforePlugin(Plugin):
    """Resolve the listed tables, then merge this table's values.

    Configuration is an array of table names, resolved in order. Because the
    table's own values are merged afterwards, they override values of the same
    name coming from its dependencies.

    Example:
        ```toml
        [app]
        _.before = ["base", "defaults"]
        port = 8080
        ```
    """

    name = "before"

    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        for table_name in decode_table_names(self.name, config):
            resolver.resolve_recursive(table_name)

        resolver.merge(local_values)
