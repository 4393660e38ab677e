"""Resolve dependent tables once the current table has been processed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from .base import Plugin, decode_table_names

if TYPE_CHECKING:
    from ..resolver import Resolver


class AfterPlugin(Plugin):
    """Resolve the listed tables after the earlier pipeline steps have run.

    Configuration is an array of table names, resolved in order. Unlike
    :class:`BeforePlugin` this plugin does not merge the current table's
    values; they are already published by the plugins that ran before it, and
    the listed tables' values therefore win over them.
    """

    name = "after"

    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        for table_name in decode_table_names(self.name, config):
            resolver.resolve_recursive(table_name)
