"""Diagnostic plugin that leaves values unchanged."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from ..exceptions import PluginConfigError
from .base import Plugin, optional_str, require_table

if TYPE_CHECKING:
    from ..resolver import Resolver

logger = logging.getLogger(__name__)


@dataclass
class NoopConfig:
    message: str | None = None
    enabled: bool = False

    @classmethod
    def from_dict(cls, plugin_name: str, data: Any) -> NoopConfig:
        data = require_table(plugin_name, data)
        enabled = data.get("enabled", False)
        if not isinstance(enabled, bool):
            raise PluginConfigError(plugin_name, f"field 'enabled' must be a boolean, got {enabled!r}")
        return cls(message=optional_str(plugin_name, data, "message"), enabled=enabled)


class NoopPlugin(Plugin):
    """Optionally log a diagnostic, then merge the table's values unchanged."""

    name = "noop"

    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        noop = NoopConfig.from_dict(self.name, config)

        if noop.enabled:
            if noop.message is not None:
                logger.info(f"NoopPlugin: {noop.message}")
            else:
                logger.info(f"NoopPlugin: Running with {len(resolver.values)} values")

        resolver.merge(local_values)
