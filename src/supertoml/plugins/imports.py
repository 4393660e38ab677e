"""Import tables from other document files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from ..exceptions import PluginConfigError, PluginError
from ..loader import extract_table, load_document
from ..templating import TemplateError, TemplateRenderer
from ..values import RESERVED_KEY
from .base import Plugin, is_unconfigured, optional_str, require_table, required_str

if TYPE_CHECKING:
    from ..resolver import Resolver

logger = logging.getLogger(__name__)


@dataclass
class ImportEntry:
    """One import: a table of another file, with an optional key template.

    Attributes:
        file: Path of the file to import from, relative to the importing document
        table: Name of the table to import
        key_format: Template producing each imported key; ``key`` holds the
            original key
    """

    file: str
    table: str
    key_format: str | None = None

    @classmethod
    def from_dict(cls, plugin_name: str, data: Any) -> ImportEntry:
        """Decode an import entry.

        Raises:
            PluginConfigError: If the entry does not match the schema
        """
        data = require_table(plugin_name, data)
        return cls(
            file=required_str(plugin_name, data, "file"),
            table=required_str(plugin_name, data, "table"),
            key_format=optional_str(plugin_name, data, "key_format"),
        )


class ImportPlugin(Plugin):
    """Copy the values of tables from other files into the current table.

    Configuration is an array of import entries, processed in order; a key
    imported later overwrites one imported or defined earlier. Files are read
    fresh for every entry.

    Example:
        ```toml
        [app]
        _.import = [
            { file = "shared.toml", table = "database", key_format = "db_{{ key }}" },
        ]
        ```
    """

    name = "import"

    def __init__(self) -> None:
        self._renderer = TemplateRenderer()

    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        if is_unconfigured(config):
            resolver.merge(local_values)
            return
        if not isinstance(config, list):
            raise PluginConfigError(
                self.name, f"expected an array of imports, got {type(config).__name__}"
            )

        entries = [ImportEntry.from_dict(self.name, item) for item in config]
        for entry in entries:
            self._import_entry(resolver, entry, local_values)

        resolver.merge(local_values)

    def _import_entry(
        self,
        resolver: Resolver,
        entry: ImportEntry,
        local_values: Dict[str, Any],
    ) -> None:
        path = resolver.resolve_path(entry.file)
        logger.debug(f"Importing table '{entry.table}' from {path}")

        document = load_document(path)
        table = extract_table(document, entry.table, source=entry.file)

        variables = resolver.template_variables() if entry.key_format is not None else {}
        for key, value in table.items():
            if key == RESERVED_KEY:
                continue
            if entry.key_format is not None:
                key = self._format_key(key, entry.key_format, variables)
            local_values[key] = value

    def _format_key(self, key: str, key_format: str, variables: Dict[str, Any]) -> str:
        try:
            return self._renderer.render(key_format, {**variables, "key": key})
        except TemplateError as e:
            raise PluginError(self.name, f"Failed to render key_format template: {e}") from e
