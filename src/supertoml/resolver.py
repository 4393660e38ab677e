"""Table resolution engine.

A :class:`Resolver` resolves one named table of a document into a flat
mapping of values. Each table runs through an ordered pipeline of plugins;
plugins may trigger resolution of other tables through the same resolver,
which shares one call stack so that cross-table cycles are caught.

Example:
    ```toml
    [base]
    host = "localhost"

    [app]
    _.before = ["base"]
    port = 8080
    url = "http://{{ host }}:{{ port }}"
    ```

    ```python
    from supertoml import Resolver

    Resolver().resolve("config.toml", "app")
    # {'host': 'localhost', 'port': 8080, 'url': 'http://localhost:8080'}
    ```

A resolver holds the state of one session at a time. Every call to
:meth:`Resolver.resolve` starts from empty state; instances must not be shared
between concurrent resolutions.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Mapping, Union

from .exceptions import (
    CycleDetectedError,
    InvalidTableTypeError,
    PluginConfigError,
    PluginError,
    ResolutionDepthError,
    SuperTomlError,
)
from .loader import extract_table, load_document
from .plugins import Plugin, default_registry
from .registry import Registry
from .settings import Settings
from .values import RESERVED_KEY, is_table, merge_values, split_table, to_template_value

logger = logging.getLogger(__name__)


class Resolver:
    """Session-scoped engine that resolves tables through a plugin pipeline.

    Attributes:
        values: Values resolved so far in the current session
        document: Root table of the loaded document
        file_path: Path of the loaded document
        meta: Invocation metadata exposed to templates as ``_``
    """

    def __init__(
        self,
        plugins: Union[Registry[Plugin], Iterable[Plugin], None] = None,
        order: Iterable[str] | None = None,
        max_depth: int | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            plugins: Plugin registry, or plugins to run in the given order.
                Defaults to the built-in plugins.
            order: Names of the plugins to run for each table. Defaults to the
                settings' plugin order for the built-in registry, and to the
                given order when plugins are passed as a sequence.
            max_depth: Maximum nesting of table resolutions. Defaults to the
                settings' value.
            settings: Session settings (default: ``Settings()``)

        Raises:
            NotFoundError: If ``order`` names an unregistered plugin
        """
        self.settings = settings or Settings()

        if plugins is None:
            registry = default_registry()
            order = self.settings.plugin_order if order is None else order
        elif isinstance(plugins, Registry):
            registry = plugins
            order = registry.list_keys() if order is None else order
        else:
            registry = Registry[Plugin]("plugins")
            for plugin in plugins:
                registry.register(plugin.name, plugin)
            order = registry.list_keys() if order is None else order

        self._registry = registry
        self._pipeline: list[Plugin] = registry.ordered(order)
        self.max_depth = self.settings.max_depth if max_depth is None else max_depth

        self.values: Dict[str, Any] = {}
        self.document: Dict[str, Any] = {}
        self.file_path: str | None = None
        self.meta: Dict[str, Any] = {}
        self._call_stack: list[str] = []

    @property
    def pipeline(self) -> list[str]:
        """Names of the plugins run for each table, in order."""
        return [plugin.name for plugin in self._pipeline]

    @property
    def call_stack(self) -> tuple[str, ...]:
        """Names of the tables currently being resolved, outermost first."""
        return tuple(self._call_stack)

    @property
    def base_dir(self) -> Path:
        """Directory of the loaded document, used for relative file paths."""
        if self.file_path is None:
            return Path.cwd()
        return Path(self.file_path).parent

    def resolve(
        self,
        file_path: Union[str, Path],
        table_name: str,
        output_format: str | None = None,
    ) -> Dict[str, Any]:
        """Resolve a table of a document file.

        Args:
            file_path: Path to the document
            table_name: Name of the table to resolve
            output_format: Output format name, exposed to templates as
                ``_.args.output_format``

        Returns:
            Resolved values

        Raises:
            SuperTomlError: On the first error; no partial result is returned
        """
        self._reset()
        self.file_path = str(file_path)
        self.document = load_document(file_path)

        args: Dict[str, Any] = {"file_path": self.file_path, "table_name": table_name}
        if output_format is not None:
            args["output_format"] = output_format
        self.meta = {"args": args}

        logger.debug(f"Resolving table '{table_name}' from {self.file_path}")
        try:
            self.resolve_recursive(table_name)
        except SuperTomlError:
            self.values = {}
            raise

        values, self.values = self.values, {}
        return values

    def resolve_recursive(self, table_name: str) -> None:
        """Resolve one table of the loaded document into :attr:`values`.

        A ``_`` entry that is present but not a table is an error rather than
        being treated as an empty plugin configuration.

        Args:
            table_name: Name of the table to resolve

        Raises:
            CycleDetectedError: If the table is already being resolved
            ResolutionDepthError: If the depth limit is exceeded
            TableNotFoundError: If the table does not exist
            InvalidTableTypeError: If the entry is not a table
            PluginError: If a plugin fails
            PluginConfigError: If a plugin configuration is invalid
        """
        with self._frame(table_name):
            table = extract_table(self.document, table_name)
            local_values, plugin_config = split_table(table)
            if not is_table(plugin_config):
                raise InvalidTableTypeError(f"{table_name}.{RESERVED_KEY}")
            self._run_pipeline(local_values, plugin_config)

    def merge(self, values: Mapping[str, Any], prefix: str = "") -> None:
        """Merge values into the session's resolved values.

        Args:
            values: Values to merge; later merges overwrite earlier ones
            prefix: Optional string prepended to every key
        """
        merge_values(self.values, values, prefix)

    def template_variables(self, extra: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        """Build the variables visible to templates.

        Args:
            extra: Additional variables, such as ``key`` for import key formats

        Returns:
            Resolved values, plus the meta context under ``_``, plus ``extra``
        """
        variables = {key: to_template_value(value) for key, value in self.values.items()}
        variables[RESERVED_KEY] = to_template_value(self.meta)
        if extra:
            variables.update(extra)
        return variables

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Interpret a path from the document relative to the document's directory."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.base_dir / path

    @contextmanager
    def detached_values(self) -> Iterator[Dict[str, Any]]:
        """Collect the values produced inside the block separately.

        Within the block :attr:`values` is a fresh, empty mapping; that mapping
        is yielded and the outer values are restored on exit.
        """
        outer = self.values
        self.values = {}
        try:
            yield self.values
        finally:
            self.values = outer

    @contextmanager
    def _frame(self, table_name: str) -> Iterator[None]:
        if table_name in self._call_stack:
            raise CycleDetectedError(table_name, self._call_stack)
        if self.max_depth is not None and len(self._call_stack) >= self.max_depth:
            raise ResolutionDepthError(table_name, self.max_depth)

        self._call_stack.append(table_name)
        logger.debug(f"Entering table '{table_name}' (depth {len(self._call_stack)})")
        try:
            yield
        finally:
            self._call_stack.pop()
            logger.debug(f"Leaving table '{table_name}'")

    def _run_pipeline(self, local_values: Dict[str, Any], plugin_config: Dict[str, Any]) -> None:
        for plugin in self._pipeline:
            config = plugin_config.get(plugin.name, {})
            logger.debug(f"Running plugin '{plugin.name}'")
            try:
                plugin.process(self, local_values, config)
            except (PluginError, PluginConfigError):
                raise
            except Exception as e:
                raise PluginError(plugin.name, e) from e

    def _reset(self) -> None:
        self.values = {}
        self.document = {}
        self.file_path = None
        self.meta = {}
        self._call_stack = []
