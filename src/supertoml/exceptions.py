"""Exception hierarchy for supertoml.

Every error raised while loading or resolving a document derives from
:class:`SuperTomlError`. Like the rest of the package, errors carry an
optional ``context`` dictionary with structured details (table names,
file paths, plugin names) alongside the human-readable message.

The first error raised anywhere in a resolution aborts the whole session;
callers receive either the complete resolved mapping or exactly one error.

Example:
    ```python
    from supertoml import Resolver, SuperTomlError

    try:
        values = Resolver().resolve("app.toml", "prod")
    except SuperTomlError as e:
        print(e)
        print(e.context)
    ```
"""

from typing import Any, Dict


class SuperTomlError(Exception):
    """Base exception for all supertoml errors.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
    """

    def __init__(self, message: str, context: Dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class NotFoundError(SuperTomlError):
    """Raised when a requested item is not found."""

    pass


class OperationError(SuperTomlError):
    """Raised when an operation cannot be carried out."""

    pass


class FileReadError(SuperTomlError):
    """Raised when a document cannot be read from disk."""

    def __init__(self, path: str, reason: Any):
        super().__init__(
            f"Failed to read file: {reason}",
            context={"path": str(path)},
        )
        self.path = str(path)


class ParseError(SuperTomlError):
    """Raised when a document cannot be parsed."""

    def __init__(self, path: str, reason: Any):
        super().__init__(
            f"Failed to parse document: {reason}",
            context={"path": str(path)},
        )
        self.path = str(path)


class TableNotFoundError(NotFoundError):
    """Raised when a named table does not exist in a document."""

    def __init__(self, table_name: str, source: str | None = None):
        if source is None:
            message = f"Table '{table_name}' not found"
        else:
            message = f"Table '{table_name}' not found in file '{source}'"
        super().__init__(message, context={"table": table_name, "source": source})
        self.table_name = table_name
        self.source = source


class InvalidTableTypeError(SuperTomlError):
    """Raised when a named entry exists but is not a table."""

    def __init__(self, table_name: str, source: str | None = None):
        if source is None:
            message = f"Item '{table_name}' is not a table"
        else:
            message = f"Item '{table_name}' in file '{source}' is not a table"
        super().__init__(message, context={"table": table_name, "source": source})
        self.table_name = table_name
        self.source = source


class CycleDetectedError(SuperTomlError):
    """Raised when a table re-enters its own resolution."""

    def __init__(self, table_name: str, call_stack: list[str] | None = None):
        super().__init__(
            f"Cycle detected when processing table '{table_name}'",
            context={"table": table_name, "call_stack": list(call_stack or [])},
        )
        self.table_name = table_name


class ResolutionDepthError(SuperTomlError):
    """Raised when table resolution nests deeper than the configured limit."""

    def __init__(self, table_name: str, max_depth: int):
        super().__init__(
            f"Maximum resolution depth {max_depth} exceeded when processing table '{table_name}'",
            context={"table": table_name, "max_depth": max_depth},
        )
        self.table_name = table_name
        self.max_depth = max_depth


class PluginConfigError(SuperTomlError):
    """Raised when a plugin's configuration does not decode into its schema."""

    def __init__(self, plugin_name: str, detail: Any):
        super().__init__(
            f"Plugin '{plugin_name}' failed to deserialize data: {detail}",
            context={"plugin": plugin_name},
        )
        self.plugin_name = plugin_name
        self.detail = str(detail)


class PluginError(SuperTomlError):
    """Raised for any other failure inside a plugin.

    Errors from table resolutions triggered by a plugin are wrapped once, at
    the innermost plugin that observes them, and then propagate unchanged.
    """

    def __init__(self, plugin_name: str, detail: Any):
        super().__init__(
            f"Plugin '{plugin_name}' error: {detail}",
            context={"plugin": plugin_name},
        )
        self.plugin_name = plugin_name
        self.detail = str(detail)


__all__ = [
    "SuperTomlError",
    "NotFoundError",
    "OperationError",
    "FileReadError",
    "ParseError",
    "TableNotFoundError",
    "InvalidTableTypeError",
    "CycleDetectedError",
    "ResolutionDepthError",
    "PluginConfigError",
    "PluginError",
]
