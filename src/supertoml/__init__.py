"""supertoml

Compose a configuration table out of a document by resolving cross-table
dependencies, imports, references and templates into one flat mapping.
"""

__version__ = "0.4.0"

from .exceptions import (
    CycleDetectedError,
    FileReadError,
    InvalidTableTypeError,
    NotFoundError,
    OperationError,
    ParseError,
    PluginConfigError,
    PluginError,
    ResolutionDepthError,
    SuperTomlError,
    TableNotFoundError,
)
from .formatters import (
    FORMATTERS,
    format_as_dotenv,
    format_as_exports,
    format_as_json,
    format_as_tfvars,
    format_as_toml,
    get_formatter,
)
from .loader import extract_table, load_document
from .plugins import (
    AfterPlugin,
    BeforePlugin,
    ImportPlugin,
    NoopPlugin,
    Plugin,
    ReferencePlugin,
    TemplatingPlugin,
    default_registry,
)
from .registry import Registry
from .resolver import Resolver
from .settings import Settings

__all__ = [
    "__version__",
    # Resolution
    "Resolver",
    "Settings",
    "Registry",
    "load_document",
    "extract_table",
    # Plugins
    "Plugin",
    "AfterPlugin",
    "BeforePlugin",
    "ImportPlugin",
    "NoopPlugin",
    "ReferencePlugin",
    "TemplatingPlugin",
    "default_registry",
    # Formatters
    "FORMATTERS",
    "format_as_dotenv",
    "format_as_exports",
    "format_as_json",
    "format_as_tfvars",
    "format_as_toml",
    "get_formatter",
    # Exceptions
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
