from .identifier import (
    IdentifierFields,
    InvalidIdentifierError,
    generate_identifier,
    is_identifier,
    parse_identifier,
)
from .logging import configure_logger, get_logger, set_module_level
from .store.base import Store
from .store.memory_store import MemoryStore
from .store.missing import MISSING, Missing
from .version import __version__

__all__ = [
    "Store",
    "MemoryStore",
    "MISSING",
    "Missing",
    "generate_identifier",
    "parse_identifier",
    "is_identifier",
    "IdentifierFields",
    "InvalidIdentifierError",
    "configure_logger",
    "get_logger",
    "set_module_level",
    "__version__",
]
