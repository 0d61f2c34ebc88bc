"""Character storage layer.

Provides a uniform contract over flat-file formats:

- **Backends**: CSV and JSON implementations of one interface
- **Selector**: Runtime switch of the active backend without restart
"""

from rostermgr.storage.backends import (
    BACKENDS,
    BaseBackend,
    DocumentBackend,
    StorageFormat,
    TabularBackend,
    create_backend,
)
from rostermgr.storage.selector import BackendSelector, resolve_format

__all__ = [
    "BACKENDS",
    "BaseBackend",
    "DocumentBackend",
    "StorageFormat",
    "TabularBackend",
    "create_backend",
    "BackendSelector",
    "resolve_format",
]
