"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    ListerKitError
    ├── ConfigError          (configuration.py)
    │   ├── FilterError
    │   └── SorterError
    ├── ListerError          (application.py)
    ├── ElementError         (application.py)
    └── SnapshotError        (snapshot.py)
        ├── SerializeError
        └── FormatError
"""

from listerkit.kernel.errors.application import ElementError, ListerError
from listerkit.kernel.errors.base import ListerKitError
from listerkit.kernel.errors.configuration import ConfigError, FilterError, SorterError
from listerkit.kernel.errors.snapshot import FormatError, SerializeError, SnapshotError

__all__ = [
    "ConfigError",
    "ElementError",
    "FilterError",
    "FormatError",
    "ListerError",
    "ListerKitError",
    "SerializeError",
    "SnapshotError",
    "SorterError",
]
