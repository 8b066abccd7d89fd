"""logtree error hierarchy – public re-export surface.

Hierarchy::

    LogtreeError
    ├── LevelError                (levels.py)
    │   ├── UnknownLevelError       (also ValueError)
    │   └── InvalidLevelTypeError   (also TypeError)
    ├── AttributeCollisionError   (records.py, also KeyError)
    ├── TypeConstraintError       (hierarchy.py, also TypeError)
    ├── InvalidFormatError        (formatting.py, also ValueError)
    └── ConfigError               (logtree.config.validation)
        ├── ConflictingConfigError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from logtree.errors.base import LogtreeError
from logtree.errors.formatting import InvalidFormatError
from logtree.errors.hierarchy import TypeConstraintError
from logtree.errors.levels import InvalidLevelTypeError, LevelError, UnknownLevelError
from logtree.errors.records import AttributeCollisionError

__all__ = [
    "AttributeCollisionError",
    "InvalidFormatError",
    "InvalidLevelTypeError",
    "LevelError",
    "LogtreeError",
    "TypeConstraintError",
    "UnknownLevelError",
]
