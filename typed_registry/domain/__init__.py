"""
Domain layer: value source ports and raw value kinds.
"""

from .kinds import SCALAR_KINDS, Kind, kind_of
from .ports import ConfigStore, ValueSource

__all__ = [
    "ValueSource",
    "ConfigStore",
    "Kind",
    "SCALAR_KINDS",
    "kind_of",
]
