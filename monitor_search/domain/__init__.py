"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from monitor_search.domain.enums import PhraseMode, SearchArea, SearchOrdering
from monitor_search.domain.exceptions import (
    MonitorSearchException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "PhraseMode",
    "SearchArea",
    "SearchOrdering",
    # Exceptions
    "MonitorSearchException",
    "SqlNotConfiguredException",
    "ValidationException",
]
