"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces.
"""

from monitor_search.application.interfaces import ISearchRepository
from monitor_search.application.use_cases.search import SearchService

__all__ = [
    "ISearchRepository",
    "SearchService",
]
