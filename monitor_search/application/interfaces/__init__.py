"""Application interfaces (ports) implemented by infrastructure."""

from monitor_search.application.interfaces.repositories import ISearchRepository

__all__ = ["ISearchRepository"]
