"""Application use cases: one entry point per workflow."""

from monitor_search.application.use_cases.search import SearchService

__all__ = ["SearchService"]
