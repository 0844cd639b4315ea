"""Persistence repositories. Re-exports for dependency injection."""

from monitor_search.infrastructure.persistence.repositories.search_repo import (
    SearchRepository,
    compile_predicate,
)

__all__ = ["SearchRepository", "compile_predicate"]
