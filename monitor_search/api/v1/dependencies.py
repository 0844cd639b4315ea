"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the search configuration, the caller's view
levels, the store-backed repository, and the search use case. Routes depend
only on these dependencies, not on infrastructure directly.

A disabled component resolves without touching the store or the view-levels
header, so the search endpoint answers an empty result list even when no
database is configured.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request

from monitor_search.application.dtos.search import SearchConfig
from monitor_search.application.use_cases.search import SearchService
from monitor_search.core.config import Settings, get_settings
from monitor_search.domain.exceptions import ValidationException
from monitor_search.infrastructure.persistence.database import read_session
from monitor_search.infrastructure.persistence.repositories import SearchRepository


def build_search_config(settings: Settings) -> SearchConfig:
    """Typed search options from application settings."""
    return SearchConfig(
        search_issue_text=settings.search_issue_text,
        target=settings.search_target,
        issue_href_base=settings.issue_href_base,
        enabled=settings.monitor_enabled,
    )


def get_search_config() -> SearchConfig:
    """Search options for the current settings (settings are cached per process)."""
    return build_search_config(get_settings())


def parse_view_levels(raw: str, field: str) -> tuple[int, ...]:
    """Parse a comma-separated list of integer view levels.

    Raises:
        ValidationException: If any entry is not an integer.
    """
    levels: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            levels.append(int(part))
        except ValueError:
            raise ValidationException(
                f"View levels must be comma-separated integers, got: {part!r}",
                field=field,
            ) from None
    return tuple(levels)


def get_view_levels(
    request: Request,
    config: Annotated[SearchConfig, Depends(get_search_config)],
) -> tuple[int, ...]:
    """Authorized view levels of the caller.

    Read from the header set by the host's authentication gateway; guests
    (no header) get the configured guest levels. Not parsed at all while the
    component is disabled.
    """
    if not config.enabled:
        return ()
    settings = get_settings()
    raw = request.headers.get(settings.view_levels_header)
    if raw is None:
        return settings.guest_view_level_ids
    return parse_view_levels(raw, settings.view_levels_header)


async def get_search_repo(
    config: Annotated[SearchConfig, Depends(get_search_config)],
) -> AsyncIterator[SearchRepository | None]:
    """Search repository on a request-scoped read session.

    Yields None while the component is disabled; no session is opened.
    """
    if not config.enabled:
        yield None
        return
    async with read_session() as db:
        yield SearchRepository(db)


async def get_search_service(
    search_repo: Annotated[SearchRepository | None, Depends(get_search_repo)],
    config: Annotated[SearchConfig, Depends(get_search_config)],
) -> SearchService:
    """Search use case (issues and comments)."""
    return SearchService(search_repo, config)
