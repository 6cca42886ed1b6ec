"""Pagination metadata returned alongside paginated listings."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Pager(BaseModel):
    """Describes one window of a paginated result set.

    ``previous_page`` is ``None`` on the first page and ``next_page`` is
    ``None`` on the last one.
    """

    model_config = ConfigDict(frozen=True)

    total_entries: int
    total_pages: int
    per_page: int
    offset: int
    current_page: int
    previous_page: Optional[int] = None
    next_page: Optional[int] = None

    @property
    def is_first(self) -> bool:
        return self.previous_page is None

    @property
    def is_last(self) -> bool:
        return self.next_page is None
