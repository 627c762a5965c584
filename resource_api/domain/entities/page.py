"""Page value object returned by listing operations."""

from dataclasses import dataclass, field
from math import ceil
from typing import Generic, TypeVar

from resource_api.domain.exceptions import InvalidEntityStateException

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    A bounded window of entities plus pagination metadata.

    ``total_count`` counts every entity matching the query, regardless of
    which page was requested, so it is the same for every page of one query.
    """

    current_page: int
    page_size: int
    total_count: int
    items: list[T] = field(default_factory=list)

    def __post_init__(self):
        if self.current_page < 1:
            raise InvalidEntityStateException(
                f"Page number must be greater than or equal to 1, got {self.current_page}."
            )

        if self.page_size < 1:
            raise InvalidEntityStateException(
                f"Page size must be greater than or equal to 1, got {self.page_size}."
            )

        if self.total_count < 0:
            raise InvalidEntityStateException("Total count cannot be negative.")

        if len(self.items) > self.page_size:
            raise InvalidEntityStateException(
                f"Page holds {len(self.items)} items but page size is {self.page_size}."
            )

    @property
    def total_pages(self) -> int:
        """Number of pages needed to show ``total_count`` entities."""
        return ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1
