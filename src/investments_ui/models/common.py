"""
Common state models for the Investments UI application.

This module defines the explicit state containers the view works with:

- Collection state (the loaded remote page, loading flag, error, fetch token)
- Filter state (type selection and name search)
- Page view (the derived visible slice and page counters)
- Notifications shown to the user as toasts
- The registration payload handed over by the register form

State containers are frozen; transitions return new instances.
"""

from dataclasses import dataclass, field
from typing import Literal

from investments_ui.models.investment import Investment


@dataclass(frozen=True)
class CollectionState:
    """
    Holds the currently loaded remote page of investments.

    Attributes:
        items: Investments of the last successful fetch, minus local deletions.
        page_index: Requested page number (1-indexed).
        page_size: Number of investments per page, constant for the session.
        loading: True while a fetch is outstanding.
        error: Message of the last failed fetch, None otherwise.
        generation: Token of the most recently issued fetch.
    """

    items: tuple[Investment, ...] = ()
    page_index: int = 1
    page_size: int = 5
    loading: bool = False
    error: str | None = None
    generation: int = 0

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive: {self.page_size}")
        if self.page_index < 1:
            raise ValueError(f"page_index must be >= 1: {self.page_index}")


@dataclass(frozen=True)
class FilterState:
    """
    Client-side filter inputs. Empty strings mean "no filter".

    Attributes:
        type: Selected investment type.
        search: Free text matched against investment names.
    """

    type: str = ""
    search: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether no filter is active."""
        return not self.type and not self.search


@dataclass(frozen=True)
class PageView:
    """
    Result of paginating the filtered investments on the client.

    Attributes:
        items: The visible slice for the current page.
        total_pages: Number of client pages over the filtered set.
        current_page: Stored page number (not clamped).
        filtered_count: Size of the filtered set.
    """

    items: tuple[Investment, ...] = ()
    total_pages: int = 0
    current_page: int = 1
    filtered_count: int = 0

    @property
    def show_pagination(self) -> bool:
        """Pagination controls are only rendered for more than one page."""
        return self.total_pages > 1

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def label(self) -> str:
        return f"Página {self.current_page} de {self.total_pages}"


@dataclass(frozen=True)
class Notification:
    """A transient message shown to the user."""

    level: Literal["success", "error"]
    message: str

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(level="success", message=message)

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(level="error", message=message)


@dataclass(frozen=True)
class Registration:
    """Validated credentials submitted by the register form."""

    username: str
    password: str = field(repr=False)

    def to_dict(self) -> dict:
        """Serialize to the JSON body expected by the auth endpoint."""
        return {"username": self.username, "password": self.password}
