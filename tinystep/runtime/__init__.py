"""Runtime: pagination engine and REST plumbing."""

from .pagination import AsyncPageFetcher, AsyncPaginator, Page, PageFetcher, Paginator

__all__ = [
    "AsyncPageFetcher",
    "AsyncPaginator",
    "Page",
    "PageFetcher",
    "Paginator",
]
