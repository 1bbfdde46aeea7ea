"""HTTP transport implementations."""

from ecbrates.infrastructure.http.fetcher import HttpxFetcher

__all__ = ["HttpxFetcher"]
