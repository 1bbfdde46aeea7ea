"""Query helpers: validation and URL construction."""

from ecbrates.infrastructure.utils.url_builder import DEFAULT_BASE_URL, build_exchange_rate_url
from ecbrates.infrastructure.utils.validation import validate_query

__all__ = ["DEFAULT_BASE_URL", "build_exchange_rate_url", "validate_query"]
