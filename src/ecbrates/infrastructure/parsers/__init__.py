"""Response parsers."""

from ecbrates.infrastructure.parsers.sdmx_json import (
    Vocabulary,
    decode,
    find_dimension_index,
    parse_document,
)

__all__ = ["Vocabulary", "decode", "find_dimension_index", "parse_document"]
