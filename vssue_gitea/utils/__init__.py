"""Helpers shared by Vssue adapters."""

from .pkce import (
    PkceCodes,
    generate_code_challenge,
    generate_code_verifier,
    generate_pkce_pair,
)
from .url import (
    build_query,
    build_url,
    concat_url,
    get_clean_url,
    parse_query,
    parse_query_pairs,
)

__all__ = [
    "PkceCodes",
    "generate_code_verifier",
    "generate_code_challenge",
    "generate_pkce_pair",
    "build_query",
    "build_url",
    "concat_url",
    "get_clean_url",
    "parse_query",
    "parse_query_pairs",
]
