"""
Search documents and tokenization.

A search document is the JSON form of an entity's DTO. Matching works
on lowercase word tokens drawn from the document's string values.
"""

import re
from typing import Any, Dict, Set

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)

# Matches every document
MATCH_ALL = "*"


def tokenize(text: str) -> Set[str]:
    """Split text into lowercase word tokens."""
    if not text:
        return set()
    return {token.lower() for token in _TOKEN_RE.findall(text)}


def document_terms(document: Dict[str, Any]) -> Set[str]:
    """Tokens of every string field of a document."""
    terms = set()
    for value in document.values():
        if isinstance(value, str):
            terms |= tokenize(value)
    return terms


def is_match_all(query: str) -> bool:
    return query is None or query.strip() in ("", MATCH_ALL)
