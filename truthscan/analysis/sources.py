"""
Authoritative-source matching for fact-check results.

Categories are checked in declared order (health, climate, civic); each match
contributes its sources, then the general fact-checkers are appended and the
list is cut to MAX_SOURCES. With a single matching category the result is its
three sources followed by the first three general checkers; with two, the
general tail is truncated away entirely. Sources are not deduplicated.
"""

from truthscan.analysis.constants import GENERAL_FACT_CHECKERS, MAX_SOURCES, SOURCE_CATEGORIES
from truthscan.schemas.analysis import SourceRef


def matched_categories(content: str) -> list[str]:
    lowered = content.lower()
    return [
        name for name, keywords, _ in SOURCE_CATEGORIES
        if any(keyword in lowered for keyword in keywords)
    ]


def match_sources(content: str) -> list[SourceRef]:
    lowered = content.lower()
    sources: list[SourceRef] = []

    for _, keywords, category_sources in SOURCE_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            sources.extend(category_sources)

    sources.extend(GENERAL_FACT_CHECKERS)
    return sources[:MAX_SOURCES]
