"""
Canned explanations and corrected statements keyed on topic keywords.

Both lookups lower-case the content and return the first matching topic in
declared order; each has its own generic fallback.
"""

from truthscan.analysis.constants import (
    CORRECTED_STATEMENT_FALLBACK,
    CORRECTED_STATEMENTS,
    EXPLANATION_FALLBACK,
    EXPLANATIONS,
    GOVERNMENT_POLICY_QUALIFIERS,
    GOVERNMENT_POLICY_STATEMENT,
)


def _first_match(lowered: str, table) -> str | None:
    for keywords, text in table:
        if any(keyword in lowered for keyword in keywords):
            return text
    return None


def explain(content: str) -> str:
    """Why a claim on this topic is considered false."""
    return _first_match(content.lower(), EXPLANATIONS) or EXPLANATION_FALLBACK


def correct(content: str) -> str:
    """The factual statement that should replace a false claim on this topic."""
    lowered = content.lower()

    statement = _first_match(lowered, CORRECTED_STATEMENTS)
    if statement:
        return statement

    if "government" in lowered and any(q in lowered for q in GOVERNMENT_POLICY_QUALIFIERS):
        return GOVERNMENT_POLICY_STATEMENT

    return CORRECTED_STATEMENT_FALLBACK
