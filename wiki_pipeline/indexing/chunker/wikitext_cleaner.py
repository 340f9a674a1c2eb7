"""
Wikitext Cleaner
================

Heuristic removal of wiki markup noise before chunking.

This is textual substitution, not a wikitext parser: nested templates,
unbalanced tags and similar malformed input are cleaned best-effort and
never raise.
"""

from typing import Optional

from .config import WIKITEXT_RULES


def _clean_once(text: str) -> str:
    for pattern, replacement in WIKITEXT_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def clean_wikitext(text: Optional[str]) -> Optional[str]:
    """
    Reduce wiki markup to plain readable text.

    Templates, references, comments and file embeds are dropped; links are
    replaced by their display text; paragraph separators are normalized to
    a single blank line and runs of spaces collapsed.

    Every rule only ever shortens the text, so the passes are repeated until
    the output is stable. For ordinary articles that is one pass plus a
    confirming one; it matters for link-inside-link constructs such as
    ``[[[[a]]|b]]`` where a single pass leaves a fresh ``[[a|b]]`` behind.

    Args:
        text: Raw wikitext (may be None)

    Returns:
        Cleaned text, or None when the input is None
    """
    if text is None:
        return None

    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again


class WikitextCleaner:
    """Callable wrapper around :func:`clean_wikitext`."""

    def clean(self, text: Optional[str]) -> Optional[str]:
        """Clean wikitext and return plain text."""
        return clean_wikitext(text)

    __call__ = clean
