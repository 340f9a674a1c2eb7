"""
Token Estimator
===============

Word-based token estimation used for chunk sizing.
"""

from typing import Optional

from .config import TOKENS_PER_WORD


def estimate_tokens(text: Optional[str]) -> int:
    """
    Estimate how many embedding-model tokens a text will cost.

    Approximately 1.3 tokens per whitespace-separated word. Deterministic
    and monotone in word count, but not tied to any real tokenizer; use
    ``TokenCounter`` when an exact count is needed.

    Args:
        text: Input text (None counts as zero)

    Returns:
        Estimated token count
    """
    if not text:
        return 0
    return int(len(text.split()) * TOKENS_PER_WORD)
