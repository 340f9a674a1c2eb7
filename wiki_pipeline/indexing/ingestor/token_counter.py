"""
Token Counter
=============

Exact token counting using a HuggingFace tokenizer.
"""

import logging
from typing import Optional

from transformers import AutoTokenizer
from transformers.utils import logging as hf_logging

from ..chunker.token_estimator import estimate_tokens
from .config import DEFAULT_TOKENIZER_MODEL

logger = logging.getLogger(__name__)

hf_logging.set_verbosity_error()


class TokenCounter:
    """
    Counts tokens with the embedding model's own tokenizer.

    Used for the ``token_count`` stored with each chunk. Chunk boundaries
    are still decided by the word-based estimate.
    """

    DEFAULT_MODEL = DEFAULT_TOKENIZER_MODEL

    def __init__(self, model_name: Optional[str] = None, load: bool = True):
        """
        Initialize token counter.

        Args:
            model_name: HuggingFace model name for tokenizer
            load: Whether to load the tokenizer at all
        """
        self.model_name = model_name or self.DEFAULT_MODEL
        self.tokenizer = None

        if load:
            try:
                self.tokenizer = AutoTokenizer.from_pretrained(self.model_name)
                # Prevent max_length warnings
                self.tokenizer.model_max_length = int(1e9)
                logger.info(f"TokenCounter initialized: {self.model_name}")
            except Exception as e:
                logger.warning(f"Failed to load tokenizer: {e}. Using word-based estimation.")

    @property
    def exact(self) -> bool:
        """Whether counts come from a real tokenizer."""
        return self.tokenizer is not None

    def count(self, text: Optional[str]) -> int:
        """
        Count tokens in text.

        Args:
            text: Input text

        Returns:
            Token count
        """
        if not text:
            return 0

        if self.tokenizer is not None:
            return len(self.tokenizer.encode(text, add_special_tokens=False))
        return estimate_tokens(text)
