"""
Ingestor Configuration
======================

Defaults for building chunk records handed to the embedding stage.
"""

# Tokenizer of the downstream embedding model (384 dimensions)
DEFAULT_TOKENIZER_MODEL = "BAAI/bge-small-en-v1.5"

# Characters of chunk text mixed into the stable chunk id
ID_TEXT_PREFIX_CHARS = 200
ID_HEX_LENGTH = 32
