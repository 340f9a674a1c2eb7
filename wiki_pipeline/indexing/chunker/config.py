"""
Chunker Configuration
=====================

Default parameters for wikitext cleanup and paragraph chunking.
"""

import re

# Default chunking parameters
DEFAULT_TARGET = 512          # target estimated tokens per chunk
PARAGRAPH_SEPARATOR = "\n\n"  # used both to split and to rejoin paragraphs
TOKENS_PER_WORD = 1.3         # word -> token multiplier for the estimate

# Blank-line boundaries between paragraphs
PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n\n+")

# -----------------------------------
# Wikitext cleanup (order matters)
# -----------------------------------
# Each rule assumes the ones before it already ran.
WIKITEXT_RULES = (
    # Templates {{...}}
    (re.compile(r"\{\{[^}]*\}\}"), ""),
    # Piped links [[target|display]] -> display
    (re.compile(r"\[\[([^|\]]+)\|([^\]]+)\]\]"), r"\2"),
    # Simple links [[target]] -> target
    (re.compile(r"\[\[([^\]]+)\]\]"), r"\1"),
    # References <ref name="x">...</ref>
    (re.compile(r"<ref[^>]*>.*?</ref>", re.DOTALL), ""),
    # HTML comments
    (re.compile(r"<!--.*?-->", re.DOTALL), ""),
    # File / image embeds
    (re.compile(r"\[\[File:.*?\]\]", re.DOTALL), ""),
    (re.compile(r"\[\[Image:.*?\]\]", re.DOTALL), ""),
    # Paragraph separators -> exactly one blank line
    (re.compile(r"\n\n+"), PARAGRAPH_SEPARATOR),
    # Runs of spaces
    (re.compile(r" {2,}"), " "),
)
