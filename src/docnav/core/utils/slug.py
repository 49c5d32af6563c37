"""Slug generation for heading anchors"""

import re


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated anchor. Idempotent."""
    text = text.lower()
    text = re.sub(r'[\W_]+', '-', text)
    return text.strip('-')
