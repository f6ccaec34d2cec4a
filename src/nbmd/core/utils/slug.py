"""Slug generation for heading ids"""

import re


def generate_id(text: str) -> str:
    """Convert heading text to a lowercase, hyphen-separated, URL-safe id."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'\s+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
