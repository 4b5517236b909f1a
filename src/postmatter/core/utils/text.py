"""Slug and hashing helpers for document identifiers"""

import hashlib
import re


DATE_PREFIX_RE = re.compile(r'^\d{4}-\d{2}-\d{2}-')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def post_slug(stem: str) -> str:
    """Slug for a post filename stem, dropping a leading YYYY-MM-DD- date (e.g. '2015-03-01-Hello' → 'hello')."""
    return slugify(DATE_PREFIX_RE.sub('', stem)) or slugify(stem)


def sha256(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
