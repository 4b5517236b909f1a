"""File discovery and front-matter splitting"""

import logging
from pathlib import Path
from typing import Iterable

from postmatter.core.errors import MalformedDocument
from postmatter.core.models import DELIMITER, Document


log = logging.getLogger(__name__)

MD_EXTENSIONS = ('.md', '.markdown', '.mdx')


def _is_delimiter(line: str) -> bool:
    """True for a line holding only the delimiter (trailing whitespace and CR allowed)."""
    return line.rstrip() == DELIMITER


def parse_metadata(block: str, source: str = '<string>', first_line: int = 1) -> dict[str, str]:
    """Parse `key: value` lines into a mapping; later duplicates win.

    first_line is the source line number of the block's first line, used in warnings.
    """
    metadata: dict[str, str] = {}
    for lineno, line in enumerate(block.splitlines(), start=first_line):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        key, sep, value = stripped.partition(':')
        key = key.strip()
        if not sep or not key:
            log.warning("%s:%d: ignoring front-matter line without a key: %r", source, lineno, line)
            continue
        if key in metadata:
            log.warning("%s:%d: duplicate front-matter key %r, keeping last value", source, lineno, key)
        metadata[key] = value.strip()
    return metadata


def has_frontmatter(text: str) -> bool:
    """True if the first line of text is an opening delimiter."""
    first, _, _ = text.partition('\n')
    return bool(text) and _is_delimiter(first)


def split_frontmatter(text: str, source: str = '<string>') -> tuple[dict[str, str], str]:
    """Return (metadata, body). Raises MalformedDocument if the opening delimiter is never closed."""
    if not has_frontmatter(text):
        return {}, text

    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if _is_delimiter(lines[i]):
            metadata = parse_metadata(''.join(lines[1:i]), source, first_line=2)
            return metadata, ''.join(lines[i + 1:])

    raise MalformedDocument(source, f"opening '{DELIMITER}' delimiter has no closing '{DELIMITER}' line")


def parse_text(text: str, source: str = '<string>') -> Document:
    """Split raw document text into a Document."""
    metadata, body = split_frontmatter(text, source)
    header = text[:len(text) - len(body)]
    log.debug("parsed %s: %d metadata key(s), %d body chars", source, len(metadata), len(body))
    return Document(
        source=source,
        metadata=metadata,
        body=body,
        has_frontmatter=has_frontmatter(text),
        body_offset=len(header.splitlines()),
    )


def parse_file(path: Path) -> Document:
    """Read a UTF-8 file (leading BOM dropped) and parse it, using its path as identifier.

    Undecodable bytes make the document malformed rather than aborting the caller.
    """
    try:
        text = path.read_text(encoding='utf-8-sig')
    except UnicodeDecodeError as e:
        raise MalformedDocument(str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    return parse_text(text, str(path))


def discover_files(path: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[Path]:
    """Return sorted content files under path, or [path] if it is a single matching file."""
    exts = {e.lower() for e in extensions}
    if path.is_file():
        return [path] if path.suffix.lower() in exts else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in exts)
