"""Collection loading and export orchestration.

The parser never decides what happens to a malformed document; the policy
lives here, chosen by the caller through ``on_error``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from postmatter.core.errors import DuplicateOutput, MalformedDocument
from postmatter.core.export import sidecar_path, write_doc
from postmatter.core.models import Document
from postmatter.core.parse import MD_EXTENSIONS, discover_files, parse_file


log = logging.getLogger(__name__)

ON_ERROR_CHOICES = ('skip', 'abort')


@dataclass
class LoadResult:
    documents: list[Document] = field(default_factory=list)
    failures:  list[MalformedDocument] = field(default_factory=list)


def load_collection(
    path: Path,
    extensions: Iterable[str] = MD_EXTENSIONS,
    on_error: str = 'abort',
    ) -> LoadResult:
    """Parse every content file under path.

    With on_error='abort' the first MalformedDocument propagates; with 'skip'
    it is recorded in LoadResult.failures and loading continues.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, got {on_error!r}")

    result = LoadResult()
    for p in discover_files(path, extensions):
        try:
            result.documents.append(parse_file(p))
        except MalformedDocument as e:
            if on_error == 'abort':
                raise
            log.warning("skipping %s", e)
            result.failures.append(e)
    log.info("loaded %d document(s), %d malformed", len(result.documents), len(result.failures))
    return result


def run_export(
    docs: list[Document],
    output_dir: Path,
    root: Path,
    parser_config: str = 'gfm-like',
    on_error: str = 'abort',
    ) -> list[tuple[str, Path]]:
    """Write a sidecar JSON per document. Returns (slug, json_path) pairs.

    Documents sharing an output path are checked before anything is written:
    with on_error='abort' a DuplicateOutput is raised, with 'skip' the first
    document keeps the path and later ones are left out.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, got {on_error!r}")

    claimed: dict[Path, Document] = {}
    selected = []
    for doc in docs:
        path = sidecar_path(doc, output_dir, root)
        if path in claimed:
            dup = DuplicateOutput(doc.source, claimed[path].source, path)
            if on_error == 'abort':
                raise dup
            log.warning("skipping %s", dup)
            continue
        claimed[path] = doc
        selected.append(doc)

    results = []
    for doc in selected:
        json_path = write_doc(doc, output_dir, root, parser_config)
        results.append((doc.slug, json_path))
    return results
