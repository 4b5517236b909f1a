"""Export: sidecar JSON handed to the external site generator"""

import json
from pathlib import Path

from postmatter.core.directives import find_directives
from postmatter.core.models import Document


def build_sidecar(doc: Document, parser_config: str = 'gfm-like') -> dict:
    """Build the sidecar dict: source, slug, hash, metadata, body and directive tokens.

    Directive tokens are listed for the renderer's benefit only; the body is
    exported exactly as parsed.
    """
    return {
        "source": doc.source,
        "slug": doc.slug,
        "hash": doc.content_hash,
        "has_frontmatter": doc.has_frontmatter,
        "metadata": dict(doc.metadata),
        "body": doc.body,
        "directives": [
            {"name": d.name, "args": list(d.args), "line": d.line}
            for d in find_directives(doc.body, parser_config)
        ],
    }


def _relative_parent(src: Path, root: Path) -> Path:
    """Directory of src relative to root; empty when root is the file itself or unrelated."""
    base = root if root.is_dir() else root.parent
    try:
        return src.parent.relative_to(base)
    except ValueError:
        return Path()


def sidecar_path(doc: Document, output_dir: Path, root: Path) -> Path:
    """Sidecar location: output_dir / <relative parent> / doc.slug.json"""
    return output_dir / _relative_parent(Path(doc.source), root) / f"{doc.slug}.json"


def write_doc(
    doc: Document,
    output_dir: Path,
    root: Path,
    parser_config: str = 'gfm-like',
    ) -> Path:
    """Write the sidecar JSON for a single document.

    Output path mirrors the source directory structure below root:
      output_dir / <relative parent> / doc.slug.json
    """
    json_path = sidecar_path(doc, output_dir, root)
    json_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.write_text(
        json.dumps(build_sidecar(doc, parser_config), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    return json_path
