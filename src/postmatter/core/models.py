"""Document model produced by the front-matter parser"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from postmatter.core.utils.text import post_slug, sha256, slugify


DELIMITER = "---"


class Document(BaseModel):
    """One content file: optional front matter plus raw body. Read-only once built."""
    model_config = ConfigDict(frozen=True)

    source:          str                 # path or caller-supplied label
    metadata:        Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    body:            str = ""            # unmodified text after the closing delimiter
    has_frontmatter: bool = False
    body_offset:     int = 0             # lines preceding the body in the source text

    @field_validator("metadata", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @property
    def slug(self) -> str:
        """Slugified frontmatter slug when set, else derived from the source file stem."""
        return slugify(self.metadata.get("slug", "")) or post_slug(Path(self.source).stem) or "doc"

    @property
    def content_hash(self) -> str:
        return sha256(self.to_text())

    def to_text(self) -> str:
        """Re-serialize as delimited `key: value` lines followed by the body."""
        if not self.has_frontmatter:
            return self.body
        lines = [f"{k}: {v}" if v else f"{k}:" for k, v in self.metadata.items()]
        header = "".join(f"{line}\n" for line in lines)
        return f"{DELIMITER}\n{header}{DELIMITER}\n{self.body}"
