"""Detection of Liquid-style placeholder tokens (e.g. {% gist id %}) in document bodies.

Tokens are reported, never resolved or rewritten: resolving a snippet is the
job of the site generator that renders the body. Only prose is scanned, so a
token quoted inside a fenced block or a code span is left out.
"""

import re
from dataclasses import dataclass

from markdown_it import MarkdownIt


DIRECTIVE_RE = re.compile(r'\{%-?\s*(?P<name>[A-Za-z_][\w-]*)(?P<args>.*?)\s*-?%\}')
BREAK_TYPES = {'softbreak', 'hardbreak'}


@dataclass(frozen=True)
class Directive:
    name: str
    args: tuple[str, ...]
    raw:  str
    line: int                  # 1-based line within the body


def _make_parser(preset: str) -> MarkdownIt:
    return MarkdownIt(preset, options_update={"linkify": False})


def _prose(inline) -> str:
    """Text of an inline token with code spans blanked out and line breaks kept."""
    parts = []
    for child in inline.children or []:
        if child.type == 'text':
            parts.append(child.content)
        elif child.type in BREAK_TYPES:
            parts.append('\n')
        elif child.type == 'code_inline':
            parts.append('\x00')
    return ''.join(parts)


def find_directives(body: str, parser_config: str = 'gfm-like') -> list[Directive]:
    """Return directive tokens found in the prose of body, in document order."""
    found = []
    for tok in _make_parser(parser_config).parse(body):
        if tok.type != 'inline' or not tok.map:
            continue
        text = _prose(tok)
        for m in DIRECTIVE_RE.finditer(text):
            found.append(Directive(
                name=m.group('name'),
                args=tuple(m.group('args').split()),
                raw=m.group(0),
                line=tok.map[0] + 1 + text.count('\n', 0, m.start()),
            ))
    return found
