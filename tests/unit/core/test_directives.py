"""Unit tests for core/directives.py"""

from postmatter.core.directives import Directive, find_directives
from postmatter.core.parse import parse_text


def test_find_directives_in_prose(post_md):
    """Only the prose gist token is reported; fenced and inline-code copies are text."""
    doc = parse_text(post_md)
    found = find_directives(doc.body)
    assert found == [Directive(name="gist", args=("5f2e1b9c",), raw="{% gist 5f2e1b9c %}", line=3)]


def test_find_directives_leaves_body_untouched(post_md):
    doc = parse_text(post_md)
    before = doc.body
    find_directives(doc.body)
    assert doc.body == before
    assert "{% gist 5f2e1b9c %}" in doc.body


def test_find_directives_multiple_args_and_lines():
    body = "Intro line\nsee {% gist abc123 example.py %} here\n\n# Title {% include note.html %}\n"
    found = find_directives(body)
    assert [(d.name, d.args, d.line) for d in found] == [
        ("gist", ("abc123", "example.py"), 2),
        ("include", ("note.html",), 4),
    ]


def test_find_directives_whitespace_control_markers():
    found = find_directives("{%- gist deadbeef -%}\n")
    assert found[0].name == "gist"
    assert found[0].args == ("deadbeef",)


def test_find_directives_indented_code_block_skipped():
    body = "Text\n\n    {% gist in-code %}\n"
    assert find_directives(body) == []


def test_find_directives_none():
    assert find_directives("Plain prose with 100% coverage and {braces}.") == []


def test_find_directives_args_with_percent():
    found = find_directives('{% include figure.html width="50%" %}\n')
    assert [(d.name, d.args) for d in found] == [("include", ("figure.html", 'width="50%"'))]
