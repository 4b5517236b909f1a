"""Shared fixtures for core unit tests"""

import pytest


POST_MD = """\
---
layout: post
title: Currying in practice
---
Partial application, step by step.

{% gist 5f2e1b9c %}

```liquid
{% gist not-a-directive %}
```

Inline `{% gist also-not %}` stays text.
"""

PLAIN_MD = "No front matter here"


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path):
    """A small post collection: two good posts, one plain page, one unclosed header."""
    root = tmp_path / "content"
    posts = root / "_posts"
    posts.mkdir(parents=True)
    (posts / "2015-03-01-currying.md").write_text(POST_MD, encoding="utf-8")
    (posts / "2016-07-12-charity.md").write_text("---\ntitle: Teaching kids\n---\nBody\n", encoding="utf-8")
    (root / "about.md").write_text(PLAIN_MD, encoding="utf-8")
    (root / "broken.md").write_text("---\ntitle: Broken", encoding="utf-8")
    (root / "notes.txt").write_text("ignored", encoding="utf-8")
    return root


@pytest.fixture(name="post_md")
def post_md_fixture():
    return POST_MD
