"""Shared fixtures for core unit tests"""

import pytest

from nbmd.core.models import ParseOptions, RenderContext


SAMPLE_MD = """\
# Getting Started

A paragraph with **bold** text and a [link](https://example.com).

## Install

- clone the repo
- run the tests

```python
print("hello")
```

| Name | Score |
| :--- | ----: |
| Ada  | 10    |

> Quoted text.

---

Footer paragraph.
"""


@pytest.fixture(name="ctx")
def ctx_fixture():
    """Render context with default options and an empty stash."""
    return RenderContext(ParseOptions())


@pytest.fixture(name="raw_ctx")
def raw_ctx_fixture():
    """Render context with sanitization off, for exact-markup assertions."""
    return RenderContext(ParseOptions(sanitize=False))


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
