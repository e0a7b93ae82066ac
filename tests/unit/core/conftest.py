"""Shared fixtures for core unit tests"""

import pytest

from mdtree.core.convert import markdown_to_tiptap_dict
from mdtree.core.lexer import Lexer


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.
"""


@pytest.fixture(name="lexer")
def lexer_fixture():
    return Lexer("gfm-like")


@pytest.fixture(name="convert")
def convert_fixture():
    """Return a helper mapping markdown to the top-level content list of the doc dict."""
    def _convert(md: str, **kwargs) -> list[dict]:
        return markdown_to_tiptap_dict(md, **kwargs)["content"]
    return _convert


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
