"""File discovery, frontmatter extraction, and markdown-it parser setup"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from mdtree.core.models import SourceDoc
from mdtree.core.utils.hashing import sha256
from mdtree.core.utils.slug import slugify
from mdtree.exceptions import RendererUnavailable


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def make_parser(preset: str = 'gfm-like', breaks: bool = True) -> MarkdownIt:
    """Build a fresh MarkdownIt instance with GFM tables and strikethrough enabled."""
    try:
        md = MarkdownIt(preset, options_update={"linkify": False, "breaks": breaks})
        md.enable(["table", "strikethrough"])
    except (KeyError, ValueError, ImportError) as e:
        raise RendererUnavailable(preset, e) from e
    return md


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path) -> SourceDoc:
    """Read a single markdown file into a SourceDoc with frontmatter split off."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = strip_frontmatter(raw)
    slug = frontmatter.get('slug') or slugify(path.stem)
    return SourceDoc(
        path=path,
        slug=slug,
        raw_markdown=raw,
        markdown=body,
        hash=sha256(raw),
        frontmatter=frontmatter,
    )
