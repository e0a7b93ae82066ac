"""Output document models and pipeline data models"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel


class NodeType(str, Enum):
    """Node type names accepted by the rich-text editor schema"""
    doc             = "doc"
    heading         = "heading"
    paragraph       = "paragraph"
    blockquote      = "blockquote"
    bullet_list     = "bulletList"
    ordered_list    = "orderedList"
    task_list       = "taskList"
    list_item       = "listItem"
    task_item       = "taskItem"
    code_block      = "codeBlock"
    horizontal_rule = "horizontalRule"
    table           = "table"
    table_row       = "tableRow"
    table_header    = "tableHeader"
    table_cell      = "tableCell"
    image           = "image"
    text            = "text"
    hard_break      = "hardBreak"


class MarkType(str, Enum):
    """Mark type names accepted by the rich-text editor schema"""
    bold   = "bold"
    italic = "italic"
    code   = "code"
    strike = "strike"
    link   = "link"


class Mark(BaseModel):
    """A formatting annotation attached to a text node."""
    type:  MarkType
    attrs: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type.value}
        if self.attrs is not None:
            out["attrs"] = dict(self.attrs)
        return out


class Node(BaseModel):
    """A document tree node in the editor's JSON shape.

    Absent fields are left as None and dropped on serialization, so a text
    node without formatting carries no ``marks`` key at all.
    """
    type:    NodeType
    attrs:   Optional[dict[str, Any]] = None
    content: Optional[list["Node"]] = None
    marks:   Optional[list[Mark]] = None
    text:    Optional[str] = None

    def with_mark(self, mark: Mark) -> "Node":
        """Return a copy carrying ``mark`` after any existing marks; non-text nodes are returned as-is."""
        if self.type != NodeType.text:
            return self
        return self.model_copy(update={"marks": [*(self.marks or []), mark]})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the editor's JSON dict; ``None`` values inside attrs are kept."""
        out: dict[str, Any] = {"type": self.type.value}
        if self.attrs is not None:
            out["attrs"] = dict(self.attrs)
        if self.content is not None:
            out["content"] = [child.to_dict() for child in self.content]
        if self.marks:
            out["marks"] = [m.to_dict() for m in self.marks]
        if self.text is not None:
            out["text"] = self.text
        return out


def text_node(value: str, marks: Optional[list[Mark]] = None) -> Node:
    return Node(type=NodeType.text, text=value, marks=list(marks) if marks else None)


def paragraph_node(content: list[Node]) -> Node:
    return Node(type=NodeType.paragraph, content=content)


class ConvertedDoc(BaseModel):
    """Public conversion result written by the pipeline for a single source file."""
    slug:        str
    path:        str
    hash:        str                     # sha256 of the full source file
    frontmatter: dict[str, Any] = {}
    format:      str                     # json or html
    doc:         Optional[dict[str, Any]] = None
    html:        Optional[str] = None


@dataclass
class SourceDoc:
    """Internal read result for one markdown file; not persisted."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    hash:         str
    frontmatter:  dict[str, Any]
