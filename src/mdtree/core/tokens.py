"""Token model consumed by the tree transformer.

Tokens are the lexer's view of a markdown document: block tokens carry nested
block or inline token lists, inline tokens carry text or nested inline lists.
Each variant is tagged by its ``type`` field.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Union


# --- inline tokens ---

@dataclass(frozen=True)
class TextToken:
    """Plain text. At block level (tight list items) it may carry inline children."""
    text:   str
    tokens: list["InlineToken"] = field(default_factory=list)
    type:   Literal["text"] = "text"


@dataclass(frozen=True)
class StrongToken:
    tokens: list["InlineToken"] = field(default_factory=list)
    type:   Literal["strong"] = "strong"


@dataclass(frozen=True)
class EmToken:
    tokens: list["InlineToken"] = field(default_factory=list)
    type:   Literal["em"] = "em"


@dataclass(frozen=True)
class DelToken:
    """GFM strikethrough (``~~text~~``)."""
    tokens: list["InlineToken"] = field(default_factory=list)
    type:   Literal["del"] = "del"


@dataclass(frozen=True)
class CodespanToken:
    text: str
    type: Literal["codespan"] = "codespan"


@dataclass(frozen=True)
class LinkToken:
    href:   str
    title:  Optional[str] = None
    tokens: list["InlineToken"] = field(default_factory=list)
    type:   Literal["link"] = "link"


@dataclass(frozen=True)
class ImageToken:
    href:  str
    alt:   str = ""
    title: Optional[str] = None
    type:  Literal["image"] = "image"


@dataclass(frozen=True)
class BrToken:
    type: Literal["br"] = "br"


@dataclass(frozen=True)
class HtmlInlineToken:
    text: str
    type: Literal["html_inline"] = "html_inline"


InlineToken = Union[
    TextToken, StrongToken, EmToken, DelToken, CodespanToken,
    LinkToken, ImageToken, BrToken, HtmlInlineToken,
]


# --- block tokens ---

@dataclass(frozen=True)
class HeadingToken:
    depth:  int
    tokens: list[InlineToken] = field(default_factory=list)
    type:   Literal["heading"] = "heading"


@dataclass(frozen=True)
class ParagraphToken:
    tokens: list[InlineToken] = field(default_factory=list)
    type:   Literal["paragraph"] = "paragraph"


@dataclass(frozen=True)
class BlockquoteToken:
    tokens: list["BlockToken"] = field(default_factory=list)
    type:   Literal["blockquote"] = "blockquote"


@dataclass(frozen=True)
class ListItemToken:
    tokens:  list["BlockToken"] = field(default_factory=list)
    text:    str = ""              # item source without its marker
    task:    bool = False
    checked: Optional[bool] = None
    type:    Literal["list_item"] = "list_item"


@dataclass(frozen=True)
class ListToken:
    items:   list[ListItemToken] = field(default_factory=list)
    ordered: bool = False
    start:   Optional[int] = None  # first ordinal; None for bullet lists
    type:    Literal["list"] = "list"


@dataclass(frozen=True)
class CodeToken:
    text: str
    lang: Optional[str] = None
    type: Literal["code"] = "code"


@dataclass(frozen=True)
class HrToken:
    type: Literal["hr"] = "hr"


@dataclass(frozen=True)
class TableCellToken:
    tokens: list[InlineToken] = field(default_factory=list)
    type:   Literal["table_cell"] = "table_cell"


@dataclass(frozen=True)
class TableToken:
    header: list[TableCellToken] = field(default_factory=list)
    rows:   list[list[TableCellToken]] = field(default_factory=list)
    type:   Literal["table"] = "table"


@dataclass(frozen=True)
class HtmlToken:
    text: str
    type: Literal["html"] = "html"


@dataclass(frozen=True)
class SpaceToken:
    type: Literal["space"] = "space"


BlockToken = Union[
    HeadingToken, ParagraphToken, BlockquoteToken, ListToken, ListItemToken,
    CodeToken, HrToken, TableToken, HtmlToken, SpaceToken, TextToken,
]
