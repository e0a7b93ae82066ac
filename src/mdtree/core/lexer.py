"""Reshape the markdown-it syntax tree into the transformer's Token model"""

import re
from typing import Optional

from loguru import logger
from markdown_it.tree import SyntaxTreeNode

from mdtree.core.parse import make_parser
from mdtree.core.tokens import (
    BlockquoteToken, BlockToken, BrToken, CodespanToken, CodeToken, DelToken,
    EmToken, HeadingToken, HrToken, HtmlInlineToken, HtmlToken, ImageToken,
    InlineToken, LinkToken, ListItemToken, ListToken, ParagraphToken,
    StrongToken, TableCellToken, TableToken, TextToken,
)
from mdtree.core.utils.tokens import heading_level, inline_children


ITEM_MARKER_RE = re.compile(r'^[ \t]*(?:[*+-]|\d{1,9}[.)])(?:[ \t]+|$)')
QUOTE_MARKER_RE = re.compile(r'^ {0,3}> ?')
TASK_MARKER_RE = re.compile(r'^\[([ xX])\][ \t]+')


def _unquote(node: SyntaxTreeNode, source_lines: list[str]) -> list[str]:
    """Return source lines with the blockquote's ``>`` markers removed inside its range."""
    if not node.map:
        return source_lines
    start, end = node.map
    lines = list(source_lines)
    for i in range(start, min(end, len(lines))):
        lines[i] = QUOTE_MARKER_RE.sub('', lines[i], count=1)
    return lines


def _item_body(node: SyntaxTreeNode, source_lines: list[str]) -> list[str]:
    """Return a list item's source lines with its marker removed and continuations dedented.

    ``source_lines`` must already be free of enclosing container prefixes.
    """
    if not node.map:
        return []
    start, end = node.map
    lines = source_lines[start:end]
    if not lines:
        return []
    m = ITEM_MARKER_RE.match(lines[0])
    if not m:
        return lines
    indent = m.end()
    body = [lines[0][indent:]]
    for line in lines[1:]:
        stripped = line.lstrip(' ')
        body.append(stripped if len(line) - len(stripped) <= indent else line[indent:])
    return body


class Lexer:
    """Tokenize markdown with markdown-it and emit Token trees.

    Each instance owns its MarkdownIt parser; nothing is shared between
    instances, so callers create one per conversion.
    """

    def __init__(self, preset: str = 'gfm-like', breaks: bool = True):
        self.preset = preset
        self.breaks = breaks
        self._md = make_parser(preset, breaks)
        self.relexing: set[str] = set()    # item texts currently being re-lexed

    def lex(self, markdown: str) -> list[BlockToken]:
        """Tokenize a markdown string into a list of block tokens."""
        source_lines = markdown.splitlines(keepends=True)
        root = SyntaxTreeNode(self._md.parse(markdown))
        return self._blocks(root.children, source_lines)

    # --- block level ---

    def _blocks(self, nodes: list[SyntaxTreeNode], source_lines: list[str]) -> list[BlockToken]:
        tokens = []
        for node in nodes:
            tok = self._block(node, source_lines)
            if tok is not None:
                tokens.append(tok)
        return tokens

    def _block(self, node: SyntaxTreeNode, source_lines: list[str]) -> Optional[BlockToken]:
        if node.type == 'paragraph':
            return ParagraphToken(tokens=self._inlines(inline_children(node)))
        if node.type == 'heading':
            return HeadingToken(depth=heading_level(node) or 1, tokens=self._inlines(inline_children(node)))
        if node.type == 'blockquote':
            return BlockquoteToken(tokens=self._blocks(node.children, _unquote(node, source_lines)))
        if node.type in ('bullet_list', 'ordered_list'):
            return self._list(node, source_lines)
        if node.type == 'fence':
            info = (node.info or '').strip()
            content = node.content
            if content.endswith('\n'):
                content = content[:-1]
            return CodeToken(text=content, lang=info.split()[0] if info else None)
        if node.type == 'code_block':
            return CodeToken(text=node.content.rstrip('\n'))
        if node.type == 'hr':
            return HrToken()
        if node.type == 'table':
            return self._table(node)
        if node.type == 'html_block':
            return HtmlToken(text=node.content)
        logger.debug("Skipping unsupported block node '{}'", node.type)
        return None

    def _list(self, node: SyntaxTreeNode, source_lines: list[str]) -> ListToken:
        ordered = node.type == 'ordered_list'
        start = int(node.attrs.get('start', 1)) if ordered else None
        items = [self._item(child, source_lines) for child in node.children if child.type == 'list_item']
        return ListToken(items=items, ordered=ordered, start=start)

    def _item(self, node: SyntaxTreeNode, source_lines: list[str]) -> ListItemToken:
        body = _item_body(node, source_lines)
        if node.map and body:
            start, end = node.map
            source_lines = source_lines[:start] + body + source_lines[end:]
        tokens = self._blocks(node.children, source_lines)

        # Task markers are matched on the raw source line, not the unescaped inline text.
        task, checked = False, None
        m = TASK_MARKER_RE.match(body[0]) if body else None
        if m:
            task, checked = True, m.group(1) in 'xX'
            body = [body[0][m.end():]] + body[1:]
            first = tokens[0] if tokens else None
            if isinstance(first, ParagraphToken) and first.tokens and isinstance(first.tokens[0], TextToken):
                leaf = TASK_MARKER_RE.match(first.tokens[0].text)
                rest = first.tokens[0].text[leaf.end():] if leaf else first.tokens[0].text
                inline = ([TextToken(text=rest)] if rest else []) + list(first.tokens[1:])
                tokens = [ParagraphToken(tokens=inline)] + tokens[1:]
        return ListItemToken(
            tokens=tokens,
            text=''.join(body).rstrip(),
            task=task,
            checked=checked,
        )

    def _table(self, node: SyntaxTreeNode) -> TableToken:
        header: list[TableCellToken] = []
        rows: list[list[TableCellToken]] = []
        for section in node.children:
            for row in section.children:
                cells = [TableCellToken(tokens=self._inlines(inline_children(cell))) for cell in row.children]
                if section.type == 'thead':
                    header = cells
                else:
                    rows.append(cells)
        return TableToken(header=header, rows=rows)

    # --- inline level ---

    def _inlines(self, nodes: list[SyntaxTreeNode]) -> list[InlineToken]:
        tokens = []
        for node in nodes:
            tok = self._inline(node)
            if tok is not None:
                tokens.append(tok)
        return tokens

    def _inline(self, node: SyntaxTreeNode) -> Optional[InlineToken]:
        if node.type == 'text':
            return TextToken(text=node.content)
        if node.type == 'softbreak':
            return BrToken() if self.breaks else TextToken(text='\n')
        if node.type == 'hardbreak':
            return BrToken()
        if node.type == 'code_inline':
            return CodespanToken(text=node.content)
        if node.type == 'strong':
            return StrongToken(tokens=self._inlines(node.children))
        if node.type == 'em':
            return EmToken(tokens=self._inlines(node.children))
        if node.type == 's':
            return DelToken(tokens=self._inlines(node.children))
        if node.type == 'link':
            return LinkToken(
                href=str(node.attrs.get('href', '')),
                title=node.attrs.get('title'),
                tokens=self._inlines(node.children),
            )
        if node.type == 'image':
            return ImageToken(
                href=str(node.attrs.get('src', '')),
                alt=node.content,
                title=node.attrs.get('title'),
            )
        if node.type == 'html_inline':
            return HtmlInlineToken(text=node.content)
        logger.debug("Skipping unsupported inline node '{}'", node.type)
        return None
