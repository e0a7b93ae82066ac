"""Unit tests for core/lexer.py"""

import pytest

from mdtree.core.lexer import Lexer
from mdtree.core.tokens import (
    BlockquoteToken, BrToken, CodespanToken, CodeToken, DelToken, EmToken,
    HeadingToken, HrToken, HtmlInlineToken, HtmlToken, ImageToken, LinkToken,
    ListToken, ParagraphToken, StrongToken, TableToken, TextToken,
)
from mdtree.exceptions import RendererUnavailable


def test_sample_block_sequence(lexer, sample_md):
    """The sample document lexes into the expected block kinds."""
    kinds = [t.type for t in lexer.lex(sample_md)]
    assert kinds == ["heading", "paragraph", "heading", "list", "code", "hr", "paragraph"]


def test_heading_depth(lexer):
    [tok] = lexer.lex("### Three\n")
    assert isinstance(tok, HeadingToken)
    assert tok.depth == 3
    assert tok.tokens == [TextToken(text="Three")]


def test_inline_kinds(lexer):
    """Each inline construct maps to its token class."""
    [para] = lexer.lex("**b** *i* ~~s~~ `c` [l](https://x.io \"T\") ![a](p.png) <span>")
    kinds = [type(t) for t in para.tokens if not isinstance(t, TextToken)]
    assert kinds == [StrongToken, EmToken, DelToken, CodespanToken, LinkToken, ImageToken, HtmlInlineToken]
    link = next(t for t in para.tokens if isinstance(t, LinkToken))
    assert link.href == "https://x.io"
    assert link.title == "T"
    image = next(t for t in para.tokens if isinstance(t, ImageToken))
    assert (image.href, image.alt, image.title) == ("p.png", "a", None)


def test_softbreak_as_br_when_breaks_on(lexer):
    [para] = lexer.lex("a\nb\n")
    assert para.tokens == [TextToken(text="a"), BrToken(), TextToken(text="b")]


def test_softbreak_as_newline_when_breaks_off():
    [para] = Lexer(breaks=False).lex("a\nb\n")
    assert [t.text for t in para.tokens] == ["a", "\n", "b"]


def test_fenced_code_drops_closing_newline(lexer):
    [tok] = lexer.lex("```ts extra\nconst x = 1;\n```\n")
    assert tok == CodeToken(text="const x = 1;", lang="ts")


def test_indented_code(lexer):
    [tok] = lexer.lex("    indented\n\n")
    assert tok == CodeToken(text="indented", lang=None)


def test_hr_and_blockquote(lexer):
    tokens = lexer.lex("> quoted\n\n---\n")
    assert isinstance(tokens[0], BlockquoteToken)
    assert isinstance(tokens[0].tokens[0], ParagraphToken)
    assert isinstance(tokens[1], HrToken)


def test_html_block(lexer):
    [tok] = lexer.lex('<img src="a.png" alt="A">\n')
    assert isinstance(tok, HtmlToken)
    assert tok.text.startswith("<img")


def test_table(lexer):
    [tok] = lexer.lex("| A | B |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |\n")
    assert isinstance(tok, TableToken)
    assert [c.tokens for c in tok.header] == [[TextToken(text="A")], [TextToken(text="B")]]
    assert len(tok.rows) == 2
    assert tok.rows[1][0].tokens == [TextToken(text="3")]


def test_table_without_body(lexer):
    [tok] = lexer.lex("| A |\n|---|\n")
    assert tok.rows == []


@pytest.mark.parametrize("md,ordered,start", [
    ("- a\n- b\n", False, None),
    ("1. a\n2. b\n", True, 1),
    ("5. a\n6. b\n", True, 5),
])
def test_list_kind_and_start(lexer, md, ordered, start):
    [tok] = lexer.lex(md)
    assert isinstance(tok, ListToken)
    assert (tok.ordered, tok.start) == (ordered, start)


def test_tight_items_keep_paragraphs(lexer):
    """Tight list items still carry a paragraph token."""
    [tok] = lexer.lex("- one\n- two\n")
    assert all(isinstance(item.tokens[0], ParagraphToken) for item in tok.items)


def test_item_raw_text(lexer):
    """Item text has the marker removed and continuation lines dedented."""
    [tok] = lexer.lex("- first line\n  continued\n- second\n")
    assert tok.items[0].text == "first line\ncontinued"
    assert tok.items[1].text == "second"


def test_task_items(lexer):
    """Task markers set task/checked and are stripped from text."""
    [tok] = lexer.lex("- [x] done\n- [ ] todo\n- plain\n")
    assert [(i.task, i.checked) for i in tok.items] == [(True, True), (True, False), (False, None)]
    assert tok.items[0].tokens[0].tokens == [TextToken(text="done")]
    assert tok.items[1].text == "todo"


def test_uppercase_task_marker(lexer):
    [tok] = lexer.lex("- [X] shout\n")
    assert tok.items[0].checked is True


def test_bracket_without_space_not_task(lexer):
    [tok] = lexer.lex("- [x]done\n")
    assert tok.items[0].task is False


def test_unknown_preset_raises():
    with pytest.raises(RendererUnavailable):
        Lexer("no-such-preset")


def test_escaped_task_marker_is_plain_text(lexer):
    """A backslash-escaped bracket is literal text, not a task marker."""
    [tok] = lexer.lex("- \\[x\\] not a task\n")
    item = tok.items[0]
    assert (item.task, item.checked) == (False, None)
    assert item.text == "\\[x\\] not a task"
    assert "".join(t.text for t in item.tokens[0].tokens) == "[x] not a task"


def test_quoted_item_text_drops_quote_markers(lexer):
    """Items inside a blockquote carry text without the ``>`` prefix."""
    [quote] = lexer.lex("> - a\n> -\n")
    [tok] = quote.tokens
    assert [i.text for i in tok.items] == ["a", ""]
    assert tok.items[1].tokens == []


def test_nested_item_text_is_relative_to_parent(lexer):
    [outer] = lexer.lex("- a\n  - b\n")
    inner = outer.items[0].tokens[1]
    assert isinstance(inner, ListToken)
    assert inner.items[0].text == "b"


def test_task_marker_inside_blockquote(lexer):
    [quote] = lexer.lex("> - [x] done\n")
    item = quote.tokens[0].items[0]
    assert (item.task, item.checked, item.text) == (True, True, "done")
