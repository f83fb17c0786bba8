"""Testes para tightknit.app.services.html_formatter.

Cobre: seções, listas, estilos com precedência, links, quebras de linha
e tolerância a entrada malformada.
"""

from __future__ import annotations

from typing import Any

import pytest

from tightknit.app.domain.rich_text import (
    Link,
    PlainText,
    TextStyle,
    UnknownText,
    parse_document,
)
from tightknit.app.services.html_formatter import (
    extract_plain_text,
    process_text_element,
    render,
)


def _text(text: str, **style: bool) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "text", "text": text}
    if style:
        node["style"] = style
    return node


def _section(*nodes: dict[str, Any]) -> dict[str, Any]:
    return {"type": "rich_text_section", "elements": list(nodes)}


def _list(style: str, *items: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "rich_text_list",
        "style": style,
        "elements": [{"type": "rich_text_section", "elements": item} for item in items],
    }


def _doc(*elements: dict[str, Any]) -> list[dict[str, Any]]:
    return [{"type": "rich_text", "elements": list(elements)}]


class TestRenderSections:
    """Testes de renderização de parágrafos."""

    def test_single_section(self) -> None:
        assert render(_doc(_section(_text("Hello, world!")))) == (
            "<p class='mb-4'>Hello, world!</p>"
        )

    def test_newlines_replaced_after_concatenation(self) -> None:
        html = render(_doc(_section(_text("a\nb"), _text("c"))))
        assert html == "<p class='mb-4'>a<br>bc</p>"

    def test_newline_inside_styled_text(self) -> None:
        html = render(_doc(_section(_text("a\nb", bold=True))))
        assert html == "<p class='mb-4'><strong>a<br>b</strong></p>"

    def test_empty_section_renders_empty_paragraph(self) -> None:
        assert render(_doc(_section())) == "<p class='mb-4'></p>"

    def test_multiple_blocks_concatenated_in_order(self) -> None:
        blocks = _doc(_section(_text("one"))) + _doc(_section(_text("two")))
        assert render(blocks) == "<p class='mb-4'>one</p><p class='mb-4'>two</p>"


class TestRenderStyles:
    """Precedência bold > italic > strike > code."""

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            ({"bold": True}, "<strong>x</strong>"),
            ({"italic": True}, "<em>x</em>"),
            ({"strike": True}, "<del>x</del>"),
            ({"code": True}, "<code>x</code>"),
            ({"bold": False}, "x"),
        ],
    )
    def test_single_style(self, style: dict[str, bool], expected: str) -> None:
        assert render(_doc(_section(_text("x", **style)))) == f"<p class='mb-4'>{expected}</p>"

    def test_bold_wins_over_italic(self) -> None:
        html = render(_doc(_section(_text("x", bold=True, italic=True))))
        assert html == "<p class='mb-4'><strong>x</strong></p>"
        assert "<em>" not in html

    def test_strike_wins_over_code(self) -> None:
        node = PlainText(text="x", style=TextStyle(strike=True, code=True))
        assert process_text_element(node) == "<del>x</del>"


class TestRenderLinks:
    def test_link_markup(self) -> None:
        node = Link(text="Docs", url="https://example.com")
        assert process_text_element(node) == (
            "<a href='https://example.com' target='_blank' "
            "class='text-primary hover:underline'>Docs</a>"
        )

    def test_link_inside_section(self) -> None:
        doc = _doc(_section(_text("See "), {"type": "link", "url": "https://x.io", "text": "x"}))
        assert render(doc) == (
            "<p class='mb-4'>See <a href='https://x.io' target='_blank' "
            "class='text-primary hover:underline'>x</a></p>"
        )


class TestRenderLists:
    def test_bullet_list(self) -> None:
        doc = _doc(_list("bullet", [_text("one")], [_text("two")]))
        assert render(doc) == (
            "<ul class='list-disc pl-5 my-4'>"
            "<li class='mb-2'>one</li><li class='mb-2'>two</li>"
            "</ul>"
        )

    def test_ordered_list_with_newline(self) -> None:
        doc = _doc(_list("ordered", [_text("a\nb")]))
        assert render(doc) == (
            "<ol class='list-decimal pl-5 my-4'><li class='mb-2'>a<br>b</li></ol>"
        )

    def test_unknown_list_style_skipped_but_siblings_render(self) -> None:
        doc = _doc(_list("checkbox", [_text("skip")]), _section(_text("kept")))
        assert render(doc) == "<p class='mb-4'>kept</p>"

    def test_malformed_list_item_renders_empty_item(self) -> None:
        doc = _doc({"type": "rich_text_list", "style": "bullet", "elements": ["oops"]})
        assert render(doc) == "<ul class='list-disc pl-5 my-4'><li class='mb-2'></li></ul>"


class TestRenderTolerance:
    """Entrada malformada nunca levanta exceção."""

    @pytest.mark.parametrize("value", [None, "text", 42, {"type": "rich_text"}])
    def test_non_sequence_input_returns_empty(self, value: Any) -> None:
        assert render(value) == ""

    def test_unknown_block_skipped(self) -> None:
        doc = [{"type": "header", "text": "x"}, *_doc(_section(_text("ok")))]
        assert render(doc) == "<p class='mb-4'>ok</p>"

    def test_unknown_element_skipped(self) -> None:
        doc = _doc({"type": "rich_text_quote", "elements": [_text("q")]}, _section(_text("ok")))
        assert render(doc) == "<p class='mb-4'>ok</p>"

    def test_unknown_text_node_renders_empty(self) -> None:
        doc = _doc(_section({"type": "emoji", "name": "smile"}, _text("ok")))
        assert render(doc) == "<p class='mb-4'>ok</p>"
        assert process_text_element(UnknownText()) == ""

    def test_missing_text_renders_empty_string(self) -> None:
        assert render(_doc(_section({"type": "text"}))) == "<p class='mb-4'></p>"

    def test_render_is_deterministic(self) -> None:
        doc = _doc(_section(_text("a", italic=True)), _list("bullet", [_text("b")]))
        assert render(doc) == render(doc)

    def test_accepts_parsed_document(self) -> None:
        raw = _doc(_section(_text("same")))
        assert render(parse_document(raw)) == render(raw)


class TestEscaping:
    def test_raw_text_by_default(self) -> None:
        assert render(_doc(_section(_text("<b>&")))) == "<p class='mb-4'><b>&</p>"

    def test_escape_option(self) -> None:
        doc = _doc(_section(_text("<b>&"), {"type": "link", "url": "x'y", "text": "t"}))
        assert render(doc, escape=True) == (
            "<p class='mb-4'>&lt;b&gt;&amp;"
            "<a href='x&#x27;y' target='_blank' class='text-primary hover:underline'>t</a></p>"
        )


class TestExtractPlainText:
    def test_sections_only(self) -> None:
        doc = _doc(
            _section(_text("Hello "), {"type": "link", "url": "u", "text": "there"}),
            _list("bullet", [_text("ignored")]),
            _section(_text("!", bold=True)),
        )
        assert extract_plain_text(doc) == "Hello there!"

    def test_invalid_input(self) -> None:
        assert extract_plain_text(None) == ""

    def test_unknown_node_text_is_collected(self) -> None:
        doc = _doc(_section(_text("Hi "), {"type": "emoji", "name": "wave", "text": "wave"}))
        assert extract_plain_text(doc) == "Hi wave"
        assert render(doc) == "<p class='mb-4'>Hi </p>"
