"""Modelo tipado para blocos rich_text (formato de blocos do Slack).

A API devolve ``description_slack_blocks`` como JSON solto. ``parse_document``
converte esse JSON em uma árvore imutável; formatos desconhecidos ou
malformados viram variantes ``Unknown*`` em vez de erro.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

BLOCK_TYPE_RICH_TEXT = "rich_text"
ELEMENT_TYPE_SECTION = "rich_text_section"
ELEMENT_TYPE_LIST = "rich_text_list"
NODE_TYPE_TEXT = "text"
NODE_TYPE_LINK = "link"


class ListStyle(str, Enum):
    """Estilos de lista suportados."""

    BULLET = "bullet"
    ORDERED = "ordered"


@dataclass(frozen=True, slots=True)
class TextStyle:
    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False


@dataclass(frozen=True, slots=True)
class PlainText:
    text: str
    style: TextStyle | None = None


@dataclass(frozen=True, slots=True)
class Link:
    text: str
    url: str


@dataclass(frozen=True, slots=True)
class UnknownText:
    """Nó de texto de tipo desconhecido (renderiza vazio).

    Guarda ``text`` quando o nó traz um, para a extração de texto puro.
    """

    text: str | None = None


TextNode: TypeAlias = PlainText | Link | UnknownText


@dataclass(frozen=True, slots=True)
class Section:
    elements: tuple[TextNode, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    elements: tuple[TextNode, ...] = ()


@dataclass(frozen=True, slots=True)
class RichTextList:
    """Lista de itens; ``style`` None quando o estilo não é reconhecido."""

    style: ListStyle | None
    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True, slots=True)
class UnknownElement:
    """Elemento inline de tipo desconhecido (ignorado)."""


InlineElement: TypeAlias = Section | RichTextList | UnknownElement


@dataclass(frozen=True, slots=True)
class RichTextBlock:
    elements: tuple[InlineElement, ...] = ()


@dataclass(frozen=True, slots=True)
class UnknownBlock:
    """Bloco de topo não reconhecido (ignorado)."""


Block: TypeAlias = RichTextBlock | UnknownBlock


@dataclass(frozen=True, slots=True)
class RichTextDocument:
    blocks: tuple[Block, ...] = ()


def parse_document(raw: Any) -> RichTextDocument:
    """Converte o JSON de blocos em ``RichTextDocument``.

    Nunca levanta exceção: entrada que não é lista gera documento vazio.
    """
    if not isinstance(raw, list):
        return RichTextDocument()
    return RichTextDocument(blocks=tuple(parse_block(block) for block in raw))


def parse_block(raw: Any) -> Block:
    if not isinstance(raw, dict) or raw.get("type") != BLOCK_TYPE_RICH_TEXT:
        return UnknownBlock()
    elements = raw.get("elements")
    if not isinstance(elements, list):
        return UnknownBlock()
    return RichTextBlock(elements=tuple(parse_inline_element(item) for item in elements))


def parse_inline_element(raw: Any) -> InlineElement:
    if not isinstance(raw, dict) or not isinstance(raw.get("elements"), list):
        return UnknownElement()

    element_type = raw.get("type")
    if element_type == ELEMENT_TYPE_SECTION:
        return Section(elements=_parse_text_nodes(raw["elements"]))
    if element_type == ELEMENT_TYPE_LIST:
        return RichTextList(
            style=_parse_list_style(raw.get("style")),
            items=tuple(_parse_list_item(item) for item in raw["elements"]),
        )
    return UnknownElement()


def parse_text_node(raw: Any) -> TextNode:
    if not isinstance(raw, dict):
        return UnknownText()

    node_type = raw.get("type")
    if node_type == NODE_TYPE_TEXT:
        return PlainText(text=_as_text(raw.get("text")), style=_parse_style(raw.get("style")))
    if node_type == NODE_TYPE_LINK:
        return Link(text=_as_text(raw.get("text")), url=_as_text(raw.get("url")))
    text = raw.get("text")
    return UnknownText(text=text if isinstance(text, str) and text else None)


def _parse_list_item(raw: Any) -> ListItem:
    elements = raw.get("elements") if isinstance(raw, dict) else None
    if not isinstance(elements, list):
        return ListItem()
    return ListItem(elements=_parse_text_nodes(elements))


def _parse_text_nodes(raw_nodes: list[Any]) -> tuple[TextNode, ...]:
    return tuple(parse_text_node(node) for node in raw_nodes)


def _parse_list_style(value: Any) -> ListStyle | None:
    try:
        return ListStyle(value)
    except ValueError:
        return None


def _parse_style(value: Any) -> TextStyle | None:
    if not isinstance(value, dict):
        return None
    return TextStyle(
        bold=bool(value.get("bold")),
        italic=bool(value.get("italic")),
        strike=bool(value.get("strike")),
        code=bool(value.get("code")),
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


__all__ = [
    "Block",
    "InlineElement",
    "Link",
    "ListItem",
    "ListStyle",
    "PlainText",
    "RichTextBlock",
    "RichTextDocument",
    "RichTextList",
    "Section",
    "TextNode",
    "TextStyle",
    "UnknownBlock",
    "UnknownElement",
    "UnknownText",
    "parse_document",
    "parse_block",
    "parse_inline_element",
    "parse_text_node",
]
