"""Conversão de blocos rich_text em HTML para exibição.

Responsabilidades:
- Renderizar seções como parágrafos e listas como ``ul``/``ol``
- Aplicar um único estilo por nó de texto (bold > italic > strike > code)
- Converter quebras de linha em ``<br>`` depois de montar o conteúdo

Função pura, sem estado compartilhado: pode ser chamada concorrentemente.
Entrada malformada nunca levanta exceção, apenas gera saída parcial ou vazia.

Exemplo:
    >>> render([{"type": "rich_text", "elements": [
    ...     {"type": "rich_text_section",
    ...      "elements": [{"type": "text", "text": "Hello, world!"}]}]}])
    "<p class='mb-4'>Hello, world!</p>"
"""

from __future__ import annotations

import html
from typing import Any

from tightknit.app.domain.rich_text import (
    Link,
    ListStyle,
    PlainText,
    RichTextBlock,
    RichTextDocument,
    RichTextList,
    Section,
    TextNode,
    parse_document,
)

PARAGRAPH_OPEN = "<p class='mb-4'>"
PARAGRAPH_CLOSE = "</p>"
LIST_ITEM_OPEN = "<li class='mb-2'>"
LIST_ITEM_CLOSE = "</li>"
LINE_BREAK = "<br>"
LINK_CLASS = "text-primary hover:underline"

LIST_TAGS: dict[ListStyle, tuple[str, str]] = {
    ListStyle.BULLET: ("<ul class='list-disc pl-5 my-4'>", "</ul>"),
    ListStyle.ORDERED: ("<ol class='list-decimal pl-5 my-4'>", "</ol>"),
}

# Ordem importa: apenas a primeira flag verdadeira é aplicada.
STYLE_TAGS: tuple[tuple[str, str], ...] = (
    ("bold", "strong"),
    ("italic", "em"),
    ("strike", "del"),
    ("code", "code"),
)


def render(document: RichTextDocument | Any, *, escape: bool = False) -> str:
    """Converte um documento rich_text em HTML.

    Args:
        document: ``RichTextDocument`` ou o JSON bruto (lista de blocos).
        escape: Se True, escapa texto e atributos com ``html.escape``.

    Returns:
        HTML concatenado na ordem do documento ("" para entrada inválida).
    """
    if not isinstance(document, RichTextDocument):
        document = parse_document(document)

    parts: list[str] = []
    for block in document.blocks:
        if not isinstance(block, RichTextBlock):
            continue
        for element in block.elements:
            if isinstance(element, Section):
                parts.append(_render_section(element, escape))
            elif isinstance(element, RichTextList):
                parts.append(_render_list(element, escape))
    return "".join(parts)


def process_text_element(node: TextNode, *, escape: bool = False) -> str:
    """Renderiza um nó de texto isolado.

    Texto puro recebe no máximo uma tag de ênfase; links viram âncoras
    abrindo em nova aba; qualquer outro nó vira string vazia.
    """
    if isinstance(node, PlainText):
        text = _escape(node.text, escape)
        if node.style is not None:
            for flag, tag in STYLE_TAGS:
                if getattr(node.style, flag):
                    return f"<{tag}>{text}</{tag}>"
        return text
    if isinstance(node, Link):
        return (
            f"<a href='{_escape(node.url, escape)}' target='_blank' "
            f"class='{LINK_CLASS}'>{_escape(node.text, escape)}</a>"
        )
    return ""


def extract_plain_text(document: RichTextDocument | Any) -> str:
    """Concatena o texto bruto das seções, sem marcação.

    Listas não entram na extração. Qualquer nó da seção que traga ``text``
    contribui, inclusive nós de tipo desconhecido.
    """
    if not isinstance(document, RichTextDocument):
        document = parse_document(document)

    fragments: list[str] = []
    for block in document.blocks:
        if not isinstance(block, RichTextBlock):
            continue
        for element in block.elements:
            if not isinstance(element, Section):
                continue
            fragments.extend(node.text for node in element.elements if node.text)
    return "".join(fragments)


def _render_section(section: Section, escape: bool) -> str:
    return f"{PARAGRAPH_OPEN}{_render_nodes(section.elements, escape)}{PARAGRAPH_CLOSE}"


def _render_list(rich_list: RichTextList, escape: bool) -> str:
    if rich_list.style is None:
        return ""
    open_tag, close_tag = LIST_TAGS[rich_list.style]
    items = "".join(
        f"{LIST_ITEM_OPEN}{_render_nodes(item.elements, escape)}{LIST_ITEM_CLOSE}"
        for item in rich_list.items
    )
    return f"{open_tag}{items}{close_tag}"


def _render_nodes(nodes: tuple[TextNode, ...], escape: bool) -> str:
    # Substituição de \n sobre o conteúdo já renderizado (tags incluídas).
    rendered = "".join(process_text_element(node, escape=escape) for node in nodes)
    return rendered.replace("\n", LINE_BREAK)


def _escape(value: str, enabled: bool) -> str:
    return html.escape(value, quote=True) if enabled else value


__all__ = ["extract_plain_text", "process_text_element", "render"]
