"""Modelos de domínio do cliente Tightknit."""

from tightknit.app.domain.formatted_event import FormattedEvent, PersonProjection
from tightknit.app.domain.results import Fail, FailureKind, Ok, Result, unwrap
from tightknit.app.domain.rich_text import (
    Link,
    ListItem,
    ListStyle,
    PlainText,
    RichTextBlock,
    RichTextDocument,
    RichTextList,
    Section,
    TextStyle,
    UnknownBlock,
    UnknownElement,
    UnknownText,
    parse_document,
)

__all__ = [
    "Fail",
    "FailureKind",
    "FormattedEvent",
    "Link",
    "ListItem",
    "ListStyle",
    "Ok",
    "PersonProjection",
    "PlainText",
    "Result",
    "RichTextBlock",
    "RichTextDocument",
    "RichTextList",
    "Section",
    "TextStyle",
    "UnknownBlock",
    "UnknownElement",
    "UnknownText",
    "parse_document",
    "unwrap",
]
