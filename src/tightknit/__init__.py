"""Cliente Python para a API da Tightknit.

Eventos de calendário, feeds e posts, com respostas normalizadas em
``Ok``/``Fail`` e conversão de blocos rich_text em HTML.
"""

from tightknit.app.domain import (
    Fail,
    FailureKind,
    FormattedEvent,
    Ok,
    PersonProjection,
    Result,
    RichTextDocument,
    parse_document,
    unwrap,
)
from tightknit.app.services import extract_plain_text, format_event, render
from tightknit.client import TightknitClient, create_tightknit_client
from tightknit.config.settings import (
    TIGHTKNIT_API_BASE_URL,
    TightknitSettings,
    load_tightknit_settings_from_env,
)
from tightknit.utils.errors import ApiError, ConfigurationError, NetworkError, TightknitError

__version__ = "0.1.0"

BASE_URL = TIGHTKNIT_API_BASE_URL

__all__ = [
    "BASE_URL",
    "ApiError",
    "ConfigurationError",
    "Fail",
    "FailureKind",
    "FormattedEvent",
    "NetworkError",
    "Ok",
    "PersonProjection",
    "Result",
    "RichTextDocument",
    "TightknitClient",
    "TightknitError",
    "TightknitSettings",
    "__version__",
    "create_tightknit_client",
    "extract_plain_text",
    "format_event",
    "load_tightknit_settings_from_env",
    "parse_document",
    "render",
    "unwrap",
]
