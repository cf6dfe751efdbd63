import html
import re
import sys

from .constants import COMMENT_ELLIPSIS, COMMENT_MAX_CHARS, COMMENT_PLACEHOLDERS

_TIMESTAMP_RE = re.compile(r'([0-9]{4}-[0-9]{2}-[0-9]{2})T([0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.[0-9]+)?Z')


def debug(message, enabled=False):
    if enabled:
        print(f"[DEBUG] {message}")


def error(message):
    print(f"[ERROR] {message}", file=sys.stderr)


def format_timestamp(timestamp_str):
    # 2024-01-01T00:00:00.123Z -> 2024-01-01 00:00:00; outros formatos passam inalterados
    if not timestamp_str:
        return timestamp_str
    match = _TIMESTAMP_RE.fullmatch(timestamp_str)
    if not match:
        return timestamp_str
    return f"{match.group(1)} {match.group(2)}"


def _is_meaningful(comment):
    if comment is None:
        return False
    if comment == "":
        return False
    return comment not in COMMENT_PLACEHOLDERS


def truncate_comment(comment: str, max_chars: int = COMMENT_MAX_CHARS) -> str:
    # Corte por caractere (str do Python), nunca no meio de um caractere multibyte
    if len(comment) > max_chars:
        return f"{comment[:max_chars]}{COMMENT_ELLIPSIS}"
    return comment


def escape_mrkdwn(text: str) -> str:
    # Slack exige &, < e > escapados no mrkdwn
    return html.escape(text, quote=False)
