from typing import Iterable

from .constants import SILENCE_STATES, STATE_ACTIVE, STATE_EXPIRED, STATE_PENDING
from .models import Matcher, Silence
from .utils import _is_meaningful, escape_mrkdwn, format_timestamp, truncate_comment


def format_matchers(matchers: Iterable[Matcher]) -> str:
    lines = [f"  • `{escape_mrkdwn(m.render())}`" for m in matchers]
    if not lines:
        return "  • _none_"
    return "\n".join(lines)


def format_silence(silence: Silence) -> str:
    parts = [
        f"*Status:* {escape_mrkdwn(silence.state)}",
        f"*Date:* {escape_mrkdwn(format_timestamp(silence.starts_at))} → {escape_mrkdwn(format_timestamp(silence.ends_at))}",
        f"*CreatedBy:* {escape_mrkdwn(silence.created_by)}",
        "*Matchers:*",
        format_matchers(silence.matchers),
    ]

    if _is_meaningful(silence.comment):
        # trunca antes de escapar: o limite conta caracteres do comentário original
        parts.append(f"*Comment:* _{escape_mrkdwn(truncate_comment(silence.comment))}_")

    return "\n".join(parts)


def count_states(silences):
    counts = {state: 0 for state in SILENCE_STATES}
    for silence in silences:
        # estados desconhecidos não entram em nenhum contador
        if silence.state in counts:
            counts[silence.state] += 1
    return counts


def format_summary(total: int, counts) -> str:
    return (
        f"Total: {total} | Active: {counts[STATE_ACTIVE]} | "
        f"Pending: {counts[STATE_PENDING]} | Expired: {counts[STATE_EXPIRED]}"
    )
