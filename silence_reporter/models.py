from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"campo '{key}' ausente ou inválido: {value!r}")
    return value


def _require_bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if not isinstance(value, bool):
        raise ValueError(f"campo '{key}' ausente ou inválido: {value!r}")
    return value


@dataclass(frozen=True)
class Matcher:
    name: str
    value: str
    is_regex: bool
    is_equal: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Matcher":
        if not isinstance(data, dict):
            raise ValueError(f"matcher inválido: {data!r}")
        # isEqual não existe em versões antigas do Alertmanager
        is_equal = data.get("isEqual", True)
        if not isinstance(is_equal, bool):
            raise ValueError(f"campo 'isEqual' inválido: {is_equal!r}")
        return cls(
            name=_require_str(data, "name"),
            value=_require_str(data, "value"),
            is_regex=_require_bool(data, "isRegex"),
            is_equal=is_equal,
        )

    def render(self) -> str:
        operator = "=" if self.is_equal else "!="
        regex_marker = "~" if self.is_regex else ""
        return f"{self.name}{operator}{regex_marker}{self.value}"


@dataclass(frozen=True)
class Silence:
    """Silence do Alertmanager, como devolvido por GET /api/v2/silences."""

    id: str
    state: str
    matchers: Tuple[Matcher, ...]
    starts_at: str
    ends_at: str
    updated_at: str
    created_by: str
    comment: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Silence":
        if not isinstance(data, dict):
            raise ValueError(f"silence inválido: {data!r}")
        status = data.get("status")
        if not isinstance(status, dict):
            raise ValueError(f"campo 'status' ausente ou inválido: {status!r}")
        raw_matchers = data.get("matchers")
        if not isinstance(raw_matchers, list):
            raise ValueError(f"campo 'matchers' ausente ou inválido: {raw_matchers!r}")
        return cls(
            id=_require_str(data, "id"),
            state=_require_str(status, "state"),
            matchers=tuple(Matcher.from_dict(m) for m in raw_matchers),
            starts_at=_require_str(data, "startsAt"),
            ends_at=_require_str(data, "endsAt"),
            updated_at=_require_str(data, "updatedAt"),
            created_by=_require_str(data, "createdBy"),
            comment=_require_str(data, "comment"),
        )


# ---------- Blocos do Slack (Block Kit) ----------

@dataclass(frozen=True)
class Header:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "header", "text": {"type": "plain_text", "text": self.text}}


@dataclass(frozen=True)
class Section:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "section", "text": {"type": "mrkdwn", "text": self.text}}


@dataclass(frozen=True)
class Divider:
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "divider"}


Block = Union[Header, Section, Divider]


@dataclass(frozen=True)
class MessageBatch:
    """Uma mensagem do Slack: lista de blocos publicada de uma vez."""

    blocks: Tuple[Block, ...]

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def header_text(self) -> str:
        for block in self.blocks:
            if isinstance(block, Header):
                return block.text
        return ""

    def to_blocks(self) -> List[Dict[str, Any]]:
        return [block.to_dict() for block in self.blocks]
