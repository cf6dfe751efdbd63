import time
from typing import Any, Dict, Iterable, Optional

import requests

from .constants import DEBUG_MODE, SLACK_API_URL, SLACK_PUBLISH_DELAY_SECONDS, SLACK_TIMEOUT_SECONDS
from .models import MessageBatch
from .utils import debug


class PublishError(RuntimeError):
    pass


def build_slack_payload(channel: Optional[str], batch: MessageBatch) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    if channel is not None:
        payload["channel"] = channel
    payload["blocks"] = batch.to_blocks()
    # texto de fallback para notificações do Slack
    payload["text"] = batch.header_text
    return payload


class SlackClient:
    def __init__(self, token: str, channel: str, api_url: str = SLACK_API_URL,
                 timeout: int = SLACK_TIMEOUT_SECONDS, debug_mode: bool = DEBUG_MODE):
        self.token = token
        self.channel = channel
        self.api_url = api_url
        self.timeout = timeout
        self.debug_mode = debug_mode

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json; charset=utf-8",
        }

    def post_batch(self, batch: MessageBatch) -> Dict[str, Any]:
        payload = build_slack_payload(self.channel, batch)
        try:
            resp = requests.post(self.api_url, headers=self._headers(), json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise PublishError(f"Failed to send message to Slack API: {exc}") from exc

        debug(f"Slack response: {resp.status_code}", self.debug_mode)
        if not resp.ok:
            raise PublishError(f"Slack API returned error status {resp.status_code}: {resp.text}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise PublishError(f"Failed to parse Slack API response: {exc}") from exc

        if not isinstance(data, dict) or not data.get("ok"):
            reason = data.get("error") if isinstance(data, dict) else None
            raise PublishError(f"Slack API returned error: {reason or 'unknown error'}")
        return data


def publish_batches(client: SlackClient, batches: Iterable[MessageBatch],
                    delay_seconds: float = SLACK_PUBLISH_DELAY_SECONDS) -> int:
    """Publica os lotes em ordem, um por vez.

    Um erro em qualquer lote interrompe o envio dos seguintes; a exceção
    (PublishError) sobe para o chamador.
    """
    batches = list(batches)
    sent = 0
    for index, batch in enumerate(batches, start=1):
        if index > 1 and delay_seconds > 0:
            time.sleep(delay_seconds)
        client.post_batch(batch)
        sent += 1
        print(f"Sent batch {index}/{len(batches)} to Slack ({len(batch)} blocks)")
    return sent
