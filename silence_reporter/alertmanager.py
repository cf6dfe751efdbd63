from typing import Dict, List

import requests
import urllib3

from .constants import (
    ALERTMANAGER_SILENCES_PATH,
    ALERTMANAGER_TIMEOUT_SECONDS,
    ALERTMANAGER_VERIFY_TLS,
    DEBUG_MODE,
)
from .models import Silence
from .utils import debug


class FetchError(RuntimeError):
    pass


class AlertmanagerClient:
    def __init__(self, base_url: str, timeout: int = ALERTMANAGER_TIMEOUT_SECONDS,
                 verify_tls: bool = ALERTMANAGER_VERIFY_TLS, debug_mode: bool = DEBUG_MODE):
        if not base_url:
            raise ValueError("Alertmanager URL não configurada")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.debug_mode = debug_mode

        # Suprime avisos de HTTPS inseguro quando a verificação TLS está desativada
        if not self.verify_tls:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            debug("Avisos de InsecureRequestWarning desabilitados (ALERTMANAGER_VERIFY_TLS=false)", self.debug_mode)

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    @property
    def silences_url(self) -> str:
        return f"{self.base_url}{ALERTMANAGER_SILENCES_PATH}"

    def _request(self, method: str, url: str) -> requests.Response:
        try:
            resp = requests.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                verify=self.verify_tls,
            )
        except requests.RequestException as exc:
            raise FetchError(f"Failed to send request to Alertmanager: {exc}") from exc

        debug(f"Alertmanager response: {resp.status_code}", self.debug_mode)
        if not resp.ok:
            raise FetchError(f"Alertmanager returned error status: {resp.status_code}")
        return resp

    def fetch_silences(self) -> List[Silence]:
        resp = self._request("GET", self.silences_url)
        try:
            data = resp.json()
        except ValueError as exc:
            raise FetchError(f"Failed to parse JSON response from Alertmanager: {exc}") from exc

        if not isinstance(data, list):
            raise FetchError(f"Unexpected Alertmanager payload: expected a list, got {type(data).__name__}")

        try:
            silences = [Silence.from_dict(item) for item in data]
        except ValueError as exc:
            raise FetchError(f"Failed to parse silence from Alertmanager: {exc}") from exc

        debug(f"{len(silences)} silences lidos de {self.silences_url}", self.debug_mode)
        return silences
