# pocketbase_client/infra/http/transport.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import requests

from pocketbase_client.core.errors import TransportError
from pocketbase_client.core.logger import REQUEST_ID_HEADER, request_context

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """
    Raw outcome of one HTTP exchange.

    :param status: HTTP status code.
    :param url: Requested URL.
    :param text: Decoded response body (possibly empty).
    :param elapsed_ms: Wall-clock duration of the exchange.
    """

    status: int
    url: str
    text: str
    elapsed_ms: int


class HttpTransport:
    """
    Adapter over one :class:`requests.Session`.

    The session (and its connection pool) is shared by every service built
    from the same client. Bodies are returned as text whatever the status:
    interpreting them is the services' job.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        user_agent: str | None = None,
    ) -> None:
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> HttpResponse:
        """
        Send a request and read the full body.

        :param method: HTTP verb.
        :param url: Absolute URL.
        :param headers: Extra headers (e.g., ``Authorization``).
        :param json: Optional JSON-serializable body.
        :returns: Status and body text.
        :raises TransportError: When no response could be obtained.
        """
        with request_context() as request_id:
            all_headers = {REQUEST_ID_HEADER: request_id, **(headers or {})}
            t0 = time.perf_counter()
            try:
                resp = self.session.request(method, url, headers=all_headers, json=json)
                text = resp.text
            except requests.RequestException as exc:
                log.error(
                    "HTTP %s %s failed: %s",
                    method,
                    url,
                    exc,
                    extra={"method": method, "url": url},
                )
                raise TransportError(str(exc)) from exc
            elapsed_ms = int((time.perf_counter() - t0) * 1000)
            log.debug(
                "HTTP %s %s -> %s",
                method,
                url,
                resp.status_code,
                extra={
                    "method": method,
                    "url": url,
                    "status": resp.status_code,
                    "elapsed_ms": elapsed_ms,
                },
            )
            return HttpResponse(status=resp.status_code, url=url, text=text, elapsed_ms=elapsed_ms)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()
