# incoming/services/merchant.py

"""
MERCHANT RELAY

Fire-and-forget POST of a decoded callback to the merchant API.

- JSON body, Content-Type: application/json
- the response status (or the transport error) is logged, nothing else
- no retry: delivery is at-most-once
- the webhook response never waits for the relay
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from incoming.services.config import WebhookConfig
from incoming.services.exceptions import ForwardError

logger = logging.getLogger(__name__)


def call_merchant(url: str, payload: dict, *, timeout: int = 25) -> int | None:
    """
    POST payload to url. Returns the HTTP status, or None when the request
    never got a response. Never raises.
    """
    data = json.dumps(payload, ensure_ascii=False).encode("utf-8")

    req = Request(
        url,
        data=data,
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        method="POST",
    )

    logger.info("Forwarding callback to merchant", extra={"url": url})

    try:
        with urlopen(req, timeout=timeout) as resp:
            code = resp.status
    except HTTPError as e:
        logger.warning("Merchant rejected callback", extra={"url": url, "status": e.code})
        return e.code
    except (URLError, OSError, ValueError) as e:
        logger.error("Error calling merchant", extra={"url": url, "error": str(e)})
        return None

    logger.info("Merchant responded", extra={"url": url, "status": code})
    return code


class MerchantForwarder:
    """
    Owns the worker pool used for relays. Work is queued without bound and
    the returned Future is only useful to tests; callers do not wait on it.
    """

    def __init__(self, config: WebhookConfig, *, executor: Executor | None = None, sender=None):
        self.config = config
        self.executor = executor or ThreadPoolExecutor(
            max_workers=config.forward_workers,
            thread_name_prefix="MerchantForward",
        )
        self.sender = sender or call_merchant

    def forward(self, payload: dict, *, url: str | None = None) -> Future:
        target = url or self.config.merchant_deposit_url
        try:
            return self.executor.submit(
                self.sender, target, payload, timeout=self.config.forward_timeout
            )
        except RuntimeError as exc:
            # executor already shut down (process exiting)
            raise ForwardError(f"could not schedule merchant forward: {exc}") from exc
