import logging
import time
from typing import Dict, List, Optional

import httpx

from investours.config import Config, settings
from investours.services.metrics_service import MetricsService

logger = logging.getLogger("AIGateway")


class GatewayError(Exception):
    status_code = 500
    message = "AI Gateway error"

    def __init__(self, message: Optional[str] = None, upstream_status: Optional[int] = None):
        self.message = message or self.message
        self.upstream_status = upstream_status
        super().__init__(self.message)


class GatewayNotConfiguredError(GatewayError):
    message = "AI_GATEWAY_API_KEY is not configured"


class GatewayRateLimitError(GatewayError):
    status_code = 429
    message = "Rate limit exceeded. Please try again later."


class GatewayPaymentRequiredError(GatewayError):
    status_code = 402
    message = "Service temporarily unavailable. Please try again later."


class GatewayResponseError(GatewayError):
    pass


class GatewayUnavailableError(GatewayError):
    message = "AI Gateway unreachable"


class GatewayClient:
    def __init__(self, config: Config = settings, http_client: Optional[httpx.Client] = None):
        self.api_key = config.AI_GATEWAY_API_KEY
        self.url = config.AI_GATEWAY_URL
        self.model = config.AI_MODEL
        self.http_client = http_client or httpx.Client(
            limits=httpx.Limits(max_connections=config.POOL_MAX_SIZE, max_keepalive_connections=10),
            timeout=config.AI_GATEWAY_TIMEOUT
        )

    def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        if not self.api_key:
            MetricsService.record_error("gateway", "NotConfigured")
            raise GatewayNotConfiguredError()

        start = time.time()
        try:
            response = self.http_client.post(
                self.url,
                headers={"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"},
                json={"model": self.model, "messages": messages}
            )
        except httpx.HTTPError as e:
            logger.error(f"AI Gateway request failed: {e}")
            MetricsService.record_error("gateway", type(e).__name__)
            raise GatewayUnavailableError() from e
        finally:
            MetricsService.record_latency("gateway", time.time() - start)

        if response.status_code == 429:
            MetricsService.record_error("gateway", "RateLimited")
            raise GatewayRateLimitError(upstream_status=429)
        if response.status_code == 402:
            MetricsService.record_error("gateway", "PaymentRequired")
            raise GatewayPaymentRequiredError(upstream_status=402)
        if not response.is_success:
            logger.error(f"AI Gateway error: {response.status_code} {response.text}")
            MetricsService.record_error("gateway", f"HTTP{response.status_code}")
            raise GatewayResponseError(f"AI Gateway error: {response.status_code}", upstream_status=response.status_code)

        try:
            data = response.json()
            return data["choices"][0]["message"]["content"] or None
        except (ValueError, KeyError, IndexError, TypeError):
            logger.warning(f"AI Gateway returned no completion content: {response.text[:500]}")
            return None

    def close(self):
        self.http_client.close()
