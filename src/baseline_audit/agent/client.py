"""HTTP client for talking to a baseline-audit collector."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, Field

from baseline_audit.models.compliance import ComplianceReport
from baseline_audit.utils.errors import NetworkError, retry
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)

SUBMIT_PATH = "/api/submit-system-info"
ALL_REPORTS_PATH = "/api/all-system-info"


class SubmissionReceipt(BaseModel):
    """The collector's answer to a submission."""

    model_config = {"frozen": True, "populate_by_name": True}

    success: bool = Field(description="Whether the collector accepted the report")
    message: str = Field(default="", description="Collector message")
    received: ComplianceReport | None = Field(
        default=None,
        alias="receivedData",
        description="The report as re-evaluated and stored by the collector",
    )


class CollectorClient:
    """Client for a collector's submission and aggregate endpoints.

    Example:
        client = CollectorClient("http://collector:3000")
        receipt = client.submit(report)
        print(receipt.message)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the collector client.

        Args:
            base_url: Collector base URL
            timeout: Request timeout in seconds
            max_retries: Maximum number of connection retries
            transport: Custom transport (mainly for tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.Client:
        """Create an HTTP client with retry support."""
        transport = self._transport or httpx.HTTPTransport(retries=self._max_retries)
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=transport,
            follow_redirects=True,
        )

    def submit(self, report: ComplianceReport) -> SubmissionReceipt:
        """Send a report to the collector.

        The collector recomputes every status; the returned receipt holds
        its authoritative version of the report.

        Raises:
            NetworkError: If the collector is unreachable or rejects the report
        """
        data = self._request("POST", SUBMIT_PATH, json=report.to_wire())
        receipt = SubmissionReceipt.model_validate(data)
        logger.info("System info sent successfully to %s", self._base_url)
        return receipt

    def fetch_reports(self) -> dict[str, ComplianceReport]:
        """Fetch the latest report of every system known to the collector.

        Raises:
            NetworkError: If the collector is unreachable or answers with an error
        """
        data = self._request("GET", ALL_REPORTS_PATH)
        if not isinstance(data, dict):
            raise NetworkError("Unexpected response from collector", url=self._url(ALL_REPORTS_PATH))
        return {name: ComplianceReport.model_validate(item) for name, item in data.items()}

    @retry(max_attempts=2, delay=0.5, exceptions=(httpx.TimeoutException,))
    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        with self._get_client() as client:
            return client.request(method, path, **kwargs)

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self._url(path)
        try:
            response = self._send(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Error sending request to %s: %s", url, e)
            raise NetworkError(f"Failed to reach collector: {e}", url=url) from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error("Collector rejected request to %s: %s", url, message)
            raise NetworkError(message, url=url, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON from collector: {e}", url=url) from e

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return f"Collector returned HTTP {response.status_code}"
