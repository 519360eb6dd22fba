"""Report API client: httpx wrapper around the reports endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from reportview.config import settings
from reportview.models.report import Report, ReportStatus, parse_report

logger = logging.getLogger(__name__)


@dataclass
class ReportStats:
    """Status counts for a list of report summaries."""

    total: int = 0
    completed: int = 0
    processing: int = 0
    failed: int = 0

    @classmethod
    def from_reports(cls, reports: list[dict]) -> ReportStats:
        statuses = [ReportStatus.parse(r.get("status")) for r in reports if isinstance(r, dict)]
        return cls(
            total=len(statuses),
            completed=statuses.count(ReportStatus.COMPLETED),
            processing=statuses.count(ReportStatus.PROCESSING),
            failed=statuses.count(ReportStatus.FAILED),
        )

    @property
    def any_processing(self) -> bool:
        return self.processing > 0


class ReportClient:
    """Async client for the report API.

    HTTP and transport errors are raised as-is (``httpx.HTTPStatusError``,
    ``httpx.TransportError``); nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def list_reports(self, limit: int = 50, offset: int = 0) -> list[dict]:
        data = await self._request("GET", "/api/reports", params={"limit": limit, "offset": offset})
        reports = data.get("reports")
        return reports if isinstance(reports, list) else []

    async def fetch_report(self, report_id: str) -> Report:
        data = await self._request("GET", f"/api/reports/{report_id}")
        report = parse_report(data)
        logger.info("Fetched report %s (%s)", report_id, report.status.value)
        return report

    async def fetch_shared_report(self, token: str) -> Report:
        data = await self._request("GET", f"/api/reports/shared/{token}")
        return parse_report(data)

    async def delete_report(self, report_id: str) -> None:
        await self._request("DELETE", f"/api/reports/{report_id}")
        logger.info("Deleted report %s", report_id)

    # -- Sharing --

    async def get_share_token(self, report_id: str) -> str | None:
        data = await self._request("GET", f"/api/reports/{report_id}/share")
        return data.get("share_token")

    async def create_share_token(self, report_id: str) -> str | None:
        data = await self._request("POST", f"/api/reports/{report_id}/share")
        return data.get("share_token")

    async def revoke_share_token(self, report_id: str) -> None:
        await self._request("DELETE", f"/api/reports/{report_id}/share")

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Content-Type": "application/json"},
        ) as client:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
        if not response.content:
            return {}
        data = response.json()
        return data if isinstance(data, dict) else {}
