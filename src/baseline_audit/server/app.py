"""
Collector HTTP service.

Endpoints:
- GET  /api/system-info         compliance report of the collector host
- POST /api/submit-system-info  accept and re-evaluate an agent's report
- GET  /api/all-system-info     latest report per system
- GET  /health                  liveness

Run with: baseline-audit serve, or
uvicorn baseline_audit.server.app:create_app --factory --port 3000
"""

from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from baseline_audit.core.aggregator import ReportAggregator
from baseline_audit.core.auditor import LocalAuditor
from baseline_audit.core.evaluator import ComplianceEvaluator
from baseline_audit.core.probe import HostProbe, Probe
from baseline_audit.core.requirements import FileRequirementSource, RequirementSource
from baseline_audit.core.store import ReportStore
from baseline_audit.utils.config import BaselineAuditConfig, get_config
from baseline_audit.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_PAYLOAD = "Invalid system information payload"


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------

def get_auditor(request: Request) -> LocalAuditor:
    return request.app.state.auditor


def get_aggregator(request: Request) -> ReportAggregator:
    return request.app.state.aggregator


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------

def create_app(
    store: ReportStore | None = None,
    requirement_source: RequirementSource | None = None,
    probe: Probe | None = None,
    config: BaselineAuditConfig | None = None,
) -> FastAPI:
    """Create the collector application.

    Args:
        store: Report store; a fresh in-memory store if None
        requirement_source: Baseline source; the configured requirements file if None
        probe: Host probe for the local report; HostProbe if None
        config: Configuration; the global configuration if None

    Returns:
        Configured FastAPI application
    """
    from baseline_audit import __version__

    config = config or get_config()
    store = store if store is not None else ReportStore()
    requirement_source = requirement_source or FileRequirementSource(config.requirements.path)
    probe = probe or HostProbe(
        scripts_dir=config.probe.scripts_dir,
        timeout=config.probe.timeout,
        shell=config.probe.shell,
    )
    evaluator = ComplianceEvaluator()

    app = FastAPI(
        title="baseline-audit collector",
        description="Collects firmware, driver and OS baseline compliance reports",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store
    app.state.auditor = LocalAuditor(probe, requirement_source, evaluator)
    app.state.aggregator = ReportAggregator(store, requirement_source, evaluator)

    _setup_error_handlers(app)
    _setup_routes(app)
    return app


def _setup_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Undecodable bodies get the same 400 contract as rejected payloads
        logger.warning("Rejected undecodable request to %s", request.url.path)
        return JSONResponse(status_code=400, content={"error": INVALID_PAYLOAD})


def _setup_routes(app: FastAPI) -> None:
    @app.get("/health")
    def health(aggregator: ReportAggregator = Depends(get_aggregator)) -> dict[str, Any]:
        return {"status": "healthy", "reports": len(aggregator.store)}

    @app.get("/api/system-info")
    def system_info(auditor: LocalAuditor = Depends(get_auditor)) -> JSONResponse:
        result = auditor.audit()
        if not result.success or result.report is None:
            return JSONResponse(status_code=500, content={"error": "Failed to fetch system information"})
        return JSONResponse(content=result.report.to_wire())

    @app.post("/api/submit-system-info")
    def submit_system_info(
        payload: Any = Body(default=None),
        aggregator: ReportAggregator = Depends(get_aggregator),
    ) -> JSONResponse:
        result = aggregator.ingest(payload)
        if not result.success or result.report is None:
            return JSONResponse(
                status_code=400,
                content={"error": result.first_error or INVALID_PAYLOAD},
            )
        return JSONResponse(
            content={
                "success": True,
                "message": "System information received and processed",
                "receivedData": result.report.to_wire(),
            }
        )

    @app.get("/api/all-system-info")
    def all_system_info(aggregator: ReportAggregator = Depends(get_aggregator)) -> JSONResponse:
        return JSONResponse(
            content={name: report.to_wire() for name, report in aggregator.reports().items()}
        )
