"""
Server entry point — FastAPI app exposing the resource budget audit.
"""

from __future__ import annotations

import os
from typing import Any

import dotenv
import fastapi
import pydantic
import uvicorn
from fastapi.middleware import cors

from resource_budget import __version__, config
from resource_budget.analysis import budget_audit
from resource_budget.data import loader
from resource_budget.models import artifacts as artifacts_models
from resource_budget.models.network import NetworkRequest
from resource_budget.utils import logger, serialization
from resource_budget.utils.errors import get_error_message

dotenv.load_dotenv()

log = logger.create_logger("Server")

HOST = os.environ.get("UVICORN_HOST", "0.0.0.0")
PORT = int(os.environ.get("UVICORN_PORT", "3001"))

app = fastapi.FastAPI(title="Resource Budget Server", version=__version__)

app.add_middleware(
    cors.CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class AuditRequest(pydantic.BaseModel):
    """Body of ``POST /api/resource-budget``."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    final_url: str | None = None
    requested_url: str | None = None
    network_requests: list[NetworkRequest] = pydantic.Field(default_factory=list)
    budgets: list[Any] | None = None


def _configured_budgets(settings: config.AuditSettings) -> list[Any] | None:
    """Budgets from settings, falling back to the budget.json at ``budget_path``."""
    if settings.budgets is not None or not settings.budget_path:
        return settings.budgets
    try:
        return loader.load_budgets(settings.budget_path)
    except (OSError, ValueError) as exc:
        log.error("Could not load budget file", {"path": settings.budget_path, "error": get_error_message(exc)})
        return None


# ============================================================================
# API Routes
# ============================================================================


@app.get("/api/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "version": __version__}


@app.post("/api/resource-budget")
async def resource_budget_endpoint(body: AuditRequest) -> dict[str, Any]:
    """Run the resource budget audit over the posted network requests."""
    settings = config.AuditSettings()
    budgets = body.budgets if body.budgets is not None else _configured_budgets(settings)

    audit_artifacts = artifacts_models.Artifacts(
        network_requests=tuple(body.network_requests),
        url=artifacts_models.PageUrl(requested_url=body.requested_url, final_url=body.final_url),
    )
    context = artifacts_models.AuditContext(settings=settings.model_copy(update={"budgets": budgets}))

    log.start_timer("audit")
    result = await budget_audit.audit(audit_artifacts, context)
    log.end_timer("audit", "Resource budget audit complete")
    return result.model_dump(by_alias=True, exclude_none=True)


def main() -> None:
    """Run the server with uvicorn."""
    log.section("Resource Budget Server Started")
    log.info("Listening", {"host": HOST, "port": PORT})
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
