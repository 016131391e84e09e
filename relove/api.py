"""
relove/api.py
─────────────────────────────────────────────────────────────────────────────
Relove Coach — Dual-mode API layer

TWO USAGE MODES:
  1. Importable module:
         from relove.api import CoachAPI
         api = CoachAPI()
         verdict = api.greenlight({"scenario": "hot_cold", ...})

  2. FastAPI HTTP server (React client via fetch()):
         python -m relove.api                   # default: port 8765
         python -m relove.api --port 9000
         uvicorn relove.api:app --port 8765

ENDPOINTS:
  GET  /api/health              — service liveness
  POST /api/daily-action        — mission or message for today
  POST /api/safe-text-rewrite   — score + rewrite a draft message
  POST /api/greenlight          — red / yellow / green contact verdict
  POST /api/analyze-text        — raw risk scan (telemetry / debugging)

ERRORS:
  400 {"message": "Invalid request data", "errors": [...]}   bad input
  500 {"message": "Internal server error"}                    anything else

Nothing is persisted. The rule engine is called in-process; this module
only validates, dispatches and serializes.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from relove import __version__
from relove.config import DEFAULT_CONFIG, ensure_config
from relove.detectors.keyword_detector import analyze_text
from relove.errors import InvalidInput
from relove.models.schema import SafeTextRequest, parse_request
from relove.rules import check_greenlight, rewrite_safe_text, select_daily_action
from relove.rules.picker import Picker

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# IMPORTABLE CLASS
# ═══════════════════════════════════════════════════════════════════════════

class CoachAPI:
    """
    Plain-Python facade over the rule engine. Takes mappings, returns dicts.
    Raises relove.errors.InvalidInput on malformed payloads.

    picker: optional Picker shared by every call (tests pass first_picker);
            None means a fresh random picker per call.
    """

    def __init__(self, service_name: str = DEFAULT_CONFIG["service_name"],
                 picker: Optional[Picker] = None):
        self.service_name = service_name
        self.picker = picker

    def health(self) -> Dict[str, Any]:
        return {
            "ok":      True,
            "service": self.service_name,
            "time":    datetime.now(timezone.utc).isoformat(),
        }

    def daily_action(self, payload: Any) -> Dict[str, Any]:
        return select_daily_action(payload, picker=self.picker).model_dump(exclude_none=True)

    def safe_text(self, payload: Any) -> Dict[str, Any]:
        return rewrite_safe_text(payload, picker=self.picker).model_dump()

    def greenlight(self, payload: Any) -> Dict[str, Any]:
        return check_greenlight(payload, picker=self.picker).model_dump()

    def analyze(self, payload: Any) -> Dict[str, Any]:
        req = parse_request(SafeTextRequest, payload)
        result = asdict(analyze_text(req.text))
        result["issues"] = list(result["issues"])
        return result


# ═══════════════════════════════════════════════════════════════════════════
# FASTAPI HTTP APP
# ═══════════════════════════════════════════════════════════════════════════

def _invalid(errors: List[Dict[str, Any]]) -> JSONResponse:
    return JSONResponse(
        status_code = 400,
        content     = {"message": "Invalid request data", "errors": errors},
    )


def _build_app(config: Optional[Dict[str, Any]] = None,
               picker: Optional[Picker] = None) -> FastAPI:
    """Build and return the FastAPI application instance."""
    cfg = {**DEFAULT_CONFIG, **(config or {})}
    _api = CoachAPI(service_name=cfg["service_name"], picker=picker)

    _app = FastAPI(
        title       = "Relove Coach API",
        description = "Deterministic breakup-recovery coaching rules",
        version     = __version__,
        docs_url    = "/docs",
        redoc_url   = None,
    )

    _app.add_middleware(
        CORSMiddleware,
        allow_origins     = list(cfg["cors_origins"]),
        allow_methods     = ["GET", "POST", "OPTIONS"],
        allow_headers     = ["Content-Type"],
        allow_credentials = False,
    )

    @_app.exception_handler(InvalidInput)
    async def _on_invalid_input(request: Request, exc: InvalidInput):
        logger.info(f"Rejected {request.url.path}: {exc}")
        return _invalid(exc.errors)

    @_app.exception_handler(RequestValidationError)
    async def _on_request_validation(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected {request.url.path}: malformed body")
        return _invalid([
            {"path": list(e.get("loc", ())), "message": e.get("msg", ""), "code": e.get("type", "")}
            for e in exc.errors()
        ])

    @_app.exception_handler(Exception)
    async def _on_error(request: Request, exc: Exception):
        logger.error(f"{request.url.path} failed: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    # ── ENDPOINTS ───────────────────────────────────────────────────────

    @_app.get("/api/health", summary="Health check")
    def health():
        return _api.health()

    @_app.post("/api/daily-action", summary="Select today's action")
    def daily_action(payload: Any = Body(None)):
        """Mission or outreach message, chosen by an ordered rule table."""
        return _api.daily_action(payload)

    @_app.post("/api/safe-text-rewrite", summary="Rewrite a draft message")
    def safe_text(payload: Any = Body(None)):
        """Safety score (higher = safer), issues, rewrite, two alternatives, notes."""
        return _api.safe_text(payload)

    @_app.post("/api/greenlight", summary="Contact timing verdict")
    def greenlight(payload: Any = Body(None)):
        """
        red / yellow / green with reason and wait_hours.
        On the blocked branch wait_hours is 0 and wait_indefinite is true.
        """
        return _api.greenlight(payload)

    @_app.post("/api/analyze-text", summary="Raw risk scan")
    def analyze(payload: Any = Body(None)):
        """Category flags, raw risk score (higher = riskier) and every tag that fired."""
        return _api.analyze(payload)

    return _app


# Module-level app instance — used by uvicorn relove.api:app
app = _build_app()


# ═══════════════════════════════════════════════════════════════════════════
# ENTRYPOINT — python -m relove.api
# ═══════════════════════════════════════════════════════════════════════════

def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the API under uvicorn with settings from relove_config.json."""
    import uvicorn

    cfg = ensure_config()
    host = host or cfg["host"]
    port = port or cfg["port"]
    logger.info(f"Relove Coach API v{__version__} on http://{host}:{port} (docs: /docs)")
    uvicorn.run(
        _build_app(cfg),
        host      = host,
        port      = port,
        log_level = cfg["log_level"].lower(),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        prog        = "relove.api",
        description = "Relove Coach API server",
    )
    parser.add_argument("--port", type=int, default=None,
                        help="Port to bind (default: from config, 8765)")
    parser.add_argument("--host", type=str, default=None,
                        help="Host to bind — DO NOT change to 0.0.0.0 on shared networks")
    args = parser.parse_args()

    logging.basicConfig(
        level   = logging.INFO,
        format  = '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt = '%H:%M:%S',
    )
    serve(host=args.host, port=args.port)
