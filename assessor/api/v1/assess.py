import json
import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from assessor.core.config import settings
from assessor.core.rate_limit import rate_limit
from assessor.core.security import check_api_key
from assessor.schemas.assessment import EngineMetrics
from assessor.services.assessment_service import AssessmentEngine, build_assessment_engine, validate_input
from assessor.services.errors import AssessmentError, AssessmentValidationError, classify_error

logger = logging.getLogger(__name__)

router = APIRouter()


def get_engine(request: Request) -> AssessmentEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        engine = build_assessment_engine(settings)
        request.app.state.engine = engine
    return engine


def _error_response(exc: Exception, started: float) -> JSONResponse:
    classified = classify_error(exc)
    if isinstance(exc, AssessmentError):
        logger.info("assessment_rejected code=%s message=%s", classified.code, classified.message)
    else:
        logger.exception("assessment_failed code=%s", classified.code)
    return JSONResponse(
        status_code=classified.status_code,
        content={
            "error": classified.message,
            "code": classified.code,
            "message": classified.message,
            "suggestion": classified.suggestion,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "processing_time_ms": int((time.perf_counter() - started) * 1000),
        },
        headers={"X-Error": "true", "X-Error-Code": classified.code},
    )


@router.post("/assess", summary="Assess AI impact", description="Score how exposed a role is to AI disruption.")
@rate_limit()
async def assess(
    request: Request,
    engine: AssessmentEngine = Depends(get_engine),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    started = time.perf_counter()
    try:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise AssessmentValidationError("Request body must be valid JSON") from exc
        assessment_input = validate_input(payload)
        result = await engine.assess(assessment_input)
    except Exception as exc:  # noqa: BLE001 - every failure is rendered through the error taxonomy
        return _error_response(exc, started)

    processing_ms = int((time.perf_counter() - started) * 1000)
    return JSONResponse(
        content=result.model_dump(mode="json"),
        headers={
            "X-Processing-Time": str(processing_ms),
            "X-Enhanced-Analysis": "true" if result.enhanced_analysis else "false",
        },
    )


@router.get("/metrics", response_model=EngineMetrics, summary="Engine metrics")
async def metrics(
    engine: AssessmentEngine = Depends(get_engine),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> EngineMetrics:
    check_api_key(x_api_key)
    return engine.get_metrics()
