from datetime import datetime, timezone

from fastapi import APIRouter, Request

from assessor.schemas.assessment import MAX_CONTENT_LENGTH, MIN_CONTENT_LENGTH

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check(request: Request):
    engine = getattr(request.app.state, "engine", None)
    enhanced = bool(engine is not None and engine.enhanced_available)
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "mode": "enhanced" if enhanced else "standard",
        "services": {
            "assessment_engine": "operational" if engine is not None else "not_started",
            "insights": "operational" if enhanced else "not_configured",
        },
        "limits": {
            "min_content_length": MIN_CONTENT_LENGTH,
            "max_content_length": MAX_CONTENT_LENGTH,
        },
    }
