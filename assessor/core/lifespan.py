from contextlib import asynccontextmanager
import logging

from assessor.core.config import settings
from assessor.services.assessment_service import build_assessment_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    engine = build_assessment_engine(settings)
    app.state.engine = engine
    try:
        yield
    finally:
        await engine.aclose()
        logger.info("assessment_engine_closed metrics=%s", engine.get_metrics().model_dump_json())
