import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from assessor.api.v1.assess import router as assess_router
from assessor.api.v1.health import router as health_router
from assessor.core.cors import cors_options
from assessor.core.rate_limit import limiter
from assessor.core.config import settings
from assessor.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="AI Impact Assessor API", version="0.1.0", lifespan=lifespan)

app.add_middleware(CORSMiddleware, **cors_options(settings))
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(assess_router, prefix="/v1", tags=["Assessment"])
