import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.cors import CORSMiddleware

from app.api.routes import activity, auth, checkin, dashboard, health, member, volunteer
from app.core.config import get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.logging_middleware import LoggingMiddleware
from app.core.rate_limit import limiter, rate_limit_exceeded_handler
from app.db.init_db import init_db

settings = get_settings()
setup_logging(log_dir=settings.LOG_DIR, environment=settings.ENVIRONMENT)
logger = logging.getLogger("app.main")

app = FastAPI(title="Membership API")


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting up with {settings.get_environment_config()}")
    init_db()


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(LoggingMiddleware)

app.state.limiter = limiter
register_exception_handlers(app)
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(member.router, prefix="/api/members", tags=["Members"])
app.include_router(activity.router, prefix="/api/activities", tags=["Activities"])
app.include_router(checkin.router, prefix="/api/checkins", tags=["Checkins"])
app.include_router(volunteer.router, prefix="/api/volunteers", tags=["Volunteers"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])

# Mount static files for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
