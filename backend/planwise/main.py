import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planwise.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(settings.log_dir)
_LOG_DIR.mkdir(parents=True, exist_ok=True)

_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "planwise.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)
logging.getLogger("anthropic").setLevel(logging.WARNING)

from planwise.routers import coverage, estimator, recommendations, reference, speed_test

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from planwise.services.llm_client import llm_client

    if not llm_client.configured:
        logger.warning("No LLM API key configured — recommendations will fail until one is set")

    yield

    # Shutdown: no timer may outlive the app
    from planwise.services.speed_test import speed_test as _speed_test
    await _speed_test.close()
    logger.info("Speed test timer released")


app = FastAPI(
    title="PlanWise",
    description="Telecom Plan Finder",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reference.router, prefix="/api/reference", tags=["reference"])
app.include_router(recommendations.router, prefix="/api/recommendations", tags=["recommendations"])
app.include_router(estimator.router, prefix="/api/estimator", tags=["estimator"])
app.include_router(coverage.router, prefix="/api/coverage", tags=["coverage"])
app.include_router(speed_test.router, prefix="/api/speed-test", tags=["speed-test"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "planwise"}
