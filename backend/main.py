import asyncio
import time
from typing import List, Optional

import psutil
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import logger, settings
from exceptions import FactCheckException, ValidationException
from middleware import RequestContextMiddleware, get_request_id, request_counts
from models import (
    ErrorResponse,
    EvidenceItem,
    HealthResponse,
    StatsResponse,
    VerificationResult,
    VerifyRequest,
)
from services import VerificationService
from utils.cache import ResultCache, run_periodic_sweep
from utils.validation import InputValidator

START_TIME = time.time()

app = FastAPI(title="Fact-Checker API")
app.state.cache = ResultCache()
app.state.service = VerificationService()
app.state.sweep_task = None


@app.on_event("startup")
async def startup_event():
    logger.info("Startup: %d knowledge sources registered: %s",
                len(app.state.service.providers),
                ", ".join(p.name for p in app.state.service.providers))
    app.state.sweep_task = asyncio.create_task(run_periodic_sweep(app.state.cache))


@app.on_event("shutdown")
async def shutdown_event():
    task = app.state.sweep_task
    if task is not None:
        task.cancel()
        app.state.sweep_task = None


app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FactCheckException)
async def fact_check_exception_handler(request: Request, exc: FactCheckException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump(by_alias=True),
    )


def _now_ms() -> int:
    return int(time.time() * 1000)


@app.get("/")
async def root():
    return {"status": "ok", "message": "Fact-Checker API is running. See /verify, /api/search or /api/stats."}


@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="OK", timestamp=_now_ms())


@app.post("/verify", response_model=VerificationResult)
async def verify(req: VerifyRequest, request: Request):
    """Fact-check a passage, serving repeated passages from the result cache."""
    text = InputValidator.validate_text(req.text)

    cache: ResultCache = request.app.state.cache
    cache_key = f"full_verify_{text[:100]}"
    if (cached := cache.get(cache_key)) is not None:
        logger.info("Verification result served from cache.")
        return cached

    try:
        result = await request.app.state.service.fact_check(text)
    except Exception as e:
        logger.exception(f"Unhandled error during fact-check (request {get_request_id()})")
        return JSONResponse(
            status_code=500,
            content={"error": "Fact-checking failed", "message": str(e)},
        )

    cache.set(cache_key, result)
    return result


@app.get("/api/search", response_model=List[EvidenceItem])
async def search(request: Request, query: Optional[str] = None, source: Optional[str] = None):
    """Query a single knowledge source by name."""
    query = InputValidator.sanitize_query_parameter(query)
    source = InputValidator.sanitize_query_parameter(source, max_length=50)
    if not query or not source:
        raise ValidationException("query/source", "query and source are required")

    cache: ResultCache = request.app.state.cache
    cache_key = f"search_{source}_{query}"
    if (cached := cache.get(cache_key)) is not None:
        return cached

    try:
        results = await request.app.state.service.search_source(source, query)
    except ValidationException:
        raise
    except Exception as e:
        logger.exception(f"Search failed for source {source}")
        return JSONResponse(status_code=500, content={"error": "Search failed", "message": str(e)})

    cache.set(cache_key, results)
    return results


@app.get("/api/stats", response_model=StatsResponse)
async def stats(request: Request):
    memory = psutil.Process().memory_info()
    return StatsResponse(
        cache_size=len(request.app.state.cache),
        uptime=round(time.time() - START_TIME, 3),
        memory={"rss": memory.rss, "vms": memory.vms},
        requests=request_counts(),
        timestamp=_now_ms(),
    )
