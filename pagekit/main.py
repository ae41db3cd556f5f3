import time
import uuid

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from pagekit.core.config import get_settings
from pagekit.core.exceptions import (
    AppError,
    app_exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)
from pagekit.core.logging import bind_request_id, clear_request_context, configure_logging, get_logger
from pagekit.db.init import init_db
from pagekit.db.seed import demo_articles
from pagekit.routers import articles

settings = get_settings()
configure_logging(debug=settings.debug, level=settings.log_level)
log = get_logger(__name__)

app = FastAPI(
    title="pagekit API",
    version="1.0.0",
)

# Rows served by the memory storage backend
app.state.articles = []

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_id_middleware(request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    clear_request_context()
    bind_request_id(request_id)
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    log.info(
        "request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    response.headers["X-Request-ID"] = request_id
    return response


app.add_exception_handler(AppError, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Routers
app.include_router(articles.router, prefix="/v1/articles", tags=["articles"])


@app.on_event("startup")
async def startup():
    if settings.storage_backend == "mongo":
        await init_db()
        log.info("startup", msg="DB connected")
    else:
        app.state.articles = demo_articles(settings.memory_seed_articles)
        log.info("startup", msg="Memory storage backend", articles=len(app.state.articles))


@app.get("/health")
async def health():
    """Health check for load balancers and monitoring."""
    return {"status": "ok"}
