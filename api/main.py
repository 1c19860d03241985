from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import bootstrap, db, errors, log, settings
from departments import router as departments_router
from employees import router as employees_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Pool + optional bootstrap must succeed before the port is bound.
    try:
        await db.init_pool()
        logger.info("db_pool_ready")
        if settings.bootstrap_on_startup():
            await bootstrap.bootstrap_schema()
        else:
            logger.info("bootstrap_skipped")
    except Exception:
        logger.exception("startup_failed")
        await db.close_pool()
        raise
    try:
        yield
    finally:
        await db.close_pool()
        logger.info("db_pool_closed")


app = FastAPI(title="Acme HR Directory", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log.log_requests)

errors.register_error_handlers(app)

app.include_router(departments_router.router, tags=["departments"])
app.include_router(employees_router.router, tags=["employees"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "acme hr directory api"}


def run() -> None:
    """
    Process entry point. uvicorn exits non-zero if the lifespan startup fails.
    """
    log.setup_logging(settings.log_level())
    uvicorn.run(app, host=settings.host(), port=settings.port(), log_config=None)


if __name__ == "__main__":
    run()
