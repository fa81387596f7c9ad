import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parnaioca.api.v1.api import api_router
from parnaioca.core.config import settings
from parnaioca.core.database import data_source
from parnaioca.core.exception_handlers import EXCEPTION_HANDLERS

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await data_source.initialize()
    mode = "demonstration" if data_source.is_fixture else "remote"
    logger.info(f"{settings.APP_NAME} started with the {mode} data source")
    yield
    await data_source.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="Management dashboard for the Parnaioca inn",
    version="1.0.0",
    lifespan=lifespan,
)

# Register exception handlers
for exception_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exception_class, handler)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {
        "message": settings.APP_NAME,
        "version": "1.0.0",
        "demo_mode": data_source.is_fixture,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
