import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import database
from app.routers.auth import router as auth_router
from app.routers.bookings import router as bookings_router
from app.routers.cars import router as cars_router
from app.seed import seed_data
from app.utils.exceptions import register_exception_handlers
from app.utils.response import success_response

logger = logging.getLogger(__name__)

SERVICE_NAME = "carcloud-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await database.connect()
    if settings.seed_demo_data:
        async with database.session() as session:
            await seed_data(session)
    logger.info("%s started in %s mode", SERVICE_NAME, settings.environment)
    try:
        yield
    finally:
        await database.disconnect()


app = FastAPI(
    title="CarCloud API",
    description="Backend API for the CarCloud peer-to-peer car rental marketplace",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(cars_router)
app.include_router(bookings_router)


@app.get("/")
async def root():
    return success_response(message="Server running")


@app.get("/health")
async def health_check():
    return success_response(data={"service": SERVICE_NAME, "version": VERSION})
