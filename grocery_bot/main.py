# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from . import db
from .config import CORS_ORIGINS
from .logging_config import setup_logging
from .routes import voice_router, grocery_list_router

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db.init_db()
    logger.info("Grocery bot started")
    yield


app = FastAPI(
    title="Grocery Bot API",
    description="Voice and text commands for a grocery list",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health() -> Dict[str, str]:
    return {"status": "ok"}


api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(voice_router)
api_v1_router.include_router(grocery_list_router)

app.include_router(api_v1_router)

app.include_router(voice_router)
app.include_router(grocery_list_router)
