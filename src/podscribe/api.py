"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from podscribe.routes import transcriptions_router

patch_all()

app = FastAPI(title="Podscribe Start Service")
app.include_router(transcriptions_router)
