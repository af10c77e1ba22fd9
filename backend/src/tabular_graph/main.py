"""FastAPI application entry - Tabular Graph service."""

import logging

from . import config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(
    title="Tabular Graph",
    description="Convert table rows into Graphviz node and edge tables",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/")
async def root():
    return {"service": "tabular-graph", "docs": "/docs"}
