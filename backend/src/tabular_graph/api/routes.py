"""API routes - table to graph."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ..models import GraphRequest, GraphResponse
from ..services.build_graph import TooManyRows, run_build

router = APIRouter(prefix="/api", tags=["api"])


@router.post("/graph", response_model=GraphResponse)
async def api_graph(body: GraphRequest):
    """Build node and edge tables (and DOT text) from rows and a relationship descriptor."""
    try:
        result = run_build(body)
    except TooManyRows as e:
        raise HTTPException(413, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))
    return GraphResponse(**result)
