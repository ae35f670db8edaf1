"""FastAPI application for the Go/No-Go engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from gonogo.config.settings import Settings
from gonogo.engine.evaluator import DecisionEngine
from gonogo.export.serializers import evaluation_to_dict
from gonogo.export.snapshot import (
    build_snapshot,
    dump_snapshot,
    save_snapshot,
    snapshot_filename,
)
from gonogo.models.inputs import EvaluationInputs
from gonogo.seed.loader import get_default_inputs

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Go/No-Go API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = DecisionEngine()


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/defaults")
async def defaults():
    """Seed input state for a new session."""
    return get_default_inputs().model_dump(mode="json", by_alias=True)


@app.post("/api/evaluations")
async def create_evaluation(body: EvaluationInputs):
    """Score the posted inputs and return the full evaluation."""
    return evaluation_to_dict(engine.evaluate(body))


@app.post("/api/snapshots")
async def create_snapshot(body: EvaluationInputs):
    """Return the input snapshot as a JSON download."""
    snapshot = build_snapshot(body)
    filename = snapshot_filename(body)

    if settings.snapshot_dir is not None:
        try:
            save_snapshot(body, settings.snapshot_dir)
        except OSError as e:
            logger.exception(f"Snapshot write failed for {filename}")
            raise HTTPException(status_code=500, detail=f"Could not save snapshot: {e}")

    return Response(
        content=dump_snapshot(snapshot),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
