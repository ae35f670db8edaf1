"""Snapshot export of the raw input state.

A snapshot holds the inputs (not the derived decision) and the time it
was saved. It is a download, not an import format.
"""

from __future__ import annotations

import json
import logging
import re
import unicodedata
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from gonogo.models.inputs import EvaluationInputs

logger = logging.getLogger(__name__)

DEFAULT_SLUG = "projeto"


def slugify(text: str) -> str:
    """ASCII, lowercase, hyphen-separated: 'Residencial Vista Mar' -> 'residencial-vista-mar'."""
    ascii_text = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    return re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-")


def build_snapshot(
    inputs: EvaluationInputs, now: Optional[datetime] = None
) -> dict[str, Any]:
    saved_at = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return {
        "savedAt": saved_at.isoformat().replace("+00:00", "Z"),
        **inputs.model_dump(mode="json", by_alias=True),
    }


def snapshot_filename(inputs: EvaluationInputs, now: Optional[datetime] = None) -> str:
    day = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).date()
    slug = slugify(inputs.project.name) or DEFAULT_SLUG
    return f"go-no-go-{slug}-{day.isoformat()}.json"


def dump_snapshot(snapshot: dict[str, Any]) -> str:
    return json.dumps(snapshot, ensure_ascii=False, indent=2)


def save_snapshot(
    inputs: EvaluationInputs,
    directory: Path,
    now: Optional[datetime] = None,
) -> Path:
    """Write the snapshot into ``directory`` and return its path.

    Filesystem errors propagate to the caller.
    """
    now = now or datetime.now(timezone.utc)
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / snapshot_filename(inputs, now)
    path.write_text(dump_snapshot(build_snapshot(inputs, now)), encoding="utf-8")
    logger.info("Saved snapshot for %r to %s", inputs.project.name, path)
    return path
