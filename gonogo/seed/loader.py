"""Load and validate the seed input state from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from gonogo.models.inputs import EvaluationInputs

# Default directory for seed files
_CONFIG_DIR = Path(__file__).parent / "configs"


def load_seed_inputs(file_path: Path | None = None) -> EvaluationInputs:
    """Load and validate a seed input state from a JSON file.

    If no path is provided, loads the bundled defaults.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / "default_inputs.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Seed inputs not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    return EvaluationInputs.model_validate(raw)


def get_default_inputs() -> EvaluationInputs:
    """Load the state a new session starts from."""
    return load_seed_inputs()
