from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DATA_DIR_ENV = "CATPOKER_DATA_DIR"


@dataclass(frozen=True)
class Paths:
    package_dir: Path
    data_dir: Path
    schema_dir: Path


def get_paths() -> Paths:
    # src/catpoker/paths.py -> parent: catpoker
    package_dir = Path(__file__).resolve().parent
    override = os.getenv(DATA_DIR_ENV)
    data_dir = Path(override) if override else package_dir / "data"
    schema_dir = package_dir / "data" / "schemas"
    return Paths(package_dir=package_dir, data_dir=data_dir, schema_dir=schema_dir)
