"""Mini README: Centralised configuration models and helpers for scenesemantics.

Structure:
    * SceneSemanticsSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``SCENESEMANTICS_*`` environment
    variables controlling the query thresholds, the export directory and the
    mesh provider. The configuration is cached so the cost of validation is
    incurred only once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class SceneSemanticsSettings(BaseSettings):
    """Runtime configuration for the query and export engine."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: Optional[str] = Field(
        None,
        description="Explicit level name (e.g. ``INFO``) overriding the environment default.",
    )
    export_directory: Path = Field(
        Path("Documents/ObjFile"),
        description="Directory recreated on every export to hold the OBJ files.",
    )
    proximity_threshold: float = Field(
        0.05,
        description="Maximum face-center distance (metres) accepted by a tap query.",
        gt=0,
    )
    cutoff_distance: float = Field(
        4.0,
        description="Fragments whose origin lies farther than this are ignored by tap queries.",
        gt=0,
    )
    max_workers: Optional[int] = Field(
        None,
        description="Worker pool size for background queries. Defaults to the executor's choice.",
        ge=1,
    )
    mesh_provider: str = Field(
        "static",
        description="Registered mesh provider used by ``QueryOrchestrator.from_settings``.",
    )
    snapshot_archive: Optional[Path] = Field(
        None,
        description="Snapshot archive consumed by the ``archive`` provider.",
    )

    class Config:
        env_prefix = "SCENESEMANTICS_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _known_level(cls, value: Optional[str]) -> Optional[str]:
        """Reject level names the logging module does not know."""

        if value is None:
            return None
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level '{value}'")
        return name

    @validator("export_directory", "snapshot_archive", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories so relative settings resolve predictably."""

        if value is None:
            return None
        return Path(value).expanduser().resolve()


@lru_cache()
def get_settings() -> SceneSemanticsSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SceneSemanticsSettings()
