"""Mini README: Logging helpers for the scenesemantics engine.

Structure:
    * get_logger - module logger factory ensuring a baseline handler exists.
    * configure_root_logger - attach the shared handler exactly once.
    * level_for_environment - map a deployment label onto a logging level.
    * apply_settings - scope the engine's verbosity from configuration.

Usage:
    Modules keep ``LOGGER = get_logger(__name__)``. Hosts either call
    ``configure_root_logger`` themselves or let ``apply_settings`` pick a
    level for the ``scenesemantics`` logger hierarchy: per-face scan details
    are emitted at DEBUG, so development builds see them and production
    builds only report skipped files and provider outages.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .configuration import SceneSemanticsSettings

PACKAGE_LOGGER = "scenesemantics"

ENVIRONMENT_LEVELS: Dict[str, int] = {
    "development": logging.DEBUG,
    "testing": logging.INFO,
    "staging": logging.INFO,
    "production": logging.WARNING,
}

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def level_for_environment(environment: str, override: Optional[str] = None) -> int:
    """Resolve the engine log level; an explicit ``override`` name wins."""

    if override:
        level = logging.getLevelName(override.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{override}'")
        return level
    return ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def apply_settings(settings: "SceneSemanticsSettings") -> int:
    """Set the ``scenesemantics`` logger level from settings and return it."""

    configure_root_logger()
    level = level_for_environment(settings.environment, settings.log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.debug(
        "Logging for environment '%s' set to %s", settings.environment, logging.getLevelName(level)
    )
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
