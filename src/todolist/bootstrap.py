# src/todolist/bootstrap.py

"""
Composition root:
- loads settings once,
- configures logging,
- wires a TaskStore into AppState.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.state import AppState
from .logging_setup import setup_logging
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(
        require_title=bool(getattr(settings, "require_title", True)),
        strict_lookup=bool(getattr(settings, "strict_lookup", False)),
    )
    return AppState(settings=settings, task_store=store)


def init_app(*, settings=None) -> AppState:
    """Configure logging from settings, then build the session state."""
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todolist"))
    return create_initial_state(settings=settings)
