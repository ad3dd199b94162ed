"""Configuration loading and validation.

Loads ``settings.toml`` for the command-line wrapper.  The core
:func:`~wpslug.text.slugify` / :func:`~wpslug.text.sanitize` functions
take no options; settings only shape CLI output (length limit,
stopwords) and control logging.

The validated config is exposed as a :class:`Settings` dataclass with
typed fields for each section: ``slug`` and ``logging``.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from wpslug.errors import ActionableError
from wpslug.logging import logger

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass
class SlugConfig:
    """Slug shaping options from ``[slug]``."""

    max_length: int = 0
    stopwords: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Logging options from ``[logging]``."""

    level: str = "INFO"
    log_dir: str = ""

    @property
    def level_number(self) -> int:
        return LOG_LEVELS[self.level]


@dataclass
class Settings:
    """Top-level validated configuration."""

    slug: SlugConfig = field(default_factory=SlugConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path | None = None) -> Settings:
    """Load and validate settings from a TOML file.

    With no *path*, ``config/settings.toml`` is used if it exists and
    built-in defaults otherwise.  An explicit *path* must exist.

    Raises :class:`~wpslug.errors.ActionableError`:
      - CONFIG if an explicit file is missing or a section is not a table
      - VALIDATION if field values are out of range or of the wrong type
      - PARSE if the TOML is malformed
    """
    if path is None:
        if not DEFAULT_SETTINGS_PATH.exists():
            logger.debug("No %s found — using default settings", DEFAULT_SETTINGS_PATH)
            return Settings()
        path = DEFAULT_SETTINGS_PATH

    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or copy from config/settings.toml",
        )

    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ActionableError.from_exception(exc, str(filepath), "read settings") from None

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location="TOML syntax",
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    settings = _validate(data, filepath)
    logger.debug("Loaded settings from %s", filepath)
    return settings


def _validate(data: dict[str, object], filepath: Path) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- slug section --------------------------------------------------------
    slug_data = _optional_section(data, "slug", filepath)

    max_length = slug_data.get("max_length", 0)
    if not isinstance(max_length, int) or isinstance(max_length, bool):
        raise ActionableError.validation(
            field_name="slug.max_length",
            reason=f"must be an integer, got {type(max_length).__name__}",
            suggestion="Set [slug].max_length to a whole number (0 for no limit)",
        )
    if max_length < 0:
        raise ActionableError.validation(
            field_name="slug.max_length",
            reason=f"is {max_length} — must be >= 0",
            suggestion="Set [slug].max_length to 0 (no limit) or a positive number",
        )

    stopwords = slug_data.get("stopwords", [])
    if not isinstance(stopwords, list) or not all(isinstance(w, str) for w in stopwords):
        raise ActionableError.validation(
            field_name="slug.stopwords",
            reason="must be a list of strings",
            suggestion='Set [slug].stopwords to a list such as ["a", "an", "the"]',
        )

    # -- logging section -----------------------------------------------------
    logging_data = _optional_section(data, "logging", filepath)

    level = logging_data.get("level", "INFO")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"'{level}' is not one of {', '.join(LOG_LEVELS)}",
            suggestion="Set [logging].level to DEBUG, INFO, WARNING, or ERROR",
        )

    log_dir = logging_data.get("log_dir", "")
    if not isinstance(log_dir, str):
        raise ActionableError.validation(
            field_name="logging.log_dir",
            reason=f"must be a string, got {type(log_dir).__name__}",
            suggestion='Set [logging].log_dir to a directory path, or "" to disable file logging',
        )

    return Settings(
        slug=SlugConfig(max_length=max_length, stopwords=list(stopwords)),
        logging=LoggingConfig(level=level.upper(), log_dir=log_dir),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str, filepath: Path) -> dict[str, object]:
    """Return a top-level section (empty if absent), or raise CONFIG if not a table."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] in {filepath} must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table",
        )
    return section
