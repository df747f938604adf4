"""Load settings.yaml into typed dataclasses. Drops unknown cohort ids at startup."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from src.catalog import MODELS_BY_ID

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

SETTINGS_ENV = "PEER_COUNCIL_SETTINGS"

REPORT_FORMATS = ("md", "json")


@dataclass
class DefaultsConfig:
    output_dir: Path
    cohort: list[str] = field(default_factory=list)
    min_cohort: int = 4
    max_cohort: int = 5
    report_format: str = "md"


@dataclass
class InboxConfig:
    dir: Path = Path("./inbox")
    archive_dir: Path = Path("./inbox/archive")


@dataclass
class AppConfig:
    defaults: DefaultsConfig
    inbox: InboxConfig = field(default_factory=InboxConfig)


def _section(raw: dict, name: str) -> dict:
    """Return a top-level section; an empty section reads as {}."""
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Settings section '{name}' must be a mapping")
    return section


def _resolve_settings_path(settings_path: Path | None) -> Path:
    if settings_path is not None:
        return settings_path
    override = os.environ.get(SETTINGS_ENV, "").strip()
    if override:
        logger.debug("Using settings from %s=%s", SETTINGS_ENV, override)
        return Path(override)
    return _SETTINGS_PATH


def load_config(settings_path: Path | None = None) -> AppConfig:
    """Load and validate configuration from settings.yaml.

    The path defaults to $PEER_COUNCIL_SETTINGS, then config/settings.yaml.

    Raises FileNotFoundError if settings file missing.
    Raises ValueError for a malformed layout, inconsistent min_cohort/max_cohort,
    or an unknown report_format.
    Unknown model ids in the default cohort are logged and dropped.
    """
    settings_path = _resolve_settings_path(settings_path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Settings root must be a mapping: {settings_path}")

    defaults_raw = _section(raw, "defaults")
    cohort: list[str] = []
    for model_id in defaults_raw.get("cohort") or []:
        model_id = str(model_id)
        if model_id in MODELS_BY_ID:
            cohort.append(model_id)
        else:
            logger.warning("Unknown model in default cohort, skipping: %s", model_id)

    defaults = DefaultsConfig(
        output_dir=Path(defaults_raw.get("output_dir", "./output")),
        cohort=cohort,
        min_cohort=int(defaults_raw.get("min_cohort", 4)),
        max_cohort=int(defaults_raw.get("max_cohort", 5)),
        report_format=str(defaults_raw.get("report_format", "md")),
    )
    if defaults.report_format not in REPORT_FORMATS:
        raise ValueError(
            f"Invalid report_format: {defaults.report_format!r} (use one of: {', '.join(REPORT_FORMATS)})"
        )
    if defaults.min_cohort < 1 or defaults.min_cohort > defaults.max_cohort:
        raise ValueError(
            f"Invalid cohort bounds: min_cohort={defaults.min_cohort}, max_cohort={defaults.max_cohort}"
        )

    inbox_raw = _section(raw, "inbox")
    inbox = InboxConfig(
        dir=Path(inbox_raw.get("dir", "./inbox")),
        archive_dir=Path(inbox_raw.get("archive_dir", "./inbox/archive")),
    )

    logger.debug("Loaded settings from %s (cohort: %s)", settings_path, ", ".join(cohort))
    return AppConfig(defaults=defaults, inbox=inbox)
