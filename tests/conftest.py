"""Shared pytest fixtures."""

from pathlib import Path

import pytest
import yaml

from config.config_loader import AppConfig, DefaultsConfig, InboxConfig
from src.catalog import MODELS_BY_ID
from src.models import (
    ModelDefinition,
    ModelResponseDetail,
    PromptPayload,
    ResponseWithComposite,
)

QUANTUM_TEXT = "Explain quantum tunneling to a 10-year-old."
FOUR_IDS = ["gpt-4o", "claude-3-5-sonnet", "gemini-2-flash", "llama-4-vision"]


@pytest.fixture
def four_models() -> list[ModelDefinition]:
    return [MODELS_BY_ID[i] for i in FOUR_IDS]


@pytest.fixture
def quantum_prompt() -> PromptPayload:
    return PromptPayload(type="text", text=QUANTUM_TEXT)


@pytest.fixture
def image_prompt() -> PromptPayload:
    return PromptPayload(type="image", image_name="skyline.png", image_data_url="data:image/png;base64,AAAA")


@pytest.fixture
def sample_defaults_config(tmp_path: Path) -> DefaultsConfig:
    return DefaultsConfig(
        output_dir=tmp_path / "output",
        cohort=list(FOUR_IDS),
        min_cohort=4,
        max_cohort=5,
    )


@pytest.fixture
def sample_app_config(sample_defaults_config: DefaultsConfig, tmp_path: Path) -> AppConfig:
    return AppConfig(
        defaults=sample_defaults_config,
        inbox=InboxConfig(dir=tmp_path / "inbox", archive_dir=tmp_path / "archive"),
    )


@pytest.fixture
def settings_file(tmp_path: Path, monkeypatch) -> Path:
    """Write settings.yaml under tmp_path and point PEER_COUNCIL_SETTINGS at it."""
    settings = {
        "defaults": {
            "cohort": list(FOUR_IDS),
            "min_cohort": 4,
            "max_cohort": 5,
            "output_dir": str(tmp_path / "output"),
            "report_format": "md",
        },
        "inbox": {
            "dir": str(tmp_path / "inbox"),
            "archive_dir": str(tmp_path / "inbox" / "archive"),
        },
    }
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.dump(settings), encoding="utf-8")
    monkeypatch.setenv("PEER_COUNCIL_SETTINGS", str(path))
    return path


def make_response(
    model_id: str,
    composite: float,
    avg_peer: float,
    style_tag: str = "precision explainer",
    base_score: int = 70,
) -> ResponseWithComposite:
    """Hand-built ResponseWithComposite for ranking tests."""
    detail = ModelResponseDetail(
        model=MODELS_BY_ID[model_id],
        narrative="n",
        highlights=("h",),
        guidance="g",
        base_score=base_score,
        style_tag=style_tag,
    )
    return ResponseWithComposite(detail=detail, composite_score=composite, avg_peer_score=avg_peer)
