"""Content synthesis: narrative, highlights, guidance and style tag per model."""

import logging
from collections.abc import Sequence

from src.models import ModelDefinition, ModelResponseDetail, PromptPayload
from src.scoring import generate_base_score
from src.selector import pick_from
from src.vocabulary import (
    GUIDANCE_OBJECTS,
    GUIDANCE_STEMS,
    HIGHLIGHT_FOCUS,
    HIGHLIGHT_INTROS,
    HIGHLIGHT_OUTCOMES,
    STYLE_TAGS,
)

logger = logging.getLogger(__name__)

_HIGHLIGHT_COUNT = 3
_DEFAULT_STYLE_TAG = "structured synthesize"

_IMAGE_THREAD = (
    "Extracts composition cues—contrast, depth, and subject framing—"
    "to position the visual story."
)
_MULTIMODAL_THREAD = (
    "Aligns linguistic hypotheses with visual anchors, "
    "highlighting where each channel validates the other."
)


def response_seed(prompt: PromptPayload) -> str:
    """Seed for content and base scores. Missing image name reads 'no-image'."""
    text = prompt.text if prompt.text is not None else ""
    image_name = prompt.image_name if prompt.image_name is not None else "no-image"
    return f"{prompt.type}-{text}-{image_name}"


def build_narrative(model: ModelDefinition, prompt: PromptPayload, seed: str) -> str:
    intro = pick_from(HIGHLIGHT_INTROS, f"{seed}-intro")
    focus = pick_from(HIGHLIGHT_FOCUS, f"{seed}-focus")
    outcome = pick_from(HIGHLIGHT_OUTCOMES, f"{seed}-outcome")
    threads = [
        f"{intro} {focus}, translating intent into cross-modal checkpoints.",
        f"Connects signal across text and visuals to surface {outcome}.",
        f"Augments {model.name}'s strengths by sequencing reasoning phases.",
    ]

    if prompt.type == "image":
        threads.insert(1, _IMAGE_THREAD)

    if prompt.type == "multimodal":
        threads.append(_MULTIMODAL_THREAD)

    return " ".join(threads)


def build_highlights(seed: str) -> tuple[str, ...]:
    """Three candidate bullets, exact duplicates dropped (first one wins).

    Collisions are accepted, so fewer than three highlights may come back.
    """
    bullets: list[str] = []
    for i in range(_HIGHLIGHT_COUNT):
        intro = pick_from(HIGHLIGHT_INTROS, f"{seed}-highlight-{i}")
        focus = pick_from(HIGHLIGHT_FOCUS, f"{seed}-focus-{i}")
        outcome = pick_from(HIGHLIGHT_OUTCOMES, f"{seed}-outcome-{i}")
        bullets.append(f"{intro} {focus}, {outcome}.")
    return tuple(dict.fromkeys(bullets))


def build_guidance(seed: str) -> str:
    stem = pick_from(GUIDANCE_STEMS, f"{seed}-stem")
    obj = pick_from(GUIDANCE_OBJECTS, f"{seed}-obj")
    return f"{stem} {obj} to maintain momentum between evaluation rounds."


def generate_responses(
    models: Sequence[ModelDefinition],
    prompt: PromptPayload,
) -> list[ModelResponseDetail]:
    """Synthesize one response per model, in cohort order.

    Args:
        models: The cohort.
        prompt: The prompt payload; only used as a seed source.

    Returns:
        List of ModelResponseDetail, same order as models.
    """
    seed = response_seed(prompt)
    details: list[ModelResponseDetail] = []
    for model in models:
        style_tag = pick_from(STYLE_TAGS, f"{model.id}-{seed}-style") or _DEFAULT_STYLE_TAG
        details.append(
            ModelResponseDetail(
                model=model,
                narrative=build_narrative(model, prompt, f"{model.id}-{seed}"),
                highlights=build_highlights(f"{model.id}-{seed}"),
                guidance=build_guidance(f"{seed}-{model.id}"),
                base_score=generate_base_score(model, seed),
                style_tag=style_tag,
            )
        )
    logger.debug("Synthesized %d responses for %s prompt", len(details), prompt.type)
    return details
