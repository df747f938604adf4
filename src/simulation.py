"""Simulation orchestration: cohort + prompt in, full SimulationResult out.

Each stage is a pure function of the previous stage's output:

    cohort, prompt -> responses -> peer assessments -> composites
                   -> matrix / top three / judge ranking

Nothing is cached or shared between runs, so identical inputs always give an
identical result.
"""

import logging
from collections.abc import Sequence

from src.aggregate import build_composites, build_matrix, rank_by_composite
from src.content import generate_responses
from src.judge import JUDGE_NAME, rank_by_judge
from src.models import (
    FingerprintedPrompt,
    ModelDefinition,
    PeerAssessment,
    PromptPayload,
    SimulationResult,
)
from src.scoring import build_peer_assessment
from src.selector import hash_string

logger = logging.getLogger(__name__)

TOP_N = 3
_FINGERPRINT_LEN = 10


def simulation_seed(prompt: PromptPayload) -> str:
    """Seed for peer scores, bonuses and the judge. Missing image name reads 'image'."""
    text = prompt.text if prompt.text is not None else ""
    image_name = prompt.image_name if prompt.image_name is not None else "image"
    return f"{prompt.type}-{text}-{image_name}"


def fingerprint(prompt_seed: str) -> str:
    return format(hash_string(prompt_seed), "x")[:_FINGERPRINT_LEN]


def build_peer_assessments(
    models: Sequence[ModelDefinition],
    prompt_seed: str,
) -> list[PeerAssessment]:
    """All N^2 directed assessments, row-major by cohort order."""
    assessments: list[PeerAssessment] = []
    for from_model in models:
        for to_model in models:
            suffix = "self" if from_model.id == to_model.id else "peer"
            assessments.append(
                build_peer_assessment(from_model, to_model, f"{prompt_seed}-{suffix}")
            )
    return assessments


def build_simulation(
    models: Sequence[ModelDefinition],
    prompt: PromptPayload,
) -> SimulationResult:
    """Run the whole peer-evaluation pipeline.

    Args:
        models: The cohort. Size limits are the caller's concern; any
            non-empty cohort works, though the top-three cut assumes N >= 3.
        prompt: The prompt payload.

    Returns:
        SimulationResult with responses sorted by composite score.
    """
    prompt_seed = simulation_seed(prompt)

    details = generate_responses(models, prompt)
    assessments = build_peer_assessments(models, prompt_seed)
    ranked = rank_by_composite(build_composites(details, assessments, prompt_seed))
    matrix = build_matrix(models, assessments)
    top_three = ranked[:TOP_N]
    judge_ranking = rank_by_judge(top_three, prompt_seed)

    result = SimulationResult(
        prompt=FingerprintedPrompt(
            type=prompt.type,
            text=prompt.text,
            image_name=prompt.image_name,
            image_data_url=prompt.image_data_url,
            fingerprint=fingerprint(prompt_seed),
        ),
        responses=tuple(ranked),
        matrix=tuple(matrix),
        top_three=tuple(top_three),
        judge_ranking=tuple(judge_ranking),
    )

    logger.debug(
        "Simulation %s: %d models, %d assessments, %s top pick: %s",
        result.prompt.fingerprint,
        len(models),
        len(assessments),
        JUDGE_NAME,
        judge_ranking[0].response.detail.model.id if judge_ranking else None,
    )
    return result


run_simulation = build_simulation


def judge_top_pick(result: SimulationResult) -> str | None:
    """Model id ranked first by the judge, or None for an empty ranking."""
    if not result.judge_ranking:
        return None
    return result.judge_ranking[0].response.detail.model.id


def compare_choice(result: SimulationResult, model_id: str) -> tuple[bool, str]:
    """Compare the user's favourite against the judge's top pick.

    Returns:
        (agrees, message)
    """
    top = judge_top_pick(result)
    if top is not None and model_id == top:
        return True, f"You and {JUDGE_NAME} agree on the top response."
    return False, f"Your selection diverges from {JUDGE_NAME}’s top pick—perfect for further analysis."
