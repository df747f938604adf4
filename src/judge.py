"""Judge re-ranking of the top composite candidates."""

from collections.abc import Sequence

from src.models import JudgeRankingEntry, ResponseWithComposite
from src.selector import hash_string, pick_from, round_one_decimal
from src.vocabulary import JUDGE_ANGLES

JUDGE_NAME = "Gemini-3-Pro"

_DEFAULT_LENS = "overall balance"
_COMPOSITE_WEIGHT = 0.6
_PEER_WEIGHT = 0.3
_DELTA_SPAN = 12


def judge_seed(prompt_seed: str, model_id: str) -> str:
    return f"{prompt_seed}-gemini-{model_id}"


def rank_by_judge(
    candidates: Sequence[ResponseWithComposite],
    prompt_seed: str,
) -> list[JudgeRankingEntry]:
    """Re-score candidates independently and assign dense ranks 1..k.

    Args:
        candidates: Top composite responses, already in composite order.
        prompt_seed: Simulation prompt seed.

    Returns:
        Entries sorted by judge score descending; ties keep candidate order.
    """
    scored: list[tuple[float, str, ResponseWithComposite]] = []
    for response in candidates:
        seed = judge_seed(prompt_seed, response.detail.model.id)
        lens = pick_from(JUDGE_ANGLES, seed) or _DEFAULT_LENS
        score = (
            response.composite_score * _COMPOSITE_WEIGHT
            + response.avg_peer_score * _PEER_WEIGHT
            + hash_string(f"{seed}-delta") % _DELTA_SPAN
        )
        rationale = (
            f"{JUDGE_NAME} prioritizes {lens} and notes the framing as "
            f"{response.detail.style_tag}."
        )
        scored.append((round_one_decimal(score), rationale, response))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [
        JudgeRankingEntry(rank=index, response=response, score=score, rationale=rationale)
        for index, (score, rationale, response) in enumerate(scored, start=1)
    ]
