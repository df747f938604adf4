"""Score synthesis: per-model base scores and directed peer assessments."""

from src.models import ModelDefinition, PeerAssessment
from src.selector import clamp_score, hash_string, pick_from
from src.vocabulary import CROSS_JUSTIFICATIONS, EVALUATION_FACETS

DEFAULT_FOCUS = "clarity"
DEFAULT_JUSTIFICATION = "provides a balanced take that covers the requested dimensions."

# (floor, span) per sub-score; value = floor + hash % span
_QUALITY = (68, 18)
_GROUNDING = (64, 22)
_CREATIVITY = (60, 26)

_PEER_FLOOR = 58
_PEER_SPAN = 38
_EARLIER_ID_BONUS = 4
_LATER_ID_PENALTY = -2
_MODIFIER_SPAN = 6


def generate_base_score(model: ModelDefinition, prompt_seed: str) -> int:
    """Blend quality, grounding and creativity into one clamped integer.

    Depends only on the model and the prompt seed, never on the cohort.
    """
    quality = _QUALITY[0] + hash_string(f"{model.id}-{prompt_seed}") % _QUALITY[1]
    grounding = _GROUNDING[0] + hash_string(f"{prompt_seed}-{model.id}") % _GROUNDING[1]
    creativity = _CREATIVITY[0] + hash_string(f"{prompt_seed}-{model.provider}") % _CREATIVITY[1]
    weighted = quality * 0.45 + grounding * 0.35 + creativity * 0.2
    return clamp_score(weighted)


def build_peer_assessment(
    from_model: ModelDefinition,
    to_model: ModelDefinition,
    prompt_seed: str,
) -> PeerAssessment:
    """Score to_model's response from from_model's point of view.

    Cross-pairs get an asymmetric modifier: a lexicographically earlier id
    scoring a later one gets +4, the reverse gets -2, plus ``hash % 6``.
    Self-pairs get no modifier. Scores are therefore not symmetric.
    """
    salt = f"{from_model.id}->{to_model.id}-{prompt_seed}"
    focus = pick_from(EVALUATION_FACETS, f"{salt}-facet") or DEFAULT_FOCUS
    justification = pick_from(CROSS_JUSTIFICATIONS, f"{salt}-why") or DEFAULT_JUSTIFICATION
    base = _PEER_FLOOR + hash_string(f"{salt}-score") % _PEER_SPAN
    if from_model.id == to_model.id:
        modifier = 0
    else:
        bias = _EARLIER_ID_BONUS if from_model.id < to_model.id else _LATER_ID_PENALTY
        modifier = bias + hash_string(f"{salt}-mod") % _MODIFIER_SPAN
    return PeerAssessment(
        from_id=from_model.id,
        to_id=to_model.id,
        score=clamp_score(base + modifier),
        focus=focus,
        justification=justification,
    )
