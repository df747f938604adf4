"""Tests for src/aggregate.py — composites, ordering, matrix."""

from src.aggregate import MISSING_JUSTIFICATION, build_composites, build_matrix, rank_by_composite
from src.catalog import MODELS_BY_ID
from src.models import ModelResponseDetail, PeerAssessment
from src.selector import hash_string

from tests.conftest import make_response

SEED = "text-x-image"


def _detail(model_id: str, base_score: int) -> ModelResponseDetail:
    return ModelResponseDetail(
        model=MODELS_BY_ID[model_id],
        narrative="n",
        highlights=(),
        guidance="g",
        base_score=base_score,
        style_tag="tactical strategist",
    )


def _assess(from_id: str, to_id: str, score: int) -> PeerAssessment:
    return PeerAssessment(from_id=from_id, to_id=to_id, score=score, focus="structure", justification="j")


def test_composite_blend():
    assessments = [
        _assess("gpt-4o", "gpt-4o", 60),
        _assess("claude-3-5-sonnet", "gpt-4o", 70),
        _assess("mistral-large", "gpt-4o", 80),
        _assess("gpt-4o", "claude-3-5-sonnet", 99),
    ]
    [composite] = build_composites([_detail("gpt-4o", 60)], assessments, SEED)
    bonus = hash_string(f"{SEED}-gpt-4o-bonus") % 6
    assert composite.avg_peer_score == 70.0
    assert composite.composite_score == 64.5 + bonus
    assert [a.from_id for a in composite.peer_assessments] == ["gpt-4o", "claude-3-5-sonnet", "mistral-large"]


def test_avg_peer_rounded_to_one_decimal():
    assessments = [
        _assess("gpt-4o", "gpt-4o", 70),
        _assess("claude-3-5-sonnet", "gpt-4o", 71),
        _assess("mistral-large", "gpt-4o", 71),
    ]
    [composite] = build_composites([_detail("gpt-4o", 70)], assessments, SEED)
    assert composite.avg_peer_score == 70.7


def test_composite_without_assessments_uses_zero_mean():
    [composite] = build_composites([_detail("gpt-4o", 80)], [], SEED)
    assert composite.avg_peer_score == 0
    assert composite.peer_assessments == ()


def test_rank_by_composite_descending_and_stable():
    responses = [
        make_response("gpt-4o", 70.0, 70.0),
        make_response("claude-3-5-sonnet", 80.0, 70.0),
        make_response("gemini-2-flash", 70.0, 60.0),
        make_response("llama-4-vision", 75.5, 60.0),
    ]
    ranked = rank_by_composite(responses)
    assert [r.detail.model.id for r in ranked] == [
        "claude-3-5-sonnet",
        "llama-4-vision",
        "gpt-4o",
        "gemini-2-flash",
    ]


def test_matrix_dense_in_cohort_order():
    models = [MODELS_BY_ID["gpt-4o"], MODELS_BY_ID["grok-vision"]]
    assessments = [
        _assess("gpt-4o", "gpt-4o", 61),
        _assess("gpt-4o", "grok-vision", 62),
        _assess("grok-vision", "gpt-4o", 63),
        _assess("grok-vision", "grok-vision", 64),
    ]
    matrix = build_matrix(models, assessments)
    assert [row.from_model.id for row in matrix] == ["gpt-4o", "grok-vision"]
    assert [[e.score for e in row.entries] for row in matrix] == [[61, 62], [63, 64]]
    assert [e.to.id for e in matrix[1].entries] == ["gpt-4o", "grok-vision"]


def test_matrix_missing_edge_uses_placeholder():
    models = [MODELS_BY_ID["gpt-4o"], MODELS_BY_ID["grok-vision"]]
    matrix = build_matrix(models, [_assess("gpt-4o", "gpt-4o", 61)])
    missing = matrix[1].entries[0]
    assert missing.score == 0
    assert missing.focus == "clarity"
    assert missing.justification == MISSING_JUSTIFICATION


def test_matrix_first_duplicate_edge_wins():
    models = [MODELS_BY_ID["gpt-4o"]]
    matrix = build_matrix(models, [_assess("gpt-4o", "gpt-4o", 61), _assess("gpt-4o", "gpt-4o", 99)])
    assert matrix[0].entries[0].score == 61
