"""Composite blending, canonical ordering, and the dense peer matrix."""

from collections.abc import Sequence

from src.models import (
    MatrixEntry,
    MatrixRow,
    ModelDefinition,
    ModelResponseDetail,
    PeerAssessment,
    ResponseWithComposite,
)
from src.selector import hash_string, round_one_decimal

_BASE_WEIGHT = 0.55
_PEER_WEIGHT = 0.45
_BONUS_SPAN = 6

MISSING_FOCUS = "clarity"
MISSING_JUSTIFICATION = "uses default calibration because no assessment was recorded."


def build_composites(
    details: Sequence[ModelResponseDetail],
    assessments: Sequence[PeerAssessment],
    prompt_seed: str,
) -> list[ResponseWithComposite]:
    """Attach received peer assessments and a composite score to each response.

    The composite uses the unrounded peer mean; both values are rounded to one
    decimal only when stored. Output keeps the input order.
    """
    composites: list[ResponseWithComposite] = []
    for detail in details:
        received = tuple(a for a in assessments if a.to_id == detail.model.id)
        avg_peer = sum(a.score for a in received) / (len(received) or 1)
        bonus = hash_string(f"{prompt_seed}-{detail.model.id}-bonus") % _BONUS_SPAN
        composite = detail.base_score * _BASE_WEIGHT + avg_peer * _PEER_WEIGHT + bonus
        composites.append(
            ResponseWithComposite(
                detail=detail,
                composite_score=round_one_decimal(composite),
                avg_peer_score=round_one_decimal(avg_peer),
                peer_assessments=received,
            )
        )
    return composites


def rank_by_composite(
    responses: Sequence[ResponseWithComposite],
) -> list[ResponseWithComposite]:
    """Sort by composite descending. Ties keep cohort order."""
    return sorted(responses, key=lambda r: r.composite_score, reverse=True)


def build_matrix(
    models: Sequence[ModelDefinition],
    assessments: Sequence[PeerAssessment],
) -> list[MatrixRow]:
    """Dense N x N view, rows and columns in cohort order.

    A missing edge becomes a zero-score placeholder instead of an error.
    """
    by_edge: dict[tuple[str, str], PeerAssessment] = {}
    for a in assessments:
        by_edge.setdefault((a.from_id, a.to_id), a)

    rows: list[MatrixRow] = []
    for from_model in models:
        entries: list[MatrixEntry] = []
        for to_model in models:
            found = by_edge.get((from_model.id, to_model.id))
            if found is None:
                entries.append(
                    MatrixEntry(to=to_model, score=0, focus=MISSING_FOCUS, justification=MISSING_JUSTIFICATION)
                )
            else:
                entries.append(
                    MatrixEntry(
                        to=to_model,
                        score=found.score,
                        focus=found.focus,
                        justification=found.justification,
                    )
                )
        rows.append(MatrixRow(from_model=from_model, entries=tuple(entries)))
    return rows
