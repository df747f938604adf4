"""Frozen dataclasses for the peer-evaluation simulation. No logic, no deps."""

from dataclasses import dataclass
from typing import Literal

PromptType = Literal["text", "image", "multimodal"]

PROMPT_TYPES: tuple[str, ...] = ("text", "image", "multimodal")


@dataclass(frozen=True)
class ModelDefinition:
    id: str                # unique key used in every derived seed
    name: str
    provider: str
    modalities: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()


@dataclass(frozen=True)
class PromptPayload:
    type: PromptType
    text: str | None = None
    image_name: str | None = None
    image_data_url: str | None = None


@dataclass(frozen=True)
class FingerprintedPrompt(PromptPayload):
    fingerprint: str = ""


@dataclass(frozen=True)
class ModelResponseDetail:
    model: ModelDefinition
    narrative: str
    highlights: tuple[str, ...]
    guidance: str
    base_score: int        # 40-100
    style_tag: str


@dataclass(frozen=True)
class PeerAssessment:
    from_id: str
    to_id: str
    score: int             # 40-100
    focus: str
    justification: str


@dataclass(frozen=True)
class ResponseWithComposite:
    detail: ModelResponseDetail
    composite_score: float  # one decimal place
    avg_peer_score: float   # one decimal place
    peer_assessments: tuple[PeerAssessment, ...] = ()


@dataclass(frozen=True)
class MatrixEntry:
    to: ModelDefinition
    score: int
    focus: str
    justification: str


@dataclass(frozen=True)
class MatrixRow:
    from_model: ModelDefinition
    entries: tuple[MatrixEntry, ...] = ()


@dataclass(frozen=True)
class JudgeRankingEntry:
    rank: int
    response: ResponseWithComposite
    score: float
    rationale: str


@dataclass(frozen=True)
class SimulationResult:
    prompt: FingerprintedPrompt
    responses: tuple[ResponseWithComposite, ...]   # composite score, descending
    matrix: tuple[MatrixRow, ...]
    top_three: tuple[ResponseWithComposite, ...]
    judge_ranking: tuple[JudgeRankingEntry, ...]
