"""Fixed vocabularies the selector indexes into. Order is part of the output contract."""

EVALUATION_FACETS: tuple[str, ...] = (
    "clarity",
    "grounding",
    "factuality",
    "multimodal reasoning",
    "structure",
    "actionability",
)

STYLE_TAGS: tuple[str, ...] = (
    "tactical strategist",
    "dialectic analyst",
    "vision-first planner",
    "risk-aware architect",
    "precision explainer",
    "multi-turn facilitator",
)

HIGHLIGHT_INTROS: tuple[str, ...] = (
    "Synthesizes",
    "Prioritizes",
    "Surfaces",
    "Contrasts",
    "Triangulates",
    "Maps",
    "Benchmarks",
)

HIGHLIGHT_FOCUS: tuple[str, ...] = (
    "root causes behind the prompt",
    "visual cues that shift interpretation",
    "user intent into measurable KPIs",
    "temporal dependencies across phases",
    "audience cohorts with tailored hooks",
    "risk vectors requiring mitigation",
    "experimentation avenues for fast feedback",
)

HIGHLIGHT_OUTCOMES: tuple[str, ...] = (
    "delivering an execution-ready blueprint",
    "grounding claims in observable evidence",
    "stressing the critical path to impact",
    "providing narrative arcs for stakeholders",
    "exposing adjacent opportunities",
    "flagging ambiguous instructions early",
    "aligning metrics with desired signals",
)

GUIDANCE_STEMS: tuple[str, ...] = (
    "Double down on",
    "Consider instrumenting",
    "Establish explicit guardrails for",
    "Prototype around",
    "Co-create review loops for",
    "Document fallback paths covering",
    "Calibrate expectations regarding",
)

GUIDANCE_OBJECTS: tuple[str, ...] = (
    "fail-fast experiments",
    "cross-modal evidence capture",
    "stakeholder briefings",
    "model critique prompts",
    "evaluation rubrics",
    "progressive disclosure strategies",
    "alignment checkpoints",
)

CROSS_JUSTIFICATIONS: tuple[str, ...] = (
    "keeps terminology consistent with the prompt’s framing",
    "anchors claims in the shared evidence set",
    "over-indexes on narrative flair at the expense of facts",
    "misses an opportunity to weave the visual cues in",
    "balances creativity with grounded risk mitigation",
    "would benefit from clearer prioritization of next steps",
    "elevates the most unique insight from the cohort",
    "could expand on calibration between modalities",
)

JUDGE_ANGLES: tuple[str, ...] = (
    "trustworthiness under cross-model scrutiny",
    "factual cohesion with the source context",
    "decision-readiness for stakeholders",
    "multimodal attribution depth",
    "clarity for downstream automation",
    "alignment with human preference signals",
)
