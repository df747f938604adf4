"""Static model catalog. The engine never creates or destroys identities."""

from src.models import ModelDefinition

AVAILABLE_MODELS: tuple[ModelDefinition, ...] = (
    ModelDefinition(
        id="gpt-4o",
        name="GPT-4o",
        provider="OpenAI",
        modalities=("Text", "Vision", "Audio"),
        strengths=("balanced reasoning", "tool orchestration", "structured plans"),
    ),
    ModelDefinition(
        id="claude-3-5-sonnet",
        name="Claude 3.5 Sonnet",
        provider="Anthropic",
        modalities=("Text", "Vision"),
        strengths=("ethical framing", "long-context synthesis", "safety analysis"),
    ),
    ModelDefinition(
        id="gemini-2-flash",
        name="Gemini 2.0 Flash",
        provider="Google",
        modalities=("Text", "Vision", "Video"),
        strengths=("fast iteration", "multimodal grounding", "summarization"),
    ),
    ModelDefinition(
        id="llama-4-vision",
        name="LLaMA 4 Vision",
        provider="Meta",
        modalities=("Text", "Vision"),
        strengths=("open weights", "vision-language fusion", "edge deploy"),
    ),
    ModelDefinition(
        id="grok-vision",
        name="Grok Vision",
        provider="xAI",
        modalities=("Text", "Vision"),
        strengths=("creative elaboration", "contextual humor", "live data"),
    ),
    ModelDefinition(
        id="mistral-large",
        name="Mistral Large 2",
        provider="Mistral",
        modalities=("Text",),
        strengths=("dense knowledge", "concise output", "program synthesis"),
    ),
    ModelDefinition(
        id="command-r-plus",
        name="Cohere Command R+",
        provider="Cohere",
        modalities=("Text",),
        strengths=("retrieval fusion", "enterprise guardrails", "analytics"),
    ),
)

MODELS_BY_ID: dict[str, ModelDefinition] = {m.id: m for m in AVAILABLE_MODELS}


def get_model(model_id: str) -> ModelDefinition | None:
    """Return the catalog entry for model_id, or None if unknown."""
    return MODELS_BY_ID.get(model_id)
