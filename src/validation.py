"""Caller-side precondition checks: cohort selection, prompt completeness, images.

The engine assumes these hold and never checks them itself.
"""

import base64
import logging
import mimetypes
from collections.abc import Iterable
from pathlib import Path

from src.catalog import AVAILABLE_MODELS, get_model
from src.models import PROMPT_TYPES, ModelDefinition, PromptPayload

logger = logging.getLogger(__name__)

_NUMBER_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six", 7: "seven"}


class InputError(Exception):
    """Raised when caller input breaks a simulation precondition."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class UnknownModelError(InputError):
    """Raised for a model id that is not in the catalog."""

    def __init__(self, model_id: str) -> None:
        self.model_id = model_id
        known = ", ".join(m.id for m in AVAILABLE_MODELS)
        super().__init__("models", f"Unknown model '{model_id}'. Available: {known}")


def _word(n: int) -> str:
    return _NUMBER_WORDS.get(n, str(n))


def parse_model_ids(raw: str | Iterable[str] | None) -> list[str]:
    """Accept 'a,b,c' or a list of ids. Blank entries are dropped."""
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else [str(x) for x in raw]
    return [item.strip() for item in items if item.strip()]


def select_models(model_ids: Iterable[str]) -> list[ModelDefinition]:
    """Resolve ids against the catalog.

    The cohort comes back in catalog order with duplicates collapsed,
    whatever order the ids were given in.

    Raises:
        UnknownModelError: If any id is not in the catalog.
    """
    wanted = set()
    for model_id in model_ids:
        model = get_model(model_id)
        if model is None:
            raise UnknownModelError(model_id)
        wanted.add(model.id)
    return [m for m in AVAILABLE_MODELS if m.id in wanted]


def validate_cohort(models: list[ModelDefinition], min_size: int = 4, max_size: int = 5) -> None:
    """Raises InputError when the cohort size is outside [min_size, max_size]."""
    if len(models) > max_size:
        raise InputError("models", f"Select up to {_word(max_size)} models per evaluation.")
    if len(models) < min_size:
        raise InputError(
            "models",
            f"Select between {_word(min_size)} and {_word(max_size)} models per evaluation "
            f"(got {len(models)}).",
        )


def infer_prompt_type(text: str | None, has_image: bool) -> str:
    has_text = bool(text and text.strip())
    if has_image and has_text:
        return "multimodal"
    if has_image:
        return "image"
    return "text"


def build_prompt(
    prompt_type: str,
    text: str | None = None,
    image_name: str | None = None,
    image_data_url: str | None = None,
) -> PromptPayload:
    """Build a PromptPayload, trimming text and checking required inputs.

    Text is only kept for text and multimodal prompts; the image only for
    image and multimodal prompts.

    Raises:
        InputError: If the type is unknown or a required input is missing.
    """
    if prompt_type not in PROMPT_TYPES:
        raise InputError("type", f"Unknown prompt type '{prompt_type}'. Use one of: {', '.join(PROMPT_TYPES)}")

    trimmed = text.strip() if text else ""
    if prompt_type == "image":
        trimmed = ""
    if prompt_type == "text":
        image_name, image_data_url = None, None

    has_image = bool(image_data_url)
    if prompt_type == "text" and not trimmed:
        raise InputError("text", "Text prompts need non-empty prompt text.")
    if prompt_type == "image" and not has_image:
        raise InputError("image", "Image prompts need an attached image.")
    if prompt_type == "multimodal" and not (trimmed or has_image):
        raise InputError("text", "Mixed prompts need prompt text, an image, or both.")

    return PromptPayload(
        type=prompt_type,  # type: ignore[arg-type]
        text=trimmed or None,
        image_name=image_name,
        image_data_url=image_data_url,
    )


def load_image(path: Path) -> tuple[str, str]:
    """Read an image file as a base64 data URL.

    Returns:
        (file_name, data_url)

    Raises:
        InputError: If the file is not an image/* type or cannot be read.
    """
    mime, _ = mimetypes.guess_type(path.name)
    if not mime or not mime.startswith("image/"):
        raise InputError("image", "Only image files are supported for visual prompts.")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputError("image", f"Could not read image {path}: {exc}") from exc
    encoded = base64.b64encode(data).decode("ascii")
    logger.debug("Loaded image %s (%s, %d bytes)", path.name, mime, len(data))
    return path.name, f"data:{mime};base64,{encoded}"
