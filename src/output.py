"""Rich console output and markdown/JSON report saving for simulation results."""

import json
import logging
import re
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from src.catalog import AVAILABLE_MODELS
from src.judge import JUDGE_NAME
from src.models import MatrixRow, SimulationResult
from src.simulation import compare_choice

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)


def _slug(text: str, max_len: int = 40) -> str:
    """Convert text to a filename-safe slug."""
    slug = re.sub(r"[^\w\s-]", "", text.lower())
    slug = re.sub(r"[\s_-]+", "-", slug).strip("-")
    return slug[:max_len]


def _prompt_label(result: SimulationResult, max_len: int = 80) -> str:
    prompt = result.prompt
    label = prompt.text or prompt.image_name or "(image prompt)"
    if len(label) > max_len:
        label = label[:max_len] + "..."
    return label


def _report_slug(result: SimulationResult) -> str:
    source = result.prompt.text or Path(result.prompt.image_name or "").stem
    return _slug(source) or "prompt"


def print_catalog() -> None:
    """Print every model in the static catalog."""
    table = Table(title="Available models", header_style="bold cyan")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Provider")
    table.add_column("Modalities")
    table.add_column("Strengths", style="dim")
    for model in AVAILABLE_MODELS:
        table.add_row(
            model.id,
            model.name,
            model.provider,
            ", ".join(model.modalities),
            ", ".join(model.strengths),
        )
    console.print(table)


def print_responses(result: SimulationResult) -> None:
    console.print(Rule("[bold cyan]Responses[/bold cyan]"))
    console.print(Text(f"Prompt fingerprint: {result.prompt.fingerprint}", style="dim"))
    for resp in result.responses:
        detail = resp.detail
        body = Text(detail.narrative)
        for highlight in detail.highlights:
            body.append(f"\n• {highlight}")
        body.append(f"\n{detail.guidance}", style="italic")
        console.print(
            Panel(
                body,
                title=f"[bold]{detail.model.name}[/bold] ({detail.style_tag})",
                subtitle=(
                    f"Composite {resp.composite_score} · Peer {resp.avg_peer_score} · Base {detail.base_score}"
                ),
                border_style="dim",
            )
        )


def print_matrix(matrix: tuple[MatrixRow, ...]) -> None:
    """Peer scores: rows score, columns are scored."""
    if not matrix:
        return
    console.print(Rule("[bold cyan]Peer Matrix[/bold cyan]"))
    table = Table(header_style="bold")
    table.add_column("Model →")
    for entry in matrix[0].entries:
        table.add_column(entry.to.name, justify="center")
    for row in matrix:
        table.add_row(
            row.from_model.name,
            *(f"{e.score}\n[dim]{e.focus}[/dim]" for e in row.entries),
        )
    console.print(table)


def print_rankings(result: SimulationResult) -> None:
    console.print(Rule("[bold green]Top Three (composite)[/bold green]"))
    for index, resp in enumerate(result.top_three, start=1):
        console.print(
            f"  {index}. [bold]{resp.detail.model.name}[/bold] "
            f"Composite {resp.composite_score} · Peer {resp.avg_peer_score}"
        )

    console.print(Rule(f"[bold green]{JUDGE_NAME} Ranking[/bold green]"))
    table = Table(header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Model")
    table.add_column("Score", justify="right")
    table.add_column("Rationale", style="dim")
    for entry in result.judge_ranking:
        table.add_row(
            str(entry.rank),
            entry.response.detail.model.name,
            f"{entry.score}",
            entry.rationale,
        )
    console.print(table)


def print_choice(agrees: bool, message: str) -> None:
    style = "green" if agrees else "yellow"
    console.print(Panel(message, border_style=style))


def print_result(result: SimulationResult) -> None:
    """Print responses, matrix and both rankings."""
    print_responses(result)
    print_matrix(result.matrix)
    print_rankings(result)


def result_to_dict(result: SimulationResult) -> dict:
    """Plain-dict view for JSON export. The image data URL is replaced by its length."""
    data = asdict(result)
    data_url = data["prompt"].pop("image_data_url", None)
    data["prompt"]["image_data_url_length"] = len(data_url) if data_url else 0
    return data


def _report_path(result: SimulationResult, output_dir: Path, suffix: str, slug_override: str | None) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    slug = slug_override if slug_override is not None else _report_slug(result)
    return output_dir / f"{timestamp}_{slug}.{suffix}"


def save_json(result: SimulationResult, output_dir: Path, slug_override: str | None = None) -> Path:
    """Save the result as pretty-printed JSON. Returns the saved path."""
    filepath = _report_path(result, output_dir, "json", slug_override)
    filepath.write_text(
        json.dumps(result_to_dict(result), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Report saved to: %s", filepath)
    return filepath


def save_to_file(
    result: SimulationResult,
    output_dir: Path,
    slug_override: str | None = None,
    user_pick: str | None = None,
) -> Path:
    """Save the full simulation as a markdown report.

    Args:
        result: The completed SimulationResult.
        output_dir: Directory to save the file in.
        slug_override: If provided, use this as the filename stem suffix instead
            of deriving one from the prompt. Useful for inbox mode.
        user_pick: Optional model id the user preferred; compared against the
            judge's top pick in the report.

    Returns:
        Path to the saved file.
    """
    filepath = _report_path(result, output_dir, "md", slug_override)
    prompt = result.prompt
    cohort = ", ".join(row.from_model.name for row in result.matrix)

    lines: list[str] = [
        f"# Peer Council Evaluation: {_prompt_label(result)}",
        "",
        f"**Date:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        f"**Cohort:** {cohort}",
        f"**Prompt type:** {prompt.type}",
        f"**Fingerprint:** {prompt.fingerprint}",
    ]
    if prompt.image_name:
        lines.append(f"**Image:** {prompt.image_name}")
    lines += ["", "---", "", "## Responses", ""]

    for resp in result.responses:
        detail = resp.detail
        lines.append(f"### {detail.model.name} ({detail.model.provider})")
        lines.append("")
        lines.append(
            f"*{detail.style_tag} | Composite: {resp.composite_score} | "
            f"Peer average: {resp.avg_peer_score} | Base: {detail.base_score}*"
        )
        lines.append("")
        lines.append(detail.narrative)
        lines.append("")
        lines += [f"- {h}" for h in detail.highlights]
        lines.append("")
        lines.append(f"> {detail.guidance}")
        lines.append("")

    lines += ["## Peer Matrix", ""]
    if result.matrix:
        header = ["Model →"] + [e.to.name for e in result.matrix[0].entries]
        lines.append("| " + " | ".join(header) + " |")
        lines.append("|" + "---|" * len(header))
        for row in result.matrix:
            cells = [row.from_model.name] + [f"{e.score} ({e.focus})" for e in row.entries]
            lines.append("| " + " | ".join(cells) + " |")
    lines.append("")

    lines += ["## Top Three", ""]
    for index, resp in enumerate(result.top_three, start=1):
        lines.append(
            f"{index}. **{resp.detail.model.name}**: composite {resp.composite_score}, "
            f"peer {resp.avg_peer_score}"
        )
    lines.append("")

    lines += [f"## {JUDGE_NAME} Ranking", ""]
    for entry in result.judge_ranking:
        lines.append(
            f"{entry.rank}. **{entry.response.detail.model.name}** ({entry.score}): {entry.rationale}"
        )
    lines.append("")

    if user_pick:
        _, message = compare_choice(result, user_pick)
        lines += ["## Your Pick", "", f"**{user_pick}**: {message}", ""]

    filepath.write_text("\n".join(lines), encoding="utf-8")
    logger.info("Report saved to: %s", filepath)
    return filepath
