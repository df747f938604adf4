"""Click CLI: loads config, resolves cohort and prompt, runs the simulation, renders output."""

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from config.config_loader import AppConfig, load_config
from src.inbox import archive_file, ensure_dirs, load_prompt_file, scan_inbox
from src.models import PROMPT_TYPES, ModelDefinition, PromptPayload, SimulationResult
from src.output import print_catalog, print_choice, print_result, save_json, save_to_file
from src.simulation import build_simulation, compare_choice
from src.validation import (
    InputError,
    build_prompt,
    infer_prompt_type,
    load_image,
    parse_model_ids,
    select_models,
    validate_cohort,
)

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _determine_cohort(config: AppConfig, models_arg: str | list[str] | None) -> list[ModelDefinition]:
    """Resolve and size-check the cohort. --models overrides the config default.

    Raises:
        InputError: On unknown ids or a cohort outside the configured bounds.
    """
    model_ids = parse_model_ids(models_arg) if models_arg else config.defaults.cohort
    models = select_models(model_ids)
    validate_cohort(models, config.defaults.min_cohort, config.defaults.max_cohort)
    return models


def _resolve_prompt(
    text: str | None,
    image_path: Path | None,
    prompt_type: str | None,
) -> PromptPayload:
    """Build the prompt payload, inferring the type when not given.

    Text prompts never read the image, so a stray --image cannot fail them.
    """
    effective_type = prompt_type or infer_prompt_type(text, image_path is not None)
    image_name, image_data_url = (None, None)
    if image_path is not None and effective_type != "text":
        image_name, image_data_url = load_image(image_path)
    return build_prompt(effective_type, text, image_name, image_data_url)


def _check_pick(pick: str | None, models: list[ModelDefinition]) -> None:
    if pick is not None and pick not in {m.id for m in models}:
        raise InputError("pick", f"--pick '{pick}' is not in the cohort.")


def _run_single(
    models: list[ModelDefinition],
    prompt: PromptPayload,
    output_dir: Path,
    report_format: str,
    save: bool,
    pick: str | None = None,
    slug_override: str | None = None,
) -> tuple[SimulationResult, Path | None]:
    """Run one simulation, print it, and save the report when asked."""
    label = prompt.text or prompt.image_name or ""
    console.print(
        f"\n[bold cyan]Peer Council[/bold cyan] — {len(models)} models ({prompt.type})"
    )
    console.print(f"Cohort: {', '.join(m.name for m in models)}")
    console.print(f"Prompt: [italic]{escape(label[:80])}{'...' if len(label) > 80 else ''}[/italic]\n")

    result = build_simulation(models, prompt)
    print_result(result)

    if pick is not None:
        print_choice(*compare_choice(result, pick))

    saved_path: Path | None = None
    if save:
        if report_format == "json":
            saved_path = save_json(result, output_dir, slug_override=slug_override)
        else:
            saved_path = save_to_file(result, output_dir, slug_override=slug_override, user_pick=pick)
        console.print(f"\n[dim]Saved to: {saved_path}[/dim]")
    return result, saved_path


def _run_inbox(
    config: AppConfig,
    inbox_dir: Path,
    archive_dir: Path,
    models_cli: str | None,
    type_cli: str | None,
    output_dir: Path,
    report_format: str,
) -> int:
    """Process all .md files in the inbox folder. Returns the failure count.

    Precedence for per-file settings: CLI flag > frontmatter > config default.
    """
    ensure_dirs(inbox_dir, archive_dir)
    files = scan_inbox(inbox_dir)

    if not files:
        click.echo("No files in inbox.")
        return 0

    failures = 0
    for file_path in files:
        try:
            entry = load_prompt_file(file_path)
            models = _determine_cohort(config, models_cli if models_cli is not None else entry.models)
            prompt = _resolve_prompt(entry.text, entry.image, type_cli or entry.prompt_type)
            _check_pick(entry.pick, models)
            _, saved = _run_single(
                models=models,
                prompt=prompt,
                output_dir=output_dir,
                report_format=report_format,
                save=True,
                pick=entry.pick,
                slug_override=file_path.stem,
            )
            archived = archive_file(file_path, archive_dir)
            click.echo(f"Processed: {file_path.name} -> {saved} (archived: {archived.name})")
        except Exception as e:
            failures += 1
            logger.error("Failed: %s -- %s", file_path.name, e)
            archive_file(file_path, archive_dir, failed=True)
    return failures


@click.command()
@click.argument("prompt", required=False)
@click.option("--file", "prompt_file", type=click.Path(exists=True, dir_okay=False),
              help="Read prompt text from a .md file")
@click.option("--image", "image_path", type=click.Path(exists=True, dir_okay=False),
              help="Attach an image to the prompt")
@click.option("--type", "prompt_type", type=click.Choice(PROMPT_TYPES), default=None,
              help="Prompt type (default: inferred from text/image)")
@click.option("--models", default=None, help="Comma-separated model ids, overrides the default cohort")
@click.option("--list-models", is_flag=True, help="Print the model catalog and exit")
@click.option("--pick", default=None, help="Your favourite model id, compared against the judge's top pick")
@click.option("--output", "output_path", default=None, help="Report directory (default: from config)")
@click.option("--format", "report_format", type=click.Choice(["md", "json"]), default=None,
              help="Report format (default: from config)")
@click.option("--no-save", is_flag=True, default=False, help="Print only, do not write a report")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
@click.option("--inbox", "use_inbox", is_flag=True, default=False,
              help="Process all .md prompt files in the inbox folder")
@click.option("--inbox-dir", "inbox_dir_override", default=None,
              help="Override inbox folder path (default: from config)")
def main(
    prompt: str | None,
    prompt_file: str | None,
    image_path: str | None,
    prompt_type: str | None,
    models: str | None,
    list_models: bool,
    pick: str | None,
    output_path: str | None,
    report_format: str | None,
    no_save: bool,
    verbose: bool,
    use_inbox: bool,
    inbox_dir_override: str | None,
) -> None:
    """Peer Council -- deterministic multi-model peer-evaluation simulator.

    \b
    Examples:
      python -m src.cli "Explain quantum tunneling to a 10-year-old."
      python -m src.cli "Pitch this product" --image shot.png --models gpt-4o,grok-vision,mistral-large,command-r-plus
      python -m src.cli --image chart.png --type image --pick gemini-2-flash
      python -m src.cli --file prompt.md --format json
      python -m src.cli --inbox
      python -m src.cli --list-models
    """
    load_dotenv()
    _setup_logging(verbose)

    if list_models:
        print_catalog()
        return

    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        sys.exit(1)

    effective_output = Path(output_path) if output_path else config.defaults.output_dir
    effective_format = report_format or config.defaults.report_format

    if use_inbox:
        inbox_dir = Path(inbox_dir_override) if inbox_dir_override else config.inbox.dir
        failures = _run_inbox(
            config=config,
            inbox_dir=inbox_dir,
            archive_dir=config.inbox.archive_dir,
            models_cli=models,      # raw CLI value (None if not specified)
            type_cli=prompt_type,   # raw CLI value (None if not specified)
            output_dir=effective_output,
            report_format=effective_format,
        )
        if failures:
            sys.exit(1)
        return

    if prompt_file:
        prompt_text = Path(prompt_file).read_text(encoding="utf-8").strip()
    else:
        prompt_text = prompt

    if not prompt_text and not image_path:
        console.print("[bold red]Error:[/bold red] Provide a PROMPT argument, --file, --image, or --inbox.")
        sys.exit(1)

    try:
        cohort = _determine_cohort(config, models)
        payload = _resolve_prompt(prompt_text, Path(image_path) if image_path else None, prompt_type)
        _check_pick(pick, cohort)
    except InputError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    _run_single(
        models=cohort,
        prompt=payload,
        output_dir=effective_output,
        report_format=effective_format,
        save=not no_save,
        pick=pick,
    )


if __name__ == "__main__":
    main()
