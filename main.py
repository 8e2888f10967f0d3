#!/usr/bin/env python3
"""
Main CLI for TypeTune
=====================

This CLI calculates tuned line-height and letter-spacing, exports code
snippets and applies results to JSON documents.
"""

import json
import logging
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError as PydanticValidationError

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

try:
    from src.typetune.core.config import VALID_GRID_STEPS, AppConfig, PluginSettings
    from src.typetune.core.exceptions import InvalidSettingAssignmentError, TypeTuneError
    from src.typetune.core.models import TypographyInput, TypographyResult
    from src.typetune.core.settings_store import SettingsStore
    from src.typetune.engine.calculator import calculate
    from src.typetune.engine.exporter import EXPORT_FORMATS, export_code
    from src.typetune.fonts.database import get_database
    from src.typetune.fonts.utils import weight_from_style
    from src.typetune.host.document import Document
    from src.typetune.host.pipeline import ConsoleProgressCallback, TypographyTuner
except ImportError as e:
    logger.exception(f"Import failed: {e}")
    logger.exception(
        "Make sure you have all dependencies installed and the project is properly set up"
    )
    sys.exit(1)

CONTEXT_CHOICES = ["auto", "display", "body", "caption"]
GRID_STEP_CHOICES = [str(step) for step in VALID_GRID_STEPS]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings YAML file (default: APP_SETTINGS_PATH or ~/.typetune/settings.yaml)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Application configuration YAML file (default: environment variables)",
)
@click.pass_context
def cli(ctx, verbose, settings_file, config_file):
    """TypeTune typography CLI."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if config_file:
            config = AppConfig.from_env_and_yaml(yaml_path=config_file)
        else:
            config = AppConfig.load_from_env()
    except TypeTuneError as e:
        logger.exception(f"Could not load configuration: {e}")
        sys.exit(1)

    if not verbose:
        logging.getLogger().setLevel(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["store"] = SettingsStore(settings_file or config.settings_path)


def typography_options(func):
    """Options shared by commands that calculate one text configuration."""
    options = [
        click.option("--family", "-f", required=True, help="Font family name"),
        click.option("--size", "-s", type=float, required=True, help="Font size in px"),
        click.option("--weight", "-w", type=int, help="Numeric weight (default: from --style)"),
        click.option("--style", default="Regular", show_default=True, help="Font style label"),
        click.option("--uppercase", is_flag=True, help="Text is set in all caps"),
        click.option("--dark", is_flag=True, help="Text sits on a dark background"),
        click.option("--context", type=click.Choice(CONTEXT_CHOICES), help="Force a context"),
        click.option("--grid-step", type=click.Choice(GRID_STEP_CHOICES), help="Grid step in px"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _calculate_from_options(
    settings: PluginSettings,
    family: str,
    size: float,
    weight: int | None,
    style: str,
    uppercase: bool,
    dark: bool,
    context: str | None,
    grid_step: str | None,
) -> TypographyResult:
    typography = TypographyInput(
        font_family=family,
        font_size=size,
        font_weight=weight if weight is not None else weight_from_style(style),
        font_style=style,
        is_uppercase=uppercase,
        is_dark_bg=dark or settings.bg_mode == "dark",
    )
    return calculate(
        typography,
        context_override=context or settings.context_override,
        grid_step=int(grid_step) if grid_step else settings.grid_step,
    )


@cli.command(name="calculate")
@typography_options
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def calculate_command(ctx, as_json, **options):
    """Calculate line-height and letter-spacing for one text configuration."""
    try:
        result = _calculate_from_options(ctx.obj["store"].settings, **options)

        if as_json:
            print(json.dumps(result.to_dict(), indent=2))
            return

        print(result.font_info)
        print(f"Line-height:    {result.line_height:g}px ({result.line_height_percent:g}%)")
        print(f"Letter-spacing: {result.letter_spacing:g}px ({result.letter_spacing_percent:g}%)")
        if result.is_approximate:
            print("Approximate: family not in the profile database")

    except (TypeTuneError, PydanticValidationError) as e:
        logger.exception(f"Calculation failed: {e}")
        sys.exit(1)


@cli.command(name="export")
@typography_options
@click.option(
    "--format",
    "export_format",
    type=click.Choice(list(EXPORT_FORMATS)),
    help="Export format (default: APP_DEFAULT_EXPORT_FORMAT)",
)
@click.pass_context
def export_command(ctx, export_format, **options):
    """Calculate one text configuration and print it as code."""
    try:
        result = _calculate_from_options(ctx.obj["store"].settings, **options)
        print(
            export_code(
                result,
                options["size"],
                export_format or ctx.obj["config"].default_export_format,
            )
        )
    except (TypeTuneError, PydanticValidationError) as e:
        logger.exception(f"Export failed: {e}")
        sys.exit(1)


@cli.command(name="fonts")
@click.option("--aliases", "show_aliases", is_flag=True, help="Also list family aliases")
def fonts_command(show_aliases):
    """List font families with a tuned profile."""
    database = get_database()

    print(f"{len(database)} font profiles")
    print("=" * 40)
    for family in database.families:
        profile = database.get_profile(family)
        print(f"{family:<28} {profile.category:<11} {profile.base_line_height_ratio:g}")

    if show_aliases:
        print("\nAliases")
        print("=" * 40)
        for alias, family in sorted(database.aliases.items()):
            print(f"{alias:<28} -> {family}")


@cli.command(name="tune")
@click.argument("document_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--apply",
    "do_apply",
    is_flag=True,
    help="Write results to the document (always on with the auto_apply setting)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to save the tuned document (default: overwrite input)",
)
@click.option("--update-styles", is_flag=True, help="Write to shared text styles")
@click.pass_context
def tune(ctx, document_path, do_apply, output, update_styles):
    """Scan a JSON document and optionally apply tuned typography."""
    try:
        document = Document.load(document_path)
        settings = ctx.obj["store"].settings
        if update_styles:
            settings = settings.model_copy(update={"update_styles": True})
        do_apply = do_apply or settings.auto_apply

        tuner = TypographyTuner(document, settings)
        report = tuner.scan()

        print(f"{report.total_items} text items in {len(report.groups)} configurations")
        print("=" * 40)
        for group in report.groups:
            status = "ok " if group.already_good else "fix"
            print(
                f"[{status}] {group.result.font_info} x{group.count}: "
                f"{group.result.line_height:g}px ({group.result.line_height_percent:g}%), "
                f"{group.result.letter_spacing:g}px"
            )

        if not do_apply:
            print(
                f"\n{report.already_good_count} already well-tuned, "
                f"{report.needs_change_count} to fix"
            )
            return

        tuner.callback = ConsoleProgressCallback()
        result = tuner.apply()
        destination = output or document_path
        document.save(destination)
        print(f"Saved to {destination}")

        if result.failures:
            sys.exit(1)

    except (TypeTuneError, PydanticValidationError) as e:
        logger.exception(f"Tuning failed: {e}")
        sys.exit(1)


@cli.group(name="settings")
def settings_group():
    """Show or change persisted settings."""


@settings_group.command(name="show")
@click.pass_context
def settings_show(ctx):
    """Print the current settings."""
    try:
        store = ctx.obj["store"]
        print(f"# {store.path}")
        print(yaml.safe_dump(store.settings.model_dump(), sort_keys=True), end="")
    except TypeTuneError as e:
        logger.exception(f"Could not load settings: {e}")
        sys.exit(1)


@settings_group.command(name="set")
@click.argument("assignments", nargs=-1, required=True)
@click.pass_context
def settings_set(ctx, assignments):
    """Set one or more settings, e.g. ``grid_step=8 bg_mode=dark``."""
    try:
        changes = {}
        for assignment in assignments:
            name, sep, value = assignment.partition("=")
            if not sep or not name.strip():
                raise InvalidSettingAssignmentError(assignment)
            changes[name.strip()] = value.strip()

        store = ctx.obj["store"]
        settings = store.update(**changes)
        print(f"Saved settings to {store.path}")
        print(yaml.safe_dump(settings.model_dump(), sort_keys=True), end="")

    except (TypeTuneError, PydanticValidationError) as e:
        logger.exception(f"Could not update settings: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
