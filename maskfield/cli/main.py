#!/usr/bin/env python3
"""maskfield CLI - format and unformat text with mask templates."""

import functools
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import click

from maskfield import __version__
from maskfield.core.config import FillDirection, MaskConfig
from maskfield.core.exceptions import ConfigurationError
from maskfield.core.presets import PRESETS, get_preset
from maskfield.core.profile_loader import ProfileLoader
from maskfield.engine import MaskEngine
from maskfield.logging_config import configure_logging

_CONFIG_FIELDS = (
    "template",
    "replacement_char",
    "allowed",
    "direction",
    "left_affix",
    "right_affix",
)


def config_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options that describe a mask configuration."""
    options = [
        click.option("--template", "-t", help="Template, e.g. '(###) ###-####'"),
        click.option("--replacement-char", "-r", help="Placeholder character (default '#')"),
        click.option("--allowed", "-a", help="Characters a user may enter (default: all)"),
        click.option(
            "--direction",
            "-d",
            type=click.Choice([d.value for d in FillDirection] + ["ltr", "rtl"]),
            help="Slot fill direction",
        ),
        click.option("--left-affix", help="Fixed prefix"),
        click.option("--right-affix", help="Fixed suffix"),
        click.option("--preset", type=click.Choice(sorted(PRESETS)), help="Built-in preset"),
        click.option("--profile", "-p", help="Profile name in the profiles file"),
        click.option(
            "--profiles-file",
            type=click.Path(),
            envvar="MASKFIELD_PROFILES",
            help="YAML/JSON profiles file (env: MASKFIELD_PROFILES)",
        ),
    ]
    for option in reversed(options):
        func = option(func)

    @functools.wraps(func)
    def wrapper(**kwargs: Any) -> Any:
        kwargs["config"] = _build_config(
            preset=kwargs.pop("preset"),
            profile=kwargs.pop("profile"),
            profiles_file=kwargs.pop("profiles_file"),
            **{name: kwargs.pop(name) for name in _CONFIG_FIELDS},
        )
        return func(**kwargs)

    return wrapper


def _build_config(
    preset: Optional[str],
    profile: Optional[str],
    profiles_file: Optional[str],
    **fields: Optional[str],
) -> MaskConfig:
    """Resolve preset/profile and apply explicit options on top."""
    if preset and profile:
        raise click.UsageError("Use either --preset or --profile, not both")

    overrides = {
        "template": fields["template"],
        "replacement_char": fields["replacement_char"],
        "allowed_chars": fields["allowed"],
        "direction": fields["direction"],
        "left_affix": fields["left_affix"],
        "right_affix": fields["right_affix"],
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    try:
        if profile:
            if not profiles_file:
                raise click.UsageError("--profile needs --profiles-file or MASKFIELD_PROFILES")
            base = ProfileLoader().load_profile(Path(profiles_file), profile)
        elif preset:
            base = get_preset(preset)
        else:
            base = MaskConfig()
        return base.evolve(**overrides) if overrides else base
    except ConfigurationError as e:
        raise click.UsageError(e.message) from e


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Log output format",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_format: str) -> None:
    """maskfield - masked text formatting for input fields."""
    ctx.ensure_object(dict)
    configure_logging(level=log_level, fmt=log_format)


@cli.command("format")
@click.argument("raw")
@click.option("--position", type=int, default=None, help="Caret offset into RAW")
@config_options
def format_command(raw: str, position: Optional[int], config: MaskConfig) -> None:
    """Insert template literals into RAW."""
    caret = len(raw) if position is None else position
    text, caret = MaskEngine(config).format(raw, caret)
    click.echo(text)
    if position is not None:
        click.echo(f"position: {caret}")


@cli.command("unformat")
@click.argument("masked")
@click.option("--keep-suffix", is_flag=True, help="Append the right affix (legacy output)")
@click.option("--strict", is_flag=True, help="Fail unless MASKED exactly fits the template")
@config_options
def unformat_command(masked: str, keep_suffix: bool, strict: bool, config: MaskConfig) -> None:
    """Recover the raw value from MASKED."""
    engine = MaskEngine(config)
    if strict:
        result = engine.unformat_strict(masked)
        if not result.is_match:
            click.echo(f"Error: {masked!r} does not match {config.template!r}", err=True)
            sys.exit(1)
        raw = result.raw or ""
        click.echo(raw + config.right_affix if keep_suffix else raw)
        return

    if keep_suffix:
        click.echo(engine.unformat_with_suffix(masked))
    else:
        click.echo(engine.unformat_raw(masked))


@cli.command("edit")
@click.argument("display")
@click.option("--position", type=int, default=None, help="Caret offset (default: end)")
@config_options
def edit_command(display: str, position: Optional[int], config: MaskConfig) -> None:
    """Run the field edit pipeline on DISPLAY."""
    caret = len(display) if position is None else position
    text, caret = MaskEngine(config).process_edit(display, caret)
    click.echo(text)
    click.echo(f"position: {caret}")


@cli.command("profiles")
@click.argument("profiles_file", type=click.Path(exists=True))
def profiles_command(profiles_file: str) -> None:
    """List the profiles defined in PROFILES_FILE."""
    try:
        configs = ProfileLoader().load_profiles(Path(profiles_file))
    except ConfigurationError as e:
        raise click.UsageError(e.message) from e

    if not configs:
        click.echo("No profiles defined")
        return
    for name, config in sorted(configs.items()):
        click.echo(f"{name}: {config.template!r} ({config.direction.value})")


@cli.command()
def version() -> None:
    """Show maskfield version."""
    click.echo(f"maskfield v{__version__}")


def main() -> int:
    """Main entry point."""
    try:
        cli()
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
