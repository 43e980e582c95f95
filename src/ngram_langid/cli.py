"""Click CLI entry point.

Usage:
    ngram-langid detect "The quick brown fox" --profiles ./profiles
    ngram-langid detect "Bonjour" --profiles ./profiles --short-profiles ./profiles-sm --all
    echo "Guten Tag" | ngram-langid detect - --profiles ./profiles --seed 42
    ngram-langid languages --profiles ./profiles
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ngram_langid.config import DetectorConfig, settings
from ngram_langid.dispatcher import TieredLanguageDetector
from ngram_langid.profiles import DirectoryProfileSource
from ngram_langid.utils.logging import BOLD, DIM, GREEN, RESET, get_logger

log = get_logger(__name__, level=settings.log_level)


def _profiles_dir(value: str | None, option: str) -> Path:
    if not value:
        raise click.UsageError(f"{option} not given and LANGID_PROFILES_DIR not set")
    path = Path(value)
    if not path.is_dir():
        raise click.BadParameter(f"not a directory: {path}", param_hint=option)
    return path


@click.group()
def cli() -> None:
    """N-gram language detection CLI."""
    pass


@cli.command()
@click.argument("text")
@click.option("--profiles", default=None, help="Profile directory (default: LANGID_PROFILES_DIR)")
@click.option("--short-profiles", default=None, help="Short-text profile directory (default: --profiles)")
@click.option("--short-text-length", default=None, type=int, help="Inputs up to this length use short-text profiles")
@click.option("--seed", default=None, type=int, help="Random seed for reproducible output")
@click.option("--all", "show_all", is_flag=True, help="Show every language above the threshold")
def detect(
    text: str,
    profiles: str | None,
    short_profiles: str | None,
    short_text_length: int | None,
    seed: int | None,
    show_all: bool,
) -> None:
    """Detect the language of TEXT ('-' reads stdin)."""
    if text == "-":
        text = sys.stdin.read()

    standard_dir = _profiles_dir(profiles or settings.profiles_dir, "--profiles")
    short_dir = _profiles_dir(
        short_profiles or settings.short_profiles_dir or str(standard_dir), "--short-profiles"
    )

    config = DetectorConfig(random_seed=seed if seed is not None else settings.random_seed)
    detector = TieredLanguageDetector.from_sources(
        DirectoryProfileSource(standard_dir),
        DirectoryProfileSource(short_dir),
        config=config,
        short_text_length=short_text_length if short_text_length is not None else settings.short_text_length,
    )
    detector.add_all_languages()

    results = detector.detect_all(text)
    if not results:
        click.echo("unknown")
        raise SystemExit(1)

    if show_all:
        for result in results:
            click.echo(f"{result.language}\t{result.probability:.5f}")
    else:
        click.echo(results[0].language)


@cli.command()
@click.option("--profiles", default=None, help="Profile directory (default: LANGID_PROFILES_DIR)")
def languages(profiles: str | None) -> None:
    """List languages available in a profile directory."""
    directory = _profiles_dir(profiles or settings.profiles_dir, "--profiles")
    codes = DirectoryProfileSource(directory).available_languages()

    click.echo(f"\n{BOLD}Profiles in {directory}{RESET}\n")
    for code in codes:
        click.echo(f"  {code}")
    click.echo(f"\n  {GREEN}Total: {len(codes)} languages{RESET}\n")
    if not codes:
        log.warning(f"{DIM}No profile files found{RESET}")


if __name__ == "__main__":
    cli()
