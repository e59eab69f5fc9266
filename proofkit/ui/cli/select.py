"""
Terminal multi-select built on click prompts.

Options are listed with 1-based numbers; pre-checked ones are marked
``[x]``.  The user types numbers separated by commas or spaces.  Plain
Enter keeps the pre-checked set.  Everything is written to stderr so
stdout stays clean for --json output.  An empty result re-prompts with the
caller's error message, so the returned list is never empty.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

import click

logger = logging.getLogger(__name__)

_SPLIT = re.compile(r"[,\s]+")


def multi_select(
    title: str,
    empty_error: str,
    options: Sequence[str],
    defaults: Sequence[bool],
) -> list[int]:
    """Show ``options`` and return the zero-based indices picked."""
    if len(defaults) != len(options):
        raise ValueError(
            f"defaults has {len(defaults)} entries for {len(options)} options"
        )
    if not options:
        raise ValueError("multi_select needs at least one option")

    click.secho(f"\n{title}", fg="cyan", bold=True, err=True)
    for i, (label, checked) in enumerate(zip(options, defaults), start=1):
        mark = "x" if checked else " "
        click.echo(f"  [{mark}] {i}) {label}", err=True)

    default_text = ",".join(str(i) for i, d in enumerate(defaults, start=1) if d)

    while True:
        raw = click.prompt(
            "Numbers (comma separated)",
            default=default_text,
            show_default=bool(default_text),
            err=True,
        )
        picked, bad = _parse(raw, len(options))
        if bad:
            click.secho(f"   Invalid selection: {', '.join(bad)}", fg="red", err=True)
            continue
        if not picked:
            click.secho(f"   {empty_error}", fg="red", err=True)
            continue
        logger.debug("multi_select %r -> %s", title, picked)
        return picked


def _parse(raw: str, count: int) -> tuple[list[int], list[str]]:
    """Split user input into zero-based indices and rejected tokens."""
    picked: list[int] = []
    bad: list[str] = []
    for token in _SPLIT.split(raw.strip()):
        if not token:
            continue
        if not token.isdecimal() or not 1 <= int(token) <= count:
            bad.append(token)
            continue
        index = int(token) - 1
        if index not in picked:
            picked.append(index)
    return picked, bad
