"""
Selection prompt contract.

A prompt shows ``options`` with ``defaults`` pre-checked and returns the
indices the user picked.  Implementations must never return an empty
list: on an empty pick they show ``empty_error`` and ask again.  The
selectors rely on that and do no retrying of their own.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class MultiSelectPrompt(Protocol):
    def __call__(
        self,
        title: str,
        empty_error: str,
        options: Sequence[str],
        defaults: Sequence[bool],
    ) -> list[int]: ...


def resolve_prompt(prompt: MultiSelectPrompt | None) -> MultiSelectPrompt:
    """Return ``prompt``, or the interactive terminal prompt when None."""
    if prompt is not None:
        return prompt
    from proofkit.ui.cli.select import multi_select

    return multi_select
