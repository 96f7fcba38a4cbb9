"""
Difficulty-change tween.

When the player switches difficulty the board grows or shrinks through a
few intermediate boards before the real new game starts. Each frame is an
independent fresh game.
"""
import random
from dataclasses import replace
from typing import Iterator, Optional

from .difficulty import Settings, resolve_settings, round_half_up
from .game import GameSnapshot, restart

TOTAL_FRAMES = 12


def tween_settings(
    previous: Settings, following: Settings, frames: int = TOTAL_FRAMES
) -> Iterator[Settings]:
    """
    Yield settings interpolated from previous towards following.

    Frame f of frames uses dimensions at fraction f / frames and the bomb
    odds of the following settings. The following settings themselves are
    not yielded.
    """
    for frame in range(frames):
        fraction = frame / frames
        yield replace(
            following,
            columns=previous.columns
            + round_half_up((following.columns - previous.columns) * fraction),
            rows=previous.rows
            + round_half_up((following.rows - previous.rows) * fraction),
        )


def load(
    next_id: str,
    prev_id: Optional[str] = None,
    rng: Optional[random.Random] = None,
    frames: int = TOTAL_FRAMES,
) -> Iterator[GameSnapshot]:
    """
    Yield the games shown while switching difficulty.

    Nothing is yielded unless prev_id names a different difficulty.
    Otherwise one fresh game per tween frame is yielded, then the fresh
    game for next_id. Stop iterating at any time to cancel.

    Raises:
        ConfigurationError: If either difficulty is unknown.
    """
    if prev_id is None or prev_id == next_id:
        return

    previous = resolve_settings(prev_id)
    following = resolve_settings(next_id)

    for settings in tween_settings(previous, following, frames):
        yield restart(settings=settings, rng=rng)

    yield restart(next_id, rng=rng)
