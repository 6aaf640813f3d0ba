from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rules:
    """Rule toggles layered on top of the single-jump game.

    With every flag off a move is a single diagonal step or a single jump,
    captures are optional and a side only loses once it has no pieces left.
    """

    chain_captures: bool = False
    forced_capture: bool = False
    blocked_side_loses: bool = False


VARIANTS: dict[str, Rules] = {
    "minimal": Rules(),
    "english": Rules(chain_captures=True, forced_capture=True, blocked_side_loses=True),
}

DEFAULT_VARIANT = "minimal"


def rules_for_variant(name: str) -> Rules:
    try:
        return VARIANTS[name]
    except KeyError as exc:
        raise ValueError(f"Unsupported variant '{name}'.") from exc
