"""Update-state and update-type color maps."""

from rich.markup import escape

from release_checker.models import Ordering, UpdateState

STATE_COLORS: dict[UpdateState, str] = {
    UpdateState.OUTDATED: "red bold",
    UpdateState.CURRENT: "green",
    UpdateState.UNKNOWN: "yellow",
}

UPDATE_TYPE_COLORS: dict[str, str] = {
    "major": "red bold",
    "minor": "yellow",
    "patch": "green",
    "up-to-date": "dim",
    "unknown": "dim",
}

ORDERING_COLORS: dict[Ordering, str] = {
    Ordering.LESS: "red",
    Ordering.EQUAL: "green",
    Ordering.GREATER: "cyan",
}


def styled_version(version: str, state: UpdateState) -> str:
    color = STATE_COLORS.get(state, "white")
    return f"[{color}]{escape(version or '-')}[/{color}]"


def styled_state(state: UpdateState) -> str:
    color = STATE_COLORS.get(state, "white")
    return f"[{color}]{state.value}[/{color}]"


def styled_update_type(update_type: str) -> str:
    color = UPDATE_TYPE_COLORS.get(update_type, "white")
    return f"[{color}]{update_type}[/{color}]"


def styled_ordering(ordering: Ordering) -> str:
    color = ORDERING_COLORS.get(ordering, "white")
    return f"[{color}]{ordering.value}[/{color}]"
