"""Streamlit dice roller for Role&Roll.

Run with: PYTHONPATH=. streamlit run ui/app.py
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import streamlit as st

from rolenroll.dice import d6, roll_pool
from rolenroll.pool import MAX_POOL, request_pool
from rolenroll.records import PoolRoll, RollSummary
from rolenroll.renderers import TextRenderer
from rolenroll.scoring import summarize

HISTORY_LIMIT = 20


@dataclass
class RollAction:
    """One completed roll as the host remembers it."""

    total_dice: int
    special: str
    roll: PoolRoll
    summary: RollSummary
    warnings: list[str] = field(default_factory=list)


@dataclass
class RollSession:
    """Everything the page remembers between reruns.

    The engine itself is stateless; this object lives in st.session_state
    and is the only place roll history is kept.
    """

    total_dice: int = 5
    special: str = ""
    history: list[RollAction] = field(default_factory=list)

    def record(self, action: RollAction) -> None:
        self.history.insert(0, action)
        del self.history[HISTORY_LIMIT:]

    @property
    def last(self) -> RollAction | None:
        return self.history[0] if self.history else None


def clamp_message(kind: str, requested: int, used: int) -> str:
    return f"{kind.capitalize()} die: {requested} faces requested, using {used}."


def perform_roll(session: RollSession, total_dice: int | str, special: str,
                 rng: Callable[[], int] = d6) -> RollAction | str:
    """Validate, roll and score one request.

    Returns the recorded RollAction, or the rejection message if the
    request is invalid. Nothing is recorded for a rejected request.
    """
    warnings: list[str] = []
    outcome = request_pool(
        total_dice, special,
        on_clamp=lambda kind, req, used: warnings.append(clamp_message(kind, req, used)),
    )
    if not outcome.ok:
        return str(outcome.error)

    roll = roll_pool(outcome.pool, rng)
    action = RollAction(
        total_dice=len(outcome.pool),
        special=special,
        roll=roll,
        summary=summarize(roll),
        warnings=warnings,
    )
    session.total_dice = action.total_dice
    session.special = special
    session.record(action)
    return action


def get_session() -> RollSession:
    if "session" not in st.session_state:
        st.session_state["session"] = RollSession()
    return st.session_state["session"]


def show_summary(summary: RollSummary) -> None:
    """Display the roll breakdown in a compact row of metrics."""
    cols = st.columns(6)
    cols[0].metric("Based score", summary.based_score)
    cols[1].metric("Rerolls", summary.reroll_count)
    cols[2].metric("Reroll points", summary.reroll_points)
    cols[3].metric("Plus tokens", summary.plus_tokens)
    cols[4].metric("Minus tokens", summary.minus_tokens)
    cols[5].metric("Total", summary.total)


def main() -> None:
    st.set_page_config(page_title="Role&Roll Dice Pool")
    st.title("Role&Roll Dice Pool")

    session = get_session()
    renderer = TextRenderer()

    with st.form("dice-form"):
        total_dice = st.number_input("Total dice", min_value=1, max_value=MAX_POOL, value=session.total_dice, step=1)
        special = st.text_input("Special dice", value=session.special, help='e.g. "a1, n2"')
        submitted = st.form_submit_button("Roll", type="primary")

    if submitted:
        result = perform_roll(session, int(total_dice), special)
        if isinstance(result, str):
            st.error(result)

    action = session.last
    if action is None:
        return

    for warning in action.warnings:
        st.warning(warning)
    show_summary(action.summary)
    st.code("\n".join(renderer.render_roll(action.roll, action.summary)))

    if len(session.history) > 1:
        st.subheader("History")
        for past in session.history[1:]:
            st.caption(f"{past.total_dice} dice {past.special or ''} → {past.summary.total}")


if __name__ == "__main__":
    main()
