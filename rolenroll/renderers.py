"""Renderers that convert roll records into text output.

The TextRenderer produces plain terminal lines: one header per round, one
line per die, and a closing summary. Hosts that want richer display can
consume the same record types directly.
"""

from __future__ import annotations

from rolenroll.records import PoolRoll, RollRecord, RollSummary, Round


class TextRenderer:
    """Renders a PoolRoll to a list of log lines."""

    def render_roll(self, roll: PoolRoll, summary: RollSummary | None = None) -> list[str]:
        lines: list[str] = []
        for rnd in roll.rounds:
            lines.extend(self.render_round(rnd))
        if roll.capped:
            lines.append(f"Stopped after {len(roll.rounds)} rounds with rerolls still pending")
        if summary is not None:
            lines.append(self.render_summary(summary))
        return lines

    def render_round(self, record: Round) -> list[str]:
        title = "Base roll" if record.index == 0 else f"Reroll round {record.index}"
        lines = [f"{title}: {len(record.rolls)} dice, {record.rerolls} rerolls"]
        lines.extend(self.render_die(r) for r in record.rolls)
        return lines

    def render_die(self, record: RollRecord, indent: int = 4) -> str:
        return f"{' ' * indent}{record.config.label}: rolled {record.rolled}, {record.face}"

    def render_summary(self, summary: RollSummary) -> str:
        return (
            f"Total {summary.total}: {summary.based_score} base,"
            f" {summary.reroll_points} from {summary.reroll_count} rerolls,"
            f" +{summary.plus_tokens} / -{summary.minus_tokens} tokens"
        )
