from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Team:
    """Domain entity: Team.

    Members are referenced by employee id, in roster order.
    ``bonus_min_working_hours`` is kept for data fidelity; no rule consumes it yet.
    """

    team_id: int
    head_member_id: int
    bonus_min_working_hours: int
    member_ids: tuple[int, ...] = field(default_factory=tuple)
