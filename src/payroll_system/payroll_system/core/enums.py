from __future__ import annotations

from enum import Enum


class ProficiencyLevel(str, Enum):
    """Employee seniority tier; each one maps to exactly one salary config."""

    JUNIOR = "junior"
    SENIOR = "senior"
    EXPERT = "expert"
    TEAM_LEAD = "team_lead"
