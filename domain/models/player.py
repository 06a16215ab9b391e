"""
Player domain model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """
    Represents a rated participant that can be placed on a team.

    This is a pure domain model with no infrastructure dependencies.
    Only id and skill matter to the engine; name and position are carried
    through for display.
    """

    id: int
    skill: float
    name: str | None = None
    position: str | None = None  # e.g. "Def", "Mid", "Fwd"

    def is_elite(self, threshold: float) -> bool:
        """Check if the player's skill reaches the elite threshold."""
        return self.skill >= threshold

    def __str__(self) -> str:
        label = self.name if self.name else f"#{self.id}"
        return f"{label} ({self.skill})"
