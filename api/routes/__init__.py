"""API routes package"""

from . import team_members, meals, health

__all__ = ["team_members", "meals", "health"]
