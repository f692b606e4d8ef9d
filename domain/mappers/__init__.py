"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.team_member_mapper import TeamMemberMapper

__all__ = ["TeamMemberMapper"]
