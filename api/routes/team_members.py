"""Team member management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from domain.schemas.team_member_schemas import (
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamMemberResponse,
    MemberStatsResponse,
)
from services import TeamService
from domain.mappers import TeamMemberMapper

router = APIRouter(prefix="/team-members", tags=["Team Members"])
logger = logging.getLogger("mealtracker.api.team_members")


@router.get("", response_model=List[TeamMemberResponse])
def list_team_members(db: Session = Depends(get_db)):
    """Return every team member with their meals (most recent date first)."""
    members = TeamService.list_team_members(db)
    return [TeamMemberMapper.to_response(m) for m in members]


@router.post(
    "", response_model=TeamMemberResponse, status_code=status.HTTP_201_CREATED
)
def create_team_member(payload: TeamMemberCreate, db: Session = Depends(get_db)):
    """Create a team member; 400 on empty fields, 409 on a taken employee ID."""
    member = TeamService.create_team_member(db, payload.employee_id, payload.name)
    return TeamMemberMapper.to_response(member)


@router.get("/{member_id}", response_model=TeamMemberResponse)
def get_team_member(member_id: UUID, db: Session = Depends(get_db)):
    member = TeamService.get_team_member(db, member_id)
    return TeamMemberMapper.to_response(member)


@router.put("/{member_id}", response_model=TeamMemberResponse)
def update_team_member(
    member_id: UUID, payload: TeamMemberUpdate, db: Session = Depends(get_db)
):
    """Replace employee ID and name of an existing member."""
    member = TeamService.update_team_member(
        db, member_id, payload.employee_id, payload.name
    )
    return TeamMemberMapper.to_response(member)


@router.delete("/{member_id}")
def delete_team_member(member_id: UUID, db: Session = Depends(get_db)):
    """Delete a team member and all of their meal entries."""
    removed = TeamService.delete_team_member(db, member_id)
    return {"status": "ok", "deleted": str(member_id), "meals_removed": removed}


@router.get("/{member_id}/stats", response_model=MemberStatsResponse)
def get_member_stats(member_id: UUID, db: Session = Depends(get_db)):
    """Lifetime spend and meal counts for one member."""
    member, stats = TeamService.get_member_stats(db, member_id)
    return TeamMemberMapper.to_stats_response(member, stats)
