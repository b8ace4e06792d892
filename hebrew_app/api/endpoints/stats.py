"""XP and daily goal endpoints."""
from __future__ import annotations

from dataclasses import asdict, replace

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.orm import Session

from hebrew_app.api import deps
from hebrew_app.core.gamification import xp_to_next_level
from hebrew_app.db.models.user import User
from hebrew_app.schemas.stats import (
    DailyGoalRead,
    DailyGoalSetRequest,
    DailyGoalUpdateRequest,
    XPAddRequest,
    XPAddResponse,
)
from hebrew_app.services.achievement import AchievementContext, AchievementService
from hebrew_app.services.stats import StatsService

router = APIRouter(prefix="/vocab", tags=["stats"])


@router.post("/xp/add", response_model=XPAddResponse)
def add_xp(
    payload: XPAddRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> XPAddResponse:
    """Award XP, moving the level and unlocking any achievements now reached."""

    service = StatsService(db)
    stats = service.lock(current_user.id)
    result = service.add_xp(stats, payload.xp_amount)
    unlocked = AchievementService(db).check_and_unlock(
        current_user.id, AchievementContext.from_stats(stats), stats=stats
    )
    if unlocked:
        result = replace(
            result,
            total_xp=stats.xp,
            level=stats.level,
            new_level=stats.level,
            leveled_up=stats.level > result.old_level,
            xp_to_next_level=xp_to_next_level(stats.xp),
        )
    db.commit()
    logger.info(f"Awarded {payload.xp_amount} XP to user {current_user.id} ({payload.reason or 'no reason'})")
    return XPAddResponse(**asdict(result), unlocked_achievements=unlocked)


@router.post("/daily-goal/update", response_model=DailyGoalRead)
def update_daily_goal(
    payload: DailyGoalUpdateRequest | None = None,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> DailyGoalRead:
    """Count studied cards towards today's goal."""

    cards_studied = payload.cards_studied if payload else 1
    service = StatsService(db)
    status = service.advance_daily_goal(service.lock(current_user.id), cards_studied)
    db.commit()
    return DailyGoalRead.model_validate(status)


@router.put("/daily-goal", response_model=DailyGoalRead)
def set_daily_goal(
    payload: DailyGoalSetRequest,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
) -> DailyGoalRead:
    service = StatsService(db)
    stats = service.set_daily_goal(service.lock(current_user.id), payload.daily_goal)
    db.commit()
    return DailyGoalRead.model_validate(service.daily_goal_status(stats))
