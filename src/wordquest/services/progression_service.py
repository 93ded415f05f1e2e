"""Durable player progression: load, save, reset and reward policy."""
import json
import logging
from dataclasses import replace
from typing import Tuple

from wordquest import monitoring
from wordquest.config import settings
from wordquest.models.lesson_models import LessonReward
from wordquest.models.player_models import Persona, PlayerProfile
from wordquest.services.store_service import StoreService

logger = logging.getLogger(__name__)

PROFILE_KEY = "wordquest.player"


def apply_reward(profile: PlayerProfile, final_score: int) -> Tuple[PlayerProfile, LessonReward]:
    """Reward policy for a confirmed lesson.

    Stars grow by the number of correct answers, gold by a flat award, and a
    level-1 player is promoted to level 2 once the score reaches the
    promotion threshold. No promotion exists beyond level 2.
    """
    final_score = max(0, final_score)
    leveled_up = (
        final_score >= settings.lesson.promotion_threshold
        and profile.level == 1
    )
    updated = replace(
        profile,
        stars=profile.stars + final_score,
        gold=profile.gold + settings.lesson.gold_award,
        level=profile.level + 1 if leveled_up else profile.level,
    )
    reward = LessonReward(
        score=final_score,
        stars_earned=final_score,
        gold_earned=settings.lesson.gold_award,
        leveled_up=leveled_up,
    )
    return updated, reward


class ProgressionService:
    """Service for loading and persisting the player profile."""

    def __init__(self, store: StoreService):
        """Initialize the service with the durable store."""
        self.store = store

    def load(self) -> PlayerProfile:
        """Read the profile; missing or corrupt data yields defaults."""
        raw = self.store.get(PROFILE_KEY)
        if raw is None:
            logger.debug("No stored profile, using defaults")
            return PlayerProfile()
        try:
            return PlayerProfile.from_dict(json.loads(raw))
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Stored profile is corrupt, using defaults: {e}")
            return PlayerProfile()

    def save(self, profile: PlayerProfile) -> bool:
        """Overwrite the stored profile."""
        saved = self.store.set(PROFILE_KEY, json.dumps(profile.to_dict()))
        if saved:
            logger.debug(f"Profile saved: {profile}")
        return saved

    def reset(self) -> PlayerProfile:
        """Clear the stored profile and return defaults."""
        self.store.delete(PROFILE_KEY)
        monitoring.progress_resets.inc()
        logger.info("Player progress reset")
        return PlayerProfile()

    def onboard(self, profile: PlayerProfile, name: str, persona: Persona) -> PlayerProfile:
        """Set the player's name and persona and persist them."""
        name = name.strip()
        if not name:
            raise ValueError("Player name cannot be empty")
        updated = replace(profile, name=name, persona=Persona.from_id(persona))
        self.save(updated)
        logger.info(f"Player onboarded as {updated.name} ({updated.persona.value})")
        return updated

    def complete_lesson(self, profile: PlayerProfile, final_score: int) -> Tuple[PlayerProfile, LessonReward]:
        """Apply the reward policy and persist the result."""
        updated, reward = apply_reward(profile, final_score)
        self.save(updated)
        if reward.leveled_up:
            monitoring.level_ups.inc()
            logger.info(f"{updated.name} promoted to level {updated.level}")
        logger.info(
            f"Lesson rewarded: +{reward.stars_earned} stars, +{reward.gold_earned} gold"
        )
        return updated, reward
