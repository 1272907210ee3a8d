"""
Local affirmation generator.

Picks one message from the lookup tables in tables.py based on what the user has
told us so far. Nothing here touches the network; the random source can be
injected so a seeded generator always returns the same message.
"""
import logging
import random
from typing import Dict, List, Optional

from app.config.onboarding_config import DEFAULT_LANGUAGE
from app.modules.affirmations import tables
from app.modules.affirmations.schemas import (
    OnboardingAffirmationInput, FitnessAffirmationInput,
    DietaryAffirmationInput, CompletionMessageInput
)

logger = logging.getLogger(__name__)

HIGH_FREQUENCY_DAYS = 5
MODERATE_FREQUENCY_DAYS = 3
BUDGET_CONSCIOUS_MAX = 30
CULTURAL_PREFERENCE = "filipinoHeritage"
DEFAULT_MOOD = "motivated"
DEFAULT_GOAL = "general_fitness"
DEFAULT_NAME = "friend"


def for_language(table: Dict, language: Optional[str]):
    """Table entry for a language, falling back to English."""
    return table.get(language or DEFAULT_LANGUAGE) or table[DEFAULT_LANGUAGE]


class AffirmationGenerator:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _choose(self, pool: List[str]) -> str:
        return pool[self.rng.randrange(len(pool))]

    def onboarding(self, data: OnboardingAffirmationInput) -> str:
        """Personalized when we know a name, mood-based when we know the mood, general otherwise."""
        lang = for_language(tables.ONBOARDING, data.preferred_language)
        name = data.nickname or data.first_name
        if name:
            pool = lang["personalized"]
        elif data.current_mood and data.current_mood in lang["mood"]:
            pool = lang["mood"][data.current_mood]
        else:
            pool = lang["general"]
        affirmation = self._choose(pool)
        if name and "{name}" in affirmation:
            affirmation = affirmation.replace("{name}", name, 1)
        return affirmation

    def fitness_pool(self, data: FitnessAffirmationInput) -> List[str]:
        lang = for_language(tables.FITNESS, data.preferred_language)
        pool: List[str] = []
        if data.fitness_goal in lang["goal_specific"]:
            pool.extend(lang["goal_specific"][data.fitness_goal])
        if data.fitness_level in lang["level_specific"]:
            pool.extend(lang["level_specific"][data.fitness_level])
        if data.workout_location in lang["location_specific"]:
            pool.extend(lang["location_specific"][data.workout_location])
        if data.days_per_week >= HIGH_FREQUENCY_DAYS:
            pool.extend(lang["frequency_specific"]["high"])
        elif data.days_per_week >= MODERATE_FREQUENCY_DAYS:
            pool.extend(lang["frequency_specific"]["moderate"])
        if data.current_mood in lang["mood_specific"]:
            pool.extend(lang["mood_specific"][data.current_mood])
        if not pool:
            pool = list(for_language(tables.GENERAL_FITNESS, data.preferred_language))
        return pool

    def fitness(self, data: FitnessAffirmationInput) -> str:
        return self._choose(self.fitness_pool(data))

    def dietary_pool(self, data: DietaryAffirmationInput) -> List[str]:
        lang = for_language(tables.DIETARY, data.preferred_language)
        pool: List[str] = []
        if data.dietary_preference in lang["preference_specific"]:
            pool.extend(lang["preference_specific"][data.dietary_preference])

        budget_conscious = data.weekly_budget is not None and data.weekly_budget <= BUDGET_CONSCIOUS_MAX
        if budget_conscious:
            pool.extend(lang["budget_specific"]["budget_conscious"])
        else:
            pool.extend(lang["budget_specific"]["comfortable_budget"])

        if data.health_conditions:
            pool.extend(lang["health_specific"]["has_conditions"])
        else:
            pool.extend(lang["health_specific"]["general_wellness"])

        if data.dietary_preference == CULTURAL_PREFERENCE:
            pool.extend(lang["cultural_specific"]["heritage_focused"])
        if not pool:
            pool = list(for_language(tables.GENERAL_DIETARY, data.preferred_language))
        return pool

    def dietary(self, data: DietaryAffirmationInput) -> str:
        return self._choose(self.dietary_pool(data))

    def completion(self, data: CompletionMessageInput) -> str:
        """Deterministic: name + mood line + goal phrase through the language template."""
        lang = for_language(tables.COMPLETION, data.preferred_language)
        first_name = data.full_name.split(" ")[0] if data.full_name else None
        name = data.nickname or first_name or DEFAULT_NAME
        mood = data.current_mood or DEFAULT_MOOD
        goal = data.fitness_goal or DEFAULT_GOAL
        mood_message = lang["mood_messages"].get(mood) or lang["mood_messages"][DEFAULT_MOOD]
        goal_message = lang["goal_messages"].get(goal) or lang["goal_messages"][DEFAULT_GOAL]
        return lang["template"].format(name=name, mood_message=mood_message, goal_message=goal_message)


generator = AffirmationGenerator()
