"""
Onboarding Configuration
This config defines the onboarding wizard steps and the option catalogues each step accepts.
Used by the step validators, the header context and the /onboarding/steps endpoint.
"""

# Wizard steps in navigation order. "number" is what the header shows.
STEPS = [
    {"key": "language", "number": 1, "route": "/(onboarding)/language", "label": "Language"},
    {"key": "mood", "number": 2, "route": "/(onboarding)/mood", "label": "Mood"},
    {"key": "profile", "number": 3, "route": "/(onboarding)/profile", "label": "Profile"},
    {"key": "location", "number": 4, "route": "/(onboarding)/location", "label": "Location"},
    {"key": "height", "number": 5, "route": "/(onboarding)/height", "label": "Height"},
    {"key": "weight", "number": 6, "route": "/(onboarding)/weight", "label": "Weight"},
    {"key": "fitness", "number": 7, "route": "/(onboarding)/fitness", "label": "Fitness"},
    {"key": "target-muscle-group", "number": 8, "route": "/(onboarding)/target-muscle-group", "label": "Target muscles"},
    {"key": "dietary", "number": 9, "route": "/(onboarding)/dietary", "label": "Dietary"},
    {"key": "finish", "number": 9, "route": "/(onboarding)/finish", "label": "Finish"},
]

TOTAL_STEPS = 9
COMPLETED_STEP = 10
HOME_ROUTE = "/(tabs)/home"

# Options per step
LANGUAGES = ["en", "fil", "es"]
DEFAULT_LANGUAGE = "en"

MOODS = ["happy", "calm", "energetic", "anxious", "tired"]

AGE_RANGES = ["18", "18-25", "26-35", "36-45", "46+"]
GENDERS = ["male", "female", "non_binary", "prefer_not_to_say"]

FITNESS_GOALS = [
    "loseWeight",
    "buildMuscle",
    "improveCardiovascular",
    "increaseStrength",
    "enhanceFlexibility",
    "buildStrength",
    "getToned",
    "getLean",
    "mobility",
    "endurance",
    "bodyBuilding",
    "stayHealthy",
]
FITNESS_LEVELS = ["beginner", "intermediate", "advanced"]
WORKOUT_LOCATIONS = ["home", "gym"]
HOME_EQUIPMENT = [
    "none",
    "dumbbells",
    "resistanceBands",
    "pullUpBar",
    "yogaMat",
    "kettleBells",
    "barBell",
    "treadmill",
    "jumpingRope",
    "other",
]
GYM_EQUIPMENT = ["fullGymAccess"]
WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

TARGET_MUSCLES = [
    "fullBody",
    "chest",
    "glutes",
    "upperBody",
    "core",
    "legs",
    "back",
    "shoulders",
    "lowerBody",
    "arms",
]

DIETARY_PREFERENCES = [
    "vegan",
    "keto",
    "paleo",
    "mediterranean",
    "balanced",
    "glutenFree",
    "flexitarian",
    "filipinoHeritage",
]
HEALTH_CONDITIONS = ["acidReflux", "highBloodPressure", "diabetes", "other"]
DEFAULT_BUDGET_CURRENCY = "USD"

# "other" is a placeholder replaced by free-text entries
OTHER_OPTION = "other"

DEFAULT_ROLE = "member"


def get_step(key: str) -> dict | None:
    for step in STEPS:
        if step["key"] == key:
            return step
    return None


def get_route_step_map() -> dict:
    """Route segment -> step number, used when no screen has written a current step."""
    return {step["key"]: step["number"] for step in STEPS}


def get_options() -> dict:
    """Catalogue of option codes grouped by the step that offers them."""
    return {
        "language": {"languages": LANGUAGES},
        "mood": {"moods": MOODS},
        "profile": {"age_ranges": AGE_RANGES, "genders": GENDERS},
        "fitness": {
            "fitness_goals": FITNESS_GOALS,
            "fitness_levels": FITNESS_LEVELS,
            "workout_locations": WORKOUT_LOCATIONS,
            "home_equipment": HOME_EQUIPMENT,
            "gym_equipment": GYM_EQUIPMENT,
            "weekdays": WEEKDAYS,
        },
        "target-muscle-group": {"target_muscles": TARGET_MUSCLES},
        "dietary": {
            "dietary_preferences": DIETARY_PREFERENCES,
            "health_conditions": HEALTH_CONDITIONS,
            "weekdays": WEEKDAYS,
        },
    }
