"""
Human-readable feature lists for subscription plans.
"""
from typing import List

from app.modules.plans.schemas import PlanFeatures

UNLIMITED = 999999
KEY_FEATURE_COUNT = 5

MODULES = ("ai_coach", "training", "analytics", "community", "nutrition")
LIMITS = ("saved_plans", "workouts_per_day", "nutrition_logs_per_day")


def to_sentence_case(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def is_unlimited(value: int) -> bool:
    return value == -1 or value >= UNLIMITED


def _is_unlimited_marker(value: int) -> bool:
    # the formatter only treats the two sentinel values as unlimited
    return value in (-1, UNLIMITED)


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def format_plan_features(features: PlanFeatures) -> List[str]:
    """Turn the features JSON of a plan into display lines. A legacy features_list wins."""
    if features.features_list:
        return [to_sentence_case(item) for item in features.features_list]

    lines: List[str] = []

    ai = features.ai
    if ai:
        if ai.recommendations:
            lines.append("AI-powered workout recommendations")
        if ai.coach_chat_messages_per_day:
            messages = ai.coach_chat_messages_per_day
            if _is_unlimited_marker(messages):
                lines.append("Unlimited AI coach chat messages")
            else:
                lines.append(f"{messages} AI coach messages per day")

    modules = features.modules
    if modules:
        if modules.ai_coach:
            lines.append("AI coach assistant")
        if modules.training:
            lines.append("Advanced training programs")
        if modules.analytics:
            if isinstance(modules.analytics, str):
                lines.append(f"{to_sentence_case(modules.analytics.lower())} analytics")
            else:
                lines.append("Progress analytics & insights")
        if modules.community:
            lines.append("Community access")
        if modules.nutrition:
            lines.append("Nutrition tracking & meal plans")

    limits = features.limits
    if limits:
        if limits.saved_plans:
            plans = limits.saved_plans
            if _is_unlimited_marker(plans):
                lines.append("Unlimited saved workout plans")
            else:
                lines.append(f"{plans} saved workout {_plural(plans, 'plan')}")
        if limits.workouts_per_day:
            workouts = limits.workouts_per_day
            if _is_unlimited_marker(workouts):
                lines.append("Unlimited workouts per day")
            else:
                lines.append(f"{workouts} {_plural(workouts, 'workout')} per day")
        if limits.nutrition_logs_per_day:
            logs = limits.nutrition_logs_per_day
            if _is_unlimited_marker(logs):
                lines.append("Unlimited nutrition logs")
            else:
                lines.append(f"{logs} nutrition {_plural(logs, 'log')} per day")

    return lines


def get_key_features(features: PlanFeatures) -> List[str]:
    return format_plan_features(features)[:KEY_FEATURE_COUNT]


def has_module(features: PlanFeatures, module: str) -> bool:
    """Only an explicit True counts; an analytics tier name does not."""
    if module not in MODULES:
        raise ValueError(f"Unknown module: {module}")
    if not features.modules:
        return False
    return getattr(features.modules, module) is True


def get_limit(features: PlanFeatures, limit: str) -> int:
    if limit not in LIMITS:
        raise ValueError(f"Unknown limit: {limit}")
    if not features.limits:
        return 0
    return getattr(features.limits, limit) or 0
