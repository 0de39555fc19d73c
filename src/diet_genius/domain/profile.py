"""User profile submitted to the diet planner."""

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Gender(StrEnum):
    """Gender options offered by the profile form."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    """Activity level options offered by the profile form."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(StrEnum):
    """Weight goal options offered by the profile form."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


GENDER_LABELS: dict[Gender, str] = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
    Gender.OTHER: "Other",
}

ACTIVITY_LEVEL_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHT: "Lightly Active",
    ActivityLevel.MODERATE: "Moderately Active",
    ActivityLevel.ACTIVE: "Active",
    ActivityLevel.VERY_ACTIVE: "Very Active",
}

GOAL_LABELS: dict[Goal, str] = {
    Goal.LOSE: "Lose Weight",
    Goal.MAINTAIN: "Maintain Weight",
    Goal.GAIN: "Gain Weight",
}


class UserProfile(BaseModel):
    """Body metrics and goal for one diet-plan request.

    Height, weight and age are kept as the text the user entered so that
    prompts can embed them verbatim. Numbers are accepted and stringified.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    height: str
    weight: str
    age: str
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal

    @field_validator("height", "weight", "age")
    @classmethod
    def _must_be_positive_number(cls, value: str) -> str:
        try:
            number = float(value)
        except ValueError as exc:
            raise ValueError("must be a number") from exc
        if not math.isfinite(number) or number <= 0:
            raise ValueError("must be a positive number")
        return value


DEFAULT_PROFILE = UserProfile(
    height="175",
    weight="70",
    age="30",
    gender=Gender.MALE,
    activity_level=ActivityLevel.MODERATE,
    goal=Goal.MAINTAIN,
)
