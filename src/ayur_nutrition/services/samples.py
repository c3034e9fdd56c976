"""Demonstration profiles."""

from ayur_nutrition.domain.profile import (
    ActivityLevel,
    Constitution,
    Gender,
    Season,
    UserProfile,
)


def sample_profiles() -> list[UserProfile]:
    """Return the built-in demonstration profiles."""
    return [
        UserProfile(
            age=28,
            gender=Gender.FEMALE,
            constitution=Constitution.VATA_PITTA,
            occupation="Software Engineer",
            health_conditions=("Eye Strain", "Stress"),
            dietary_restrictions=("vegetarian",),
            life_stage="working-professional",
            current_season=Season.SUMMER,
            activity_level=ActivityLevel.MODERATE,
            goals=("stress management", "eye health"),
        ),
        UserProfile(
            age=35,
            gender=Gender.MALE,
            constitution=Constitution.KAPHA,
            occupation="Teacher",
            health_conditions=("Weight Management",),
            life_stage="adult",
            current_season=Season.WINTER,
            activity_level=ActivityLevel.ACTIVE,
            goals=("weight loss", "energy boost"),
        ),
        UserProfile(
            age=45,
            gender=Gender.FEMALE,
            constitution=Constitution.PITTA,
            occupation="Healthcare Worker",
            health_conditions=("Immunity", "High Stress"),
            dietary_restrictions=("gluten-free",),
            life_stage="middle-age",
            current_season=Season.AUTUMN,
            activity_level=ActivityLevel.VERY_ACTIVE,
            goals=("immunity building", "stress reduction"),
        ),
    ]
