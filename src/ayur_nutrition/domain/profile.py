"""User profile model supplied per recommendation request."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Gender(StrEnum):
    """Profile gender."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Constitution(StrEnum):
    """Ayurvedic constitution (prakriti)."""

    VATA = "vata"
    PITTA = "pitta"
    KAPHA = "kapha"
    VATA_PITTA = "vata-pitta"
    PITTA_KAPHA = "pitta-kapha"
    VATA_KAPHA = "vata-kapha"
    TRIDOSHIC = "tridoshic"


class Season(StrEnum):
    """Season the profile is currently in."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


class PregnancyStage(StrEnum):
    """Pregnancy trimester."""

    FIRST_TRIMESTER = "first-trimester"
    SECOND_TRIMESTER = "second-trimester"
    THIRD_TRIMESTER = "third-trimester"

    @property
    def phrase(self) -> str:
        """Trimester as it is written in catalog sub-labels."""
        return self.value.replace("-", " ")


class UserProfile(BaseModel):
    """Read-only patient profile matched against the catalog."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(ge=0)
    gender: Gender
    constitution: Constitution
    occupation: str
    current_season: Season
    activity_level: ActivityLevel
    health_conditions: tuple[str, ...] = ()
    dietary_restrictions: tuple[str, ...] = ()
    goals: tuple[str, ...] = ()
    life_stage: str | None = None
    is_pregnant: bool = False
    pregnancy_stage: PregnancyStage | None = None
    is_lactating: bool = False
    is_menopausal: bool = False

    @field_validator("health_conditions", "dietary_restrictions", "goals")
    @classmethod
    def _drop_blank_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(entry.strip() for entry in value if entry.strip())

    @model_validator(mode="after")
    def _check_pregnancy(self) -> "UserProfile":
        if self.pregnancy_stage is not None and not self.is_pregnant:
            raise ValueError("pregnancy_stage requires is_pregnant to be set")
        return self
