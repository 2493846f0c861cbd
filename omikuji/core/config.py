# omikuji/core/config.py

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings
from typing import Literal, Tuple

from ..services.fortune_service import FORTUNE_PRESETS, FORTUNE_COUNT

class Settings(BaseSettings):
    PORT: int = 3000
    HOST: str = "0.0.0.0"

    # Which label set to draw from. FORTUNE_LABELS, when set, wins over the preset.
    FORTUNE_PRESET: str = "classic"
    FORTUNE_LABELS: str = ""

    STATIC_DIR: str = "public"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    # An empty LOG_FILE sends logs to stderr instead of a rotating file.
    LOG_FILE: str = "api.log"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def check_fortune_labels(self) -> "Settings":
        if not self.FORTUNE_LABELS and self.FORTUNE_PRESET not in FORTUNE_PRESETS:
            raise ValueError(
                f"Unknown FORTUNE_PRESET '{self.FORTUNE_PRESET}'. "
                f"Choose one of: {', '.join(FORTUNE_PRESETS)}."
            )
        labels = self.fortune_labels_list
        if len(labels) != FORTUNE_COUNT or len(set(labels)) != FORTUNE_COUNT or not all(labels):
            raise ValueError(f"Exactly {FORTUNE_COUNT} distinct, non-empty fortune labels are required.")
        return self

    @property
    def fortune_labels_list(self) -> Tuple[str, ...]:
        if self.FORTUNE_LABELS:
            return tuple(label.strip() for label in self.FORTUNE_LABELS.split(","))
        return FORTUNE_PRESETS.get(self.FORTUNE_PRESET, ())

    class Config:
        env_file = ".env"

settings = Settings()
