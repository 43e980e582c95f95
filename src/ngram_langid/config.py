from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class DetectorConfig(BaseModel):
    """Tunable scalars shared by every trial of a single detection call."""

    alpha: float = 0.5
    alpha_width: float = Field(default=0.05, ge=0)
    random_seed: int | None = None
    trials: int = Field(default=7, ge=1)
    # The n-gram buffer is fixed at 3 characters; smaller values only
    # restrict which profile grams get a probability.
    ngram_length: int = Field(default=3, ge=1, le=3)
    max_text_length: int = Field(default=10000, ge=0)
    max_iterations: int = Field(default=1000, ge=0)
    probability_threshold: float = 0.1
    convergence_threshold: float = 0.99999
    base_frequency: int = Field(default=10000, gt=0)

    model_config = {"validate_assignment": True}


class Settings(BaseSettings):
    # Directory holding one profile per language (`en`, `en.json`, `en.json.gz`, ...)
    profiles_dir: str = ""
    # Profiles tuned for short inputs. Empty = reuse profiles_dir.
    short_profiles_dir: str = ""
    short_text_length: int = 25
    random_seed: int | None = None
    log_level: str = "info"

    model_config = {
        "env_prefix": "LANGID_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
