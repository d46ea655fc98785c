import os

from pydantic import BaseModel, ValidationError

from config import YamlConfig

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class SettingsSchema(BaseModel):
    db_path: str = "workouts.db"
    host: str = "0.0.0.0"
    port: int = 8080
    templates_dir: str = os.path.join(BASE_DIR, "templates")
    static_dir: str = os.path.join(BASE_DIR, "static")
    log_level: str = "INFO"


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))


def load_settings(path: str = "settings.yaml", **overrides) -> SettingsSchema:
    """Read ``path``, apply environment and explicit overrides, then validate."""
    data = YamlConfig(path).load()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return validate_settings(data)
