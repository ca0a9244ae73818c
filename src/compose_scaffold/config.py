import os

from pydantic import BaseModel

_LAUNCHER_FOLDER_ENV = "COMPOSE_SCAFFOLD_LAUNCHER_FOLDER"
_LOG_LEVEL_ENV = "COMPOSE_SCAFFOLD_LOG_LEVEL"


class Settings(BaseModel):
    launcher_folder: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            launcher_folder=os.getenv(_LAUNCHER_FOLDER_ENV) or None,
            log_level=os.getenv(_LOG_LEVEL_ENV, "WARNING").upper(),
        )
