"""Framework configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from switchboard.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".switchboard" / "config.json"
DEFAULT_REFRESH_RATE = 1000


class FrameworkConfig(BaseModel):
    """Framework configuration and settings."""

    refresh_rate: int = Field(
        default=DEFAULT_REFRESH_RATE,
        gt=0,
        description="Read cycle period in milliseconds",
    )
    modules_dir: Path = Field(
        default_factory=lambda: Path.home() / ".switchboard" / "modules",
        description="Directory holding installed modules (one sub-directory per module)",
    )
    view_selector: str = Field(
        default="#device-view",
        description="Selector of the element that receives a module's rendered view",
    )

    @field_serializer("modules_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "FrameworkConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.switchboard/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
