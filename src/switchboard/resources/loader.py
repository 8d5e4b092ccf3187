"""File system access to installed modules and their assets.

Modules live in a modules directory, one sub-directory per module:

    modules/
        modules.json            (optional index of installed modules)
        analog_inputs/
            module.json         (ModuleInfo descriptor)
            view.html           (view template)
            ranges.json         (data exposed to the template)

Assets are referenced as `module/resource`, e.g. `analog_inputs/view.html`.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from switchboard.exceptions import (
    ResourceError,
    ResourceInvalidError,
    ResourceNotFoundError,
    wrap_pydantic_error,
)
from switchboard.models import ModuleInfo

logger = logging.getLogger(__name__)

MODULE_DESC_FILENAME = "module.json"
MODULES_DESC_FILENAME = "modules.json"


class ModuleResources:
    """Resource loader rooted at a modules directory."""

    def __init__(self, modules_dir: Path | str):
        self.modules_dir = Path(modules_dir)

    def resolve_external_uri(self, resource: str) -> str:
        """
        Resolve a `module/resource` reference to a path in the modules directory.

        Example:
            >>> ModuleResources("/opt/modules").resolve_external_uri("ain/view.html")
            '/opt/modules/ain/view.html'
        """
        return str(self.modules_dir.joinpath(*resource.split("/")))

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        """
        Raises:
            ResourceNotFoundError: If the file does not exist
            ResourceInvalidError: If the file is not valid UTF-8
            ResourceError: If the file cannot be read
        """
        if not self.exists(path):
            raise ResourceNotFoundError(path)
        try:
            return Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ResourceInvalidError(path, str(e)) from e
        except OSError as e:
            raise ResourceError(
                f"Could not read {path}",
                location=path,
                technical_message=f"Failed to read {path}: {e}",
            ) from e

    def get_json(self, path: str) -> Any:
        """
        Raises:
            ResourceNotFoundError: If the file does not exist
            ResourceInvalidError: If the file is not valid JSON
        """
        if not self.exists(path):
            raise ResourceNotFoundError(path, kind="JSON")
        try:
            return json.loads(self.read_text(path))
        except json.JSONDecodeError as e:
            raise ResourceInvalidError(path, str(e)) from e

    def get_module_info(self, name: str) -> ModuleInfo:
        """
        Load the descriptor of an installed module.

        The module name defaults to its directory name.

        Raises:
            ResourceNotFoundError: If the module has no module.json
            ResourceInvalidError: If module.json is not valid JSON
            ConfigValidationError: If module.json does not describe a module
        """
        path = self.resolve_external_uri(f"{name}/{MODULE_DESC_FILENAME}")
        if not self.exists(path):
            raise ResourceNotFoundError(path, kind="module info")

        data = self.get_json(path)
        if isinstance(data, dict):
            data.setdefault("name", name)
        try:
            info = ModuleInfo.model_validate(data)
        except ValidationError as e:
            raise wrap_pydantic_error(e, path) from e

        logger.debug(f"Loaded module info for {name} from {path}")
        return info

    def get_loaded_modules_info(self) -> list[dict[str, Any]]:
        """
        Read the modules index (modules.json).

        Raises:
            ResourceNotFoundError: If there is no index
            ResourceInvalidError: If the index is not a JSON list
        """
        path = str(self.modules_dir / MODULES_DESC_FILENAME)
        if not self.exists(path):
            raise ResourceNotFoundError(path, kind="modules info")

        data = self.get_json(path)
        if not isinstance(data, list):
            raise ResourceInvalidError(path, "expected a list of modules")
        return data

    def list_module_names(self) -> list[str]:
        """Names of module directories that contain a module.json."""
        if not self.modules_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.modules_dir.iterdir()
            if (entry / MODULE_DESC_FILENAME).is_file()
        )
