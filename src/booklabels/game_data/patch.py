"""
Patch plugin holding the overrides produced by a run.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import orjson

from .models import GameDataObject, METADATA_KEYS


class PatchPlugin:
    """Collects record overrides and writes them out as a plugin file.

    An override starts as a copy of the winning record, so the patch
    carries every field of the record it replaces and only changes what
    was explicitly set.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        # form_id -> override record, in insertion order
        self._overrides: Dict[str, GameDataObject] = {}

    def __len__(self) -> int:
        return len(self._overrides)

    def __contains__(self, form_id: object) -> bool:
        return form_id in self._overrides

    def get_or_add_as_override(self, record: GameDataObject) -> GameDataObject:
        """Return the override for a record, copying it into the patch if new."""
        form_id = str(record["id"])
        override = self._overrides.get(form_id)
        if override is None:
            override = {
                key: value for key, value in record.items() if key not in METADATA_KEYS
            }
            self._overrides[form_id] = override
        return override

    def set_name(self, record: GameDataObject, new_name: str) -> None:
        """Record a name override for the given winning record."""
        self.get_or_add_as_override(record)["name"] = new_name

    def get_override(self, form_id: str) -> Optional[GameDataObject]:
        """Return the override for a form id, if one was added."""
        return self._overrides.get(form_id)

    def records(self) -> List[GameDataObject]:
        """Return all override records in the order they were added."""
        return list(self._overrides.values())

    def save(self, path: Path) -> Path:
        """Write the patch as an indented JSON plugin file.

        Args:
            path: Destination file

        Returns:
            The path written
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(self.records(), option=orjson.OPT_INDENT_2))
        self.logger.info(f"Wrote {len(self)} overrides to {path}")
        return path
