"""Shared fixtures for booklabels tests."""

from pathlib import Path
from typing import Any, Callable, Dict, List

import orjson
import pytest

from booklabels.game_data import LoadOrderService

PluginWriter = Callable[[str, List[Dict[str, Any]]], Path]


@pytest.fixture
def data_folder(tmp_path: Path) -> Path:
    """Empty data folder for plugin files."""
    folder = tmp_path / "Data"
    folder.mkdir()
    return folder


@pytest.fixture
def write_plugin(data_folder: Path) -> PluginWriter:
    """Return a helper that writes a list of records as a plugin file."""

    def _write(name: str, records: List[Dict[str, Any]]) -> Path:
        path = data_folder / name
        path.write_bytes(orjson.dumps(records))
        return path

    return _write


@pytest.fixture
def skyrim_plugins(write_plugin: PluginWriter) -> List[str]:
    """A small two-plugin load order with books, quests and an override."""
    write_plugin(
        "Skyrim.json",
        [
            {
                "type": "BOOK",
                "id": "00000001:Skyrim.esm",
                "name": "Tome of Flames",
                "teaches": {"skill": "Destruction"},
            },
            {
                "type": "BOOK",
                "id": "00000002:Skyrim.esm",
                "name": "Old Map",
                "scripts": ["MQ101_MapMarkerScript"],
            },
            {
                "type": "BOOK",
                "id": "00000003:Skyrim.esm",
                "name": "Letter from a Friend",
            },
            {
                "type": "BOOK",
                "id": "00000004:Skyrim.esm",
                "name": "Plain Diary",
            },
            {
                "type": "BOOK",
                "id": "00000005:Skyrim.esm",
            },
            {
                "type": "MISC",
                "id": "00000006:Skyrim.esm",
                "name": "Dragon Claw",
            },
            {
                "type": "QUEST",
                "id": "00000010:Skyrim.esm",
                "aliases": [
                    {
                        "create_reference_to_object": "00000003:Skyrim.esm",
                        "items": [{"item": "00000006:Skyrim.esm"}, "DEADBEEF:Missing.esm"],
                    },
                    {},
                ],
            },
        ],
    )
    write_plugin(
        "Update.json",
        [
            {
                "type": "BOOK",
                "id": "00000004:Skyrim.esm",
                "name": "Plain Diary",
                "teaches": {"skill": "HeavyArmor"},
            },
        ],
    )
    return ["Skyrim.json", "Update.json"]


@pytest.fixture
def service(data_folder: Path, skyrim_plugins: List[str]) -> LoadOrderService:
    """Loaded service over the sample load order."""
    return LoadOrderService(data_folder, skyrim_plugins)
