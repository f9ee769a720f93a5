import os
from pathlib import Path

import pytest

from booklabels.game_data import LoadOrderService, PatchPlugin
from booklabels.labeling import BookPatcher
from booklabels.settings import LabelSettings

DATA_PATH = os.environ.get("BOOKLABELS_DATA_PATH") or "D:/Games/Skyrim/Data"
LOAD_ORDER = os.environ.get("BOOKLABELS_LOAD_ORDER", "Skyrim.json").split(",")


@pytest.mark.skipif(not Path(DATA_PATH).exists(), reason="plugin data folder not found")
def test_real_load_order_labels_books():
    service = LoadOrderService(DATA_PATH, LOAD_ORDER)
    patch = PatchPlugin("BookLabels.json")
    changes = BookPatcher(service, LabelSettings(), patch).run()
    print(f"✓ labeled {len(changes)} books")
    assert len(changes) == len(patch)
