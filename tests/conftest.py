import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture(autouse=True)
def _standalone_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer shell may export the embedding switch; tests set it explicitly.
    from pmd.config import NO_EXIT_AFTER_RUN_ENV

    monkeypatch.delenv(NO_EXIT_AFTER_RUN_ENV, raising=False)
