"""Global pytest configuration for CONCORDANCE.

Items are marked by the directory they live in, so ``pytest -m unit`` and
``pytest -m contract`` select the matching suites without per-file marks.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default mark of each item's top-level test directory."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for root, marker_name in DIRECTORY_MARKERS.items():
            if root not in path.parents:
                continue
            if not any(marker.name == marker_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, marker_name))
