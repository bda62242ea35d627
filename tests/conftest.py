"""Shared test fixtures for tag-cloud."""

import pathlib

import pytest

from tag_cloud.layout.cloud_layouter import CircularCloudLayouter
from tag_cloud.layout.distribution import ArchimedeanSpiral
from tag_cloud.layout.geometry import Point, Size
from tag_cloud.sampling import generate_sizes

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
MIN_SIZE = Size(30, 30)
MAX_SIZE = Size(50, 50)

FAILURE_DIR = pathlib.Path(__file__).parent / "failures"


@pytest.fixture
def center():
    return Point(CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2)


@pytest.fixture
def spiral(center):
    return ArchimedeanSpiral(center)


@pytest.fixture
def cloud(spiral):
    """Empty layouter bound to an Archimedean spiral at the canvas center."""
    return CircularCloudLayouter.from_distribution(spiral)


@pytest.fixture
def random_sizes():
    """Factory for seeded sizes in [30, 30]..[50, 50]."""
    def _make(count, seed=42):
        return generate_sizes(count, MIN_SIZE, MAX_SIZE, seed=seed)
    return _make


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Save a picture of the ``cloud`` fixture when a test using it fails."""
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return
    layouter = getattr(item, "funcargs", {}).get("cloud")
    if layouter is None or len(layouter) == 0:
        return
    from tag_cloud.export.image_export import ImageExporter

    FAILURE_DIR.mkdir(exist_ok=True)
    path = ImageExporter.export(
        FAILURE_DIR / f"{item.name}.png", layouter, CANVAS_WIDTH, CANVAS_HEIGHT
    )
    report.sections.append(
        ("tag cloud", f"Tag cloud visualization saved to file <{path}>")
    )
