"""Tests for distance calculations."""
import pytest

from center_locator.core.models import Center
from center_locator.core.proximity import annotate_distances, calculate_distance_km, format_distance


def test_calculate_distance_km():
    # London to Paris
    distance = calculate_distance_km(-0.1278, 51.5074, 2.3522, 48.8566)
    assert distance == pytest.approx(343.5, abs=1.0)

    assert calculate_distance_km(77.59, 12.97, 77.59, 12.97) == 0


def test_annotate_distances_keeps_unlocated_last():
    centers = [
        Center(id="none"),
        Center(id="far", latitude=13.5, longitude=77.59),
        Center(id="near", latitude=13.0, longitude=77.59),
    ]

    ordered = annotate_distances(centers, 12.97, 77.59)

    assert [c.id for c in ordered] == ["near", "far", "none"]


def test_format_distance():
    assert format_distance(None) == "N/A"
    assert format_distance(0.25) == "250 m"
    assert format_distance(12.345) == "12.3 km"
