from __future__ import annotations

from typing import Any, Dict, List

import pytest

from payloads import make_candidate


@pytest.fixture
def paris_candidates() -> List[Dict[str, Any]]:
    return [
        make_candidate("Paris", 33.66, -95.55, country="United States", feature_code="PPLA2"),
        make_candidate("Paris", 36.30, -88.33, country="United States", feature_code="PPLA2"),
        make_candidate("Paris", 48.85, 2.35, feature_code="PPLC"),
        make_candidate("Paris", 38.21, -84.25, country="United States", feature_code="PPLA2"),
    ]


@pytest.fixture
def london_candidates() -> List[Dict[str, Any]]:
    return [
        make_candidate("London", 51.51, -0.13, country="United Kingdom", feature_code="PPLC"),
        make_candidate("London", 42.98, -81.23, country="Canada", feature_code="PPL"),
    ]
