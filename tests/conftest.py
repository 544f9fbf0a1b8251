"""Pytest fixtures for volunteer matcher tests."""
import sys
from pathlib import Path

import pytest
import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.matching.models import CrisisCase, VolunteerRecord
from src.matching.volunteer_matcher import VolunteerMatcher


# =============================================================================
# VOLUNTEER FIXTURES
# =============================================================================


@pytest.fixture
def anxiety_volunteer():
    """Volunteer covering anxiety and depression, experience 2."""
    return VolunteerRecord(
        id="V1",
        specializations=frozenset({"anxiety", "depression"}),
        experience_level=2,
    )


@pytest.fixture
def sample_volunteers(anxiety_volunteer):
    """A small mixed pool in registration order."""
    return [
        anxiety_volunteer,
        VolunteerRecord(id="V2", specializations=frozenset({"trauma", "ptsd-support"}), experience_level=4),
        VolunteerRecord(id="V3", specializations=frozenset({"anxiety"}), experience_level=1),
        VolunteerRecord(id="V4", specializations=frozenset(), experience_level=1),
    ]


@pytest.fixture
def matcher(sample_volunteers):
    """Matcher populated with the sample pool."""
    return VolunteerMatcher(sample_volunteers)


@pytest.fixture
def anxiety_crisis():
    """Low-complexity case needing anxiety support."""
    return CrisisCase(required_skills=["anxiety"], complexity_level=1, crisis_id="crisis-1")


# =============================================================================
# DIRECTORY FIXTURES
# =============================================================================


@pytest.fixture
def directory_file(tmp_path):
    """Write a valid volunteer directory YAML file."""
    data = {
        "volunteers": [
            {"id": "vol-001", "specializations": ["crisis-intervention", "suicide-prevention"], "experience_level": 3},
            {"id": "vol-002", "specializations": ["anxiety", "depression"], "experience_level": 2},
            {"id": "vol-003", "specializations": ["anxiety"]},
        ]
    }
    path = tmp_path / "volunteers.yaml"
    path.write_text(yaml.dump(data))
    return path
