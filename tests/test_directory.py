"""Tests for volunteer directory loading."""
import pytest
import yaml

from src.directory import (
    DirectoryError,
    DirectoryNotFoundError,
    InvalidDirectoryError,
    VolunteerDirectoryFile,
    VolunteerEntry,
    build_matcher,
    load_volunteer_directory,
)
from src.matching.models import CrisisCase, VolunteerRecord


class TestValidators:
    """Tests for Pydantic directory models."""

    def test_entry_valid(self):
        """Test a valid volunteer entry."""
        entry = VolunteerEntry(id="v1", specializations=["anxiety"], experience_level=3)
        assert entry.id == "v1"
        assert entry.experience_level == 3

    def test_entry_defaults(self):
        """Experience defaults to 1 and specializations to empty."""
        entry = VolunteerEntry(id="v1")
        assert entry.experience_level == 1
        assert entry.specializations == []

    def test_entry_empty_id_fails(self):
        """Test that empty id fails validation."""
        with pytest.raises(ValueError):
            VolunteerEntry(id="   ")

    def test_entry_numeric_id(self):
        """Numeric ids from YAML become strings."""
        assert VolunteerEntry(id=42).id == "42"

    def test_entry_experience_must_be_positive(self):
        """Experience level below 1 fails validation."""
        with pytest.raises(ValueError):
            VolunteerEntry(id="v1", experience_level=0)

    def test_entry_filters_empty_strings(self):
        """Blank tags are dropped and the rest stripped."""
        entry = VolunteerEntry(id="v1", specializations=[" anxiety ", "", "  ", "trauma"])
        assert entry.specializations == ["anxiety", "trauma"]

    def test_entry_to_record(self):
        """Entries convert to frozen VolunteerRecords."""
        record = VolunteerEntry(id="v1", specializations=["anxiety", "anxiety"], experience_level=2).to_record()
        assert record == VolunteerRecord(id="v1", specializations=frozenset({"anxiety"}), experience_level=2)

    def test_duplicate_ids_fail(self):
        """The same id twice is rejected."""
        with pytest.raises(ValueError, match="Duplicate volunteer id"):
            VolunteerDirectoryFile(volunteers=[{"id": "v1"}, {"id": "v1"}])


class TestLoadVolunteerDirectory:
    """Tests for reading directory files."""

    def test_load_valid_file(self, directory_file):
        """Records load in file order."""
        records = load_volunteer_directory(directory_file)

        assert [r.id for r in records] == ["vol-001", "vol-002", "vol-003"]
        assert records[1].specializations == frozenset({"anxiety", "depression"})
        assert records[2].experience_level == 1

    def test_missing_file(self, tmp_path):
        """A missing file raises DirectoryNotFoundError."""
        with pytest.raises(DirectoryNotFoundError) as exc_info:
            load_volunteer_directory(tmp_path / "nope.yaml")
        assert "nope.yaml" in str(exc_info.value)

    def test_empty_file(self, tmp_path):
        """An empty file is an empty directory."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_volunteer_directory(path) == []

    def test_malformed_yaml(self, tmp_path):
        """Unparseable YAML raises InvalidDirectoryError."""
        path = tmp_path / "bad.yaml"
        path.write_text("volunteers: [unclosed")
        with pytest.raises(InvalidDirectoryError):
            load_volunteer_directory(path)

    def test_not_a_mapping(self, tmp_path):
        """A top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text(yaml.dump([{"id": "v1"}]))
        with pytest.raises(InvalidDirectoryError):
            load_volunteer_directory(path)

    def test_schema_violation(self, tmp_path):
        """Validation errors surface as InvalidDirectoryError."""
        path = tmp_path / "invalid.yaml"
        path.write_text(yaml.dump({"volunteers": [{"id": "v1", "experience_level": -2}]}))
        with pytest.raises(InvalidDirectoryError) as exc_info:
            load_volunteer_directory(path)
        assert isinstance(exc_info.value, DirectoryError)

    def test_build_matcher(self, directory_file):
        """build_matcher registers every record."""
        matcher = build_matcher(directory_file)

        assert matcher.get_matching_stats().total_volunteers == 3
        matches = matcher.find_best_matches(CrisisCase(required_skills=["anxiety"]))
        assert [m.volunteer_id for m in matches] == ["vol-002", "vol-003"]

    def test_sample_directory_loads(self):
        """The shipped sample directory is valid."""
        from config.settings import settings

        records = load_volunteer_directory(settings.config_dir / "volunteers.yaml")
        assert len(records) > 0
