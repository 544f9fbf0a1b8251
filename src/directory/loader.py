"""Load volunteer records from a YAML directory file."""
import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from src.directory.exceptions import DirectoryNotFoundError, InvalidDirectoryError
from src.matching.models import VolunteerRecord
from src.matching.volunteer_matcher import VolunteerMatcher

logger = logging.getLogger(__name__)


class VolunteerEntry(BaseModel):
    """One volunteer in the directory file."""
    id: str = Field(min_length=1, description="Unique volunteer identifier")
    specializations: list[str] = Field(default_factory=list)
    experience_level: int = Field(ge=1, default=1)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Allow numeric ids in YAML."""
        if isinstance(v, int):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("specializations", mode="before")
    @classmethod
    def filter_empty_strings(cls, v):
        """Remove empty strings from lists."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item).strip() for item in v if item and str(item).strip()]
        return v

    def to_record(self) -> VolunteerRecord:
        return VolunteerRecord(
            id=self.id,
            specializations=frozenset(self.specializations),
            experience_level=self.experience_level,
        )


class VolunteerDirectoryFile(BaseModel):
    """Top-level structure of the volunteer directory file."""
    volunteers: list[VolunteerEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self):
        """Ensure no volunteer id appears twice."""
        seen = set()
        for entry in self.volunteers:
            if entry.id in seen:
                raise ValueError(f"Duplicate volunteer id: {entry.id}")
            seen.add(entry.id)
        return self


def load_volunteer_directory(path: Union[str, Path]) -> list[VolunteerRecord]:
    """
    Read and validate a volunteer directory file.

    Args:
        path: Path to the YAML file

    Returns:
        VolunteerRecords in file order

    Raises:
        DirectoryNotFoundError: If the file does not exist
        InvalidDirectoryError: If the YAML is malformed or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise DirectoryNotFoundError(str(path))

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidDirectoryError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise InvalidDirectoryError(str(path), "expected a mapping with a 'volunteers' list")

    try:
        directory = VolunteerDirectoryFile.model_validate(data)
    except ValidationError as e:
        raise InvalidDirectoryError(str(path), str(e)) from e

    records = [entry.to_record() for entry in directory.volunteers]
    logger.info("Loaded %d volunteers from %s", len(records), path)
    return records


def build_matcher(path: Union[str, Path]) -> VolunteerMatcher:
    """Create a VolunteerMatcher populated from a directory file."""
    return VolunteerMatcher(load_volunteer_directory(path))
