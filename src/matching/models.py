"""Data structures for volunteer matching."""
from dataclasses import asdict, dataclass, field
from typing import Optional


@dataclass(frozen=True)
class VolunteerRecord:
    """A volunteer as supplied by the volunteer directory."""

    id: str
    specializations: frozenset[str] = field(default_factory=frozenset)
    experience_level: int = 1

    def __post_init__(self):
        # Accept a single tag or any iterable of tags from callers
        if isinstance(self.specializations, str):
            object.__setattr__(self, "specializations", frozenset([self.specializations]))
        elif not isinstance(self.specializations, frozenset):
            object.__setattr__(self, "specializations", frozenset(self.specializations))


@dataclass
class CrisisCase:
    """An incoming crisis case to be matched against the volunteer pool."""

    required_skills: list[str] = field(default_factory=list)
    complexity_level: int = 1
    crisis_id: Optional[str] = None

    def __post_init__(self):
        """Normalize a single skill tag to a list."""
        if isinstance(self.required_skills, str):
            self.required_skills = [self.required_skills]
        else:
            self.required_skills = list(self.required_skills)


@dataclass
class VolunteerRuntimeState:
    """Live availability and workload for a single volunteer."""

    available: bool = True
    current_load: int = 0


@dataclass(frozen=True)
class MatchWeights:
    """Fixed weights for the four match factors. Sum to 1.0."""

    skill_match: float = 0.4
    availability_score: float = 0.3
    workload_score: float = 0.2
    experience_score: float = 0.1


@dataclass
class MatchFactors:
    """Individual factor scores behind a match, each in [0, 1]."""

    skill_match: float
    availability_score: float
    workload_score: float
    experience_score: float

    def weighted_total(self, weights: MatchWeights) -> float:
        return (
            self.skill_match * weights.skill_match
            + self.availability_score * weights.availability_score
            + self.workload_score * weights.workload_score
            + self.experience_score * weights.experience_score
        )


@dataclass
class MatchResult:
    """A scored volunteer candidate for a crisis case."""

    volunteer_id: str
    match_score: float
    availability: bool
    specializations: list[str]
    experience_level: int
    current_load: int
    estimated_response_time_seconds: int
    match_factors: MatchFactors

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MatchingStats:
    """Snapshot of pool capacity."""

    total_volunteers: int
    available_volunteers: int
    utilization_rate: float
    average_load: float
    capacity: str  # HIGH, MEDIUM or LOW

    def to_dict(self) -> dict:
        return asdict(self)
