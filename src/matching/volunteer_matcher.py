"""Volunteer-to-crisis matching and workload tracking."""
import logging
import threading
from dataclasses import replace
from typing import Iterable, Optional

from src.matching.models import (
    CrisisCase,
    MatchFactors,
    MatchingStats,
    MatchResult,
    MatchWeights,
    VolunteerRecord,
    VolunteerRuntimeState,
)

logger = logging.getLogger(__name__)

MAX_LOAD = 3
MIN_MATCH_SCORE = 0.6
DEFAULT_MAX_MATCHES = 5
DEFAULT_WEIGHTS = MatchWeights()

BASE_RESPONSE_TIME_SECONDS = 60
RESPONSE_TIME_PER_CASE_SECONDS = 30


class VolunteerMatcher:
    """Rank on-duty volunteers for crisis cases and track their workload.

    Volunteer records come from the volunteer directory and are never
    mutated here. The matcher owns only the runtime state (availability
    flag and active case count) for each volunteer.

    Usage:
        matcher = VolunteerMatcher()
        matcher.register_volunteers(records)
        matches = matcher.find_best_matches(CrisisCase(required_skills=["anxiety"]))
        if matches and matcher.assign_volunteer_to_crisis(matches[0].volunteer_id, "c-1"):
            ...
    """

    def __init__(
        self,
        volunteers: Optional[Iterable[VolunteerRecord]] = None,
        weights: MatchWeights = DEFAULT_WEIGHTS,
    ):
        self.weights = weights
        self._pool: dict[str, VolunteerRecord] = {}
        self._state: dict[str, VolunteerRuntimeState] = {}
        self._lock = threading.RLock()

        if volunteers is not None:
            self.register_volunteers(volunteers)

    # =========================================================================
    # POOL MANAGEMENT
    # =========================================================================

    def register_volunteer(self, volunteer: VolunteerRecord) -> None:
        """Add a volunteer to the pool, keeping any existing runtime state."""
        with self._lock:
            self._pool[volunteer.id] = volunteer
            self._state.setdefault(volunteer.id, VolunteerRuntimeState())

    def register_volunteers(self, volunteers: Iterable[VolunteerRecord]) -> None:
        """Add several volunteers to the pool."""
        count = 0
        with self._lock:
            for volunteer in volunteers:
                self.register_volunteer(volunteer)
                count += 1
        logger.info("Registered %d volunteers (pool size %d)", count, len(self._pool))

    def get_volunteer_state(self, volunteer_id: str) -> VolunteerRuntimeState:
        """Get a copy of a volunteer's runtime state.

        Unknown ids report the defaults (available, no load) without
        creating an entry.
        """
        with self._lock:
            state = self._state.get(volunteer_id)
            return replace(state) if state else VolunteerRuntimeState()

    def has_state(self, volunteer_id: str) -> bool:
        """Check whether runtime state is tracked for a volunteer id."""
        with self._lock:
            return volunteer_id in self._state

    def _state_for(self, volunteer_id: str) -> VolunteerRuntimeState:
        # Unknown ids get a default entry on first mutation
        return self._state.setdefault(volunteer_id, VolunteerRuntimeState())

    def _snapshot(self) -> list[tuple[VolunteerRecord, VolunteerRuntimeState]]:
        with self._lock:
            return [
                (volunteer, replace(self._state.get(volunteer.id) or VolunteerRuntimeState()))
                for volunteer in self._pool.values()
            ]

    @staticmethod
    def _is_available(state: VolunteerRuntimeState) -> bool:
        return state.available is not False and state.current_load < MAX_LOAD

    # =========================================================================
    # SCORING
    # =========================================================================

    def calculate_match(
        self,
        volunteer: VolunteerRecord,
        crisis: CrisisCase,
        state: Optional[VolunteerRuntimeState] = None,
    ) -> MatchResult:
        """
        Score one volunteer against a crisis case.

        Args:
            volunteer: Directory record for the volunteer
            crisis: The case to match
            state: Runtime state to score with (defaults to the tracked state)

        Returns:
            MatchResult with the overall score and factor breakdown
        """
        if state is None:
            state = self.get_volunteer_state(volunteer.id)

        factors = MatchFactors(
            skill_match=self._calculate_skill_match(volunteer.specializations, crisis.required_skills),
            availability_score=1.0 if state.available else 0.0,
            workload_score=max(0.0, (MAX_LOAD - state.current_load) / MAX_LOAD),
            experience_score=max(
                0.0, min(volunteer.experience_level / max(crisis.complexity_level, 1), 1.0)
            ),
        )
        match_score = max(0.0, min(factors.weighted_total(self.weights), 1.0))

        return MatchResult(
            volunteer_id=volunteer.id,
            match_score=match_score,
            availability=state.available,
            specializations=sorted(volunteer.specializations),
            experience_level=volunteer.experience_level,
            current_load=state.current_load,
            estimated_response_time_seconds=(
                BASE_RESPONSE_TIME_SECONDS + state.current_load * RESPONSE_TIME_PER_CASE_SECONDS
            ),
            match_factors=factors,
        )

    def _calculate_skill_match(
        self,
        volunteer_skills: frozenset[str],
        required_skills: list[str],
    ) -> float:
        """Fraction of required skills the volunteer covers (0.5 if none required)."""
        required = set(required_skills)
        if not required:
            return 0.5

        matched = required.intersection(volunteer_skills)
        return len(matched) / len(required)

    # =========================================================================
    # MATCHING
    # =========================================================================

    def find_best_matches(
        self,
        crisis: CrisisCase,
        max_matches: int = DEFAULT_MAX_MATCHES,
    ) -> list[MatchResult]:
        """
        Rank available volunteers for a crisis case.

        Only volunteers that are available and below MAX_LOAD are scored.
        Results at or below MIN_MATCH_SCORE are dropped. Equal scores keep
        pool registration order.

        Args:
            crisis: The case to match
            max_matches: Maximum number of candidates to return

        Returns:
            Up to max_matches MatchResults, best first
        """
        candidates = [
            self.calculate_match(volunteer, crisis, state)
            for volunteer, state in self._snapshot()
            if self._is_available(state)
        ]

        qualified = [m for m in candidates if m.match_score > MIN_MATCH_SCORE]
        qualified.sort(key=lambda m: m.match_score, reverse=True)

        logger.debug(
            "Crisis %s: %d available, %d qualified",
            crisis.crisis_id or "-",
            len(candidates),
            len(qualified),
        )

        return qualified[:max(max_matches, 0)]

    def find_best_match(self, crisis: CrisisCase) -> Optional[MatchResult]:
        """Get the single best candidate, or None if nobody qualifies."""
        matches = self.find_best_matches(crisis, max_matches=1)
        if not matches:
            logger.warning(
                "No volunteers meet minimum match score of %.2f for crisis %s",
                MIN_MATCH_SCORE,
                crisis.crisis_id or "-",
            )
            return None

        best = matches[0]
        logger.info(
            "Best volunteer match for crisis %s: %s (score: %.1f%%)",
            crisis.crisis_id or "-",
            best.volunteer_id,
            best.match_score * 100,
        )
        return best

    # =========================================================================
    # AVAILABILITY & WORKLOAD
    # =========================================================================

    def update_volunteer_availability(self, volunteer_id: str, is_available: bool) -> None:
        """Set a volunteer's availability.

        Going unavailable also clears the tracked load.
        """
        with self._lock:
            state = self._state_for(volunteer_id)
            state.available = is_available
            if not is_available:
                state.current_load = 0

        logger.info("Volunteer %s availability set to %s", volunteer_id, is_available)

    def assign_volunteer_to_crisis(self, volunteer_id: str, crisis_id: str) -> bool:
        """
        Record a new case for a volunteer.

        Args:
            volunteer_id: Volunteer taking the case
            crisis_id: Case being assigned (logged only)

        Returns:
            True if assigned, False if the volunteer is already at capacity
        """
        with self._lock:
            state = self._state_for(volunteer_id)
            if state.current_load >= MAX_LOAD:
                logger.warning(
                    "Volunteer %s at capacity (%d/%d), cannot take crisis %s",
                    volunteer_id,
                    state.current_load,
                    MAX_LOAD,
                    crisis_id,
                )
                return False

            state.current_load += 1
            state.available = state.current_load < MAX_LOAD
            load = state.current_load

        logger.info(
            "Assigned volunteer %s to crisis %s (load %d/%d)",
            volunteer_id,
            crisis_id,
            load,
            MAX_LOAD,
        )
        return True

    def release_volunteer_from_crisis(self, volunteer_id: str, crisis_id: str) -> None:
        """Release a volunteer from a case.

        Any release makes the volunteer available again.
        """
        with self._lock:
            state = self._state_for(volunteer_id)
            state.current_load = max(0, state.current_load - 1)
            state.available = True
            load = state.current_load

        logger.info(
            "Released volunteer %s from crisis %s (load %d/%d)",
            volunteer_id,
            crisis_id,
            load,
            MAX_LOAD,
        )

    # =========================================================================
    # STATISTICS
    # =========================================================================

    def available_volunteer_count(self) -> int:
        """Count pool volunteers that can take a new case."""
        return sum(1 for _, state in self._snapshot() if self._is_available(state))

    def get_matching_stats(self) -> MatchingStats:
        """Summarize pool size, availability and load."""
        snapshot = self._snapshot()
        total = len(snapshot)
        available = sum(1 for _, state in snapshot if self._is_available(state))
        average_load = (
            sum(state.current_load for _, state in snapshot) / total if total else 0.0
        )

        if available > 10:
            capacity = "HIGH"
        elif available > 5:
            capacity = "MEDIUM"
        else:
            capacity = "LOW"

        return MatchingStats(
            total_volunteers=total,
            available_volunteers=available,
            utilization_rate=(total - available) / total if available > 0 else 0.0,
            average_load=average_load,
            capacity=capacity,
        )
