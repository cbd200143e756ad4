"""
Randomized lane shuffling search.
"""

import logging
import random
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import reduce

from config import (
    PARTICIPANT_COUNT,
    SCORE_WEIGHTS,
    SEARCH_DEADLINE_SECONDS,
    SEARCH_EARLY_EXIT_SCORE,
    SEARCH_TRIAL_BUDGET,
    SEARCH_WORKERS,
)
from domain.models.division import DivisionTable
from domain.models.player import Player
from domain.models.trial import REJECTED, AcceptedTrial, RejectedTrial, TrialOutcome
from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.team_balancing_service import ScoreWeights, TeamBalancingService

logger = logging.getLogger("lane_divider.shuffler")


class PreconditionViolation(ValueError):
    """Raised when a search is requested without exactly ten participants."""


class LaneShuffler:
    """
    Searches lane assignments for ten participants.

    Each trial seats a random permutation of the participants: slots 0-4 are
    the blue team and 5-9 the red team, slot i playing lane i % 5. Trials that
    put a role-locked player off their lanes are discarded; the rest are
    scored and the best candidate is kept for every mismatch count (0-10).
    """

    # Deadline is polled every N trials to keep the clock out of the hot loop
    DEADLINE_CHECK_INTERVAL = 1000

    def __init__(
        self,
        trial_budget: int | None = None,
        weights: ScoreWeights | None = None,
        workers: int | None = None,
        early_exit_score: float | None = None,
        deadline_seconds: float | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            trial_budget: Trials per search (default 100000). Larger budgets never
                          worsen any mismatch bucket.
            weights: Score weights (default total=0.3, lane=0.5, pair=0.2)
            workers: Number of worker threads sharing the trial budget (default 1)
            early_exit_score: Stop once the zero-mismatch bucket scores at or below
                              this value (default None = always run the full budget)
            deadline_seconds: Wall-clock limit per search; the partially filled
                              table is returned when it passes (default None)
        """
        self.trial_budget = trial_budget if trial_budget is not None else SEARCH_TRIAL_BUDGET
        if self.trial_budget < 0:
            raise ValueError(f"trial_budget must be non-negative, got {self.trial_budget}")
        self.weights = weights if weights is not None else ScoreWeights.from_settings(SCORE_WEIGHTS)
        self.workers = max(1, workers if workers is not None else SEARCH_WORKERS)
        self.early_exit_score = (
            early_exit_score if early_exit_score is not None else SEARCH_EARLY_EXIT_SCORE
        )
        self.deadline_seconds = (
            deadline_seconds if deadline_seconds is not None else SEARCH_DEADLINE_SECONDS
        )
        self.role_service = RoleAssignmentService()
        self.balancing_service = TeamBalancingService(self.weights)

    @staticmethod
    def get_participants(players: Sequence[Player]) -> list[Player]:
        return [p for p in players if p.is_participating]

    @classmethod
    def is_dividable(cls, players: Sequence[Player]) -> bool:
        """Check whether exactly ten players are flagged as participating."""
        return len(cls.get_participants(players)) == PARTICIPANT_COUNT

    @staticmethod
    def shuffle_players(players: Sequence[Player], rng: random.Random) -> list[Player]:
        """
        Return a uniformly shuffled copy of players (Fisher-Yates).

        The input sequence is left untouched.
        """
        shuffled = list(players)
        for i in range(len(shuffled) - 1, 0, -1):
            j = rng.randrange(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def run_trial(self, participants: Sequence[Player], rng: random.Random) -> TrialOutcome:
        """Seat one random candidate and score it unless a role lock is broken."""
        candidate = self.shuffle_players(participants, rng)
        mismatch_count = self.role_service.count_mismatches(candidate)
        if mismatch_count is None:
            return REJECTED
        return AcceptedTrial(
            players=tuple(candidate),
            mismatch_count=mismatch_count,
            score=self.balancing_service.evaluate(candidate),
        )

    def _run_trials(
        self,
        participants: Sequence[Player],
        budget: int,
        rng: random.Random,
        deadline: float | None,
        stop_event: threading.Event,
        trial_observer: Callable[[TrialOutcome], None] | None,
    ) -> tuple[DivisionTable, int, int]:
        """
        Run up to `budget` trials into a private table.

        Returns:
            Tuple of (table, accepted_count, rejected_count)
        """
        table = DivisionTable()
        accepted = 0
        rejected = 0

        for trial in range(budget):
            if stop_event.is_set():
                break
            if (
                deadline is not None
                and trial % self.DEADLINE_CHECK_INTERVAL == 0
                and time.monotonic() >= deadline
            ):
                logger.info(f"Search deadline reached after {trial} trials")
                stop_event.set()
                break

            outcome = self.run_trial(participants, rng)
            if trial_observer is not None:
                trial_observer(outcome)

            match outcome:
                case AcceptedTrial(players=candidate, mismatch_count=mismatch_count, score=score):
                    accepted += 1
                    improved = table.offer(mismatch_count, candidate, score)
                    if (
                        improved
                        and mismatch_count == 0
                        and self.early_exit_score is not None
                        and score <= self.early_exit_score
                    ):
                        logger.info(f"Early termination: zero-mismatch score {score:.1f} after {trial + 1} trials")
                        stop_event.set()
                case RejectedTrial():
                    rejected += 1

        return table, accepted, rejected

    def search(
        self,
        players: Sequence[Player],
        trial_budget: int | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
        trial_observer: Callable[[TrialOutcome], None] | None = None,
    ) -> DivisionTable:
        """
        Search lane assignments for the participating players.

        Args:
            players: Roster; exactly ten must have is_participating set
            trial_budget: Overrides the configured budget for this search
            seed: Seed for a fresh random source (ignored when rng is given)
            rng: Random source to draw from; with several workers it only seeds
                 the per-worker sources
            trial_observer: Called with every trial outcome. With several workers
                            it is called from worker threads.

        Returns:
            DivisionTable with the best candidate per mismatch count

        Raises:
            PreconditionViolation: If the participant count is not ten
        """
        participants = self.get_participants(players)
        if len(participants) != PARTICIPANT_COUNT:
            raise PreconditionViolation(
                f"Need exactly {PARTICIPANT_COUNT} participants, got {len(participants)}"
            )

        budget = trial_budget if trial_budget is not None else self.trial_budget
        if budget < 0:
            raise ValueError(f"trial_budget must be non-negative, got {budget}")

        if not self.role_service.has_feasible_lock_assignment(participants):
            logger.warning("Role-locked players cannot all be seated on desired lanes; every trial will be rejected")

        source = rng if rng is not None else random.Random(seed)
        deadline = time.monotonic() + self.deadline_seconds if self.deadline_seconds is not None else None
        stop_event = threading.Event()
        started = time.perf_counter()

        if self.workers == 1:
            table, accepted, rejected = self._run_trials(
                participants, budget, source, deadline, stop_event, trial_observer
            )
        else:
            # Per-worker seeds are drawn up front so results do not depend on scheduling
            worker_seeds = [source.getrandbits(64) for _ in range(self.workers)]
            base, extra = divmod(budget, self.workers)
            budgets = [base + (1 if i < extra else 0) for i in range(self.workers)]

            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [
                    executor.submit(
                        self._run_trials,
                        participants,
                        worker_budget,
                        random.Random(worker_seed),
                        deadline,
                        stop_event,
                        trial_observer,
                    )
                    for worker_seed, worker_budget in zip(worker_seeds, budgets)
                ]
                results = [future.result() for future in futures]

            table = reduce(DivisionTable.merge, (result[0] for result in results))
            accepted = sum(result[1] for result in results)
            rejected = sum(result[2] for result in results)

        elapsed = time.perf_counter() - started
        self._log_summary(table, accepted, rejected, elapsed)
        return table

    def _log_summary(self, table: DivisionTable, accepted: int, rejected: int, elapsed: float) -> None:
        logger.info(
            f"Search finished in {elapsed:.2f}s: {accepted + rejected} trials "
            f"({accepted} accepted, {rejected} rejected), "
            f"available mismatch counts: {table.available_counts()}"
        )
        best = table.best()
        if best is None:
            logger.warning("No valid assignment found")
            return
        mismatch_count, division = best
        logger.info(f"Best: {mismatch_count} mismatches, score {division.evaluation_score:.1f}")
        for k, division in table.items():
            if division.is_available:
                logger.debug(
                    f"  {k} mismatches: score {division.evaluation_score:.1f} | "
                    f"Blue: {', '.join(p.name for p in division.blue_team.players)} | "
                    f"Red: {', '.join(p.name for p in division.red_team.players)}"
                )
