"""
Balanced team shuffling algorithm.
"""

import itertools
import logging
import math
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from domain.errors import InvalidInputError, NoSolutionError
from domain.models.player import Player
from domain.models.split import Split
from domain.models.team import Team
from domain.services.team_balancing_service import ScoreWeights, SplitScore, TeamBalancingService

logger = logging.getLogger("fair_teams.shuffler")

MIN_PLAYERS = 2


def team_sizes(n: int) -> tuple[int, int]:
    """
    Return (team_a_size, team_b_size) for a roster of n players.

    Even rosters split exactly in half; odd rosters give team A the extra player
    during enumeration (labels may be swapped afterwards).
    """
    big = math.ceil(n / 2)
    return big, n - big


def count_candidate_splits(n: int) -> int:
    """
    Number of candidates the exhaustive search evaluates for n players.

    C(n-1, n/2-1) for even n (player 0 pinned to team A), C(n, ceil(n/2)) for odd n.
    Grows exponentially; fine for rosters of a couple of dozen players.
    """
    if n < MIN_PLAYERS:
        return 0
    size_a, size_b = team_sizes(n)
    if size_a == size_b:
        return math.comb(n - 1, size_a - 1)
    return math.comb(n, size_a)


@dataclass(frozen=True)
class Candidate:
    """A scored candidate split produced during enumeration."""

    team_a: Team
    team_b: Team
    breakdown: SplitScore
    signature: str

    @property
    def score(self) -> float:
        return self.breakdown.score

    def to_split(self) -> Split:
        return Split(team_a=self.team_a, team_b=self.team_b, score=self.score)


class BalancedShuffler:
    """
    Implements balanced team shuffling algorithm.

    Exhaustively enumerates every two-team split of prescribed sizes, scores each
    with TeamBalancingService, and prefers the best split that is not a recent
    repeat. Stateless between calls; history is only read through the
    forbidden signatures passed in.
    """

    def __init__(
        self,
        balancing_service: TeamBalancingService | None = None,
        weights: ScoreWeights | None = None,
        log_top_k: int = 5,
    ):
        """
        Initialize the shuffler.

        Args:
            balancing_service: Scoring service (built from weights when omitted)
            weights: Policy table used when no balancing_service is given
            log_top_k: How many of the best candidates to log per shuffle (0 disables)
        """
        self.balancing_service = (
            balancing_service
            if balancing_service is not None
            else TeamBalancingService(weights)
        )
        self.log_top_k = log_top_k

    def _iter_team_a_indices(self, n: int, size_a: int) -> Iterator[tuple[int, ...]]:
        """
        Yield each Team A index set exactly once.

        When both teams have the same size, index 0 is pinned to team A so a split
        and its mirror image are never both produced.
        """
        if size_a == n - size_a:
            for rest in itertools.combinations(range(1, n), size_a - 1):
                yield (0,) + rest
        else:
            yield from itertools.combinations(range(n), size_a)

    def enumerate_candidates(self, players: list[Player]) -> list[Candidate]:
        """
        Score every split of the roster.

        Args:
            players: Roster of at least 2 players

        Returns:
            Candidates in enumeration order (not yet ranked)
        """
        n = len(players)
        size_a, _ = team_sizes(n)
        candidates: list[Candidate] = []

        for team_a_indices in self._iter_team_a_indices(n, size_a):
            chosen = set(team_a_indices)
            team_a = Team(players[i] for i in team_a_indices)
            team_b = Team(players[i] for i in range(n) if i not in chosen)
            breakdown = self.balancing_service.score(team_a, team_b)
            candidates.append(
                Candidate(
                    team_a=team_a,
                    team_b=team_b,
                    breakdown=breakdown,
                    signature=Split(team_a, team_b).signature,
                )
            )

        return candidates

    def _select_candidate(
        self,
        ranked: list[Candidate],
        forbidden: set[str],
        rng: random.Random,
    ) -> Candidate:
        """
        Pick the winner from candidates sorted by ascending score.

        The best non-forbidden candidate wins, with exact score ties among
        non-forbidden candidates broken at random. If every candidate is
        forbidden, a repeat is unavoidable and the overall best is returned.
        """
        best_allowed = next((c for c in ranked if c.signature not in forbidden), None)
        if best_allowed is None:
            logger.info(
                f"All {len(ranked)} candidate splits are recent repeats; falling back to best overall"
            )
            return ranked[0]

        tied = [
            c for c in ranked if c.score == best_allowed.score and c.signature not in forbidden
        ]
        if len(tied) > 1:
            logger.info(f"{len(tied)} splits tied at score {best_allowed.score:.1f}; picking at random")
            return rng.choice(tied)
        return best_allowed

    def _weaker_team_gets_extra(self, split: Split) -> Split:
        """
        For uneven teams, make sure the larger team is the one with the lower average.

        Only labels change; membership is untouched.
        """
        if len(split.team_a) == len(split.team_b):
            return split
        a_is_bigger = len(split.team_a) > len(split.team_b)
        a_is_weaker = split.avg_a < split.avg_b
        if a_is_bigger != a_is_weaker:
            return split.swapped()
        return split

    def _log_top_candidates(self, ranked: list[Candidate], forbidden: set[str]) -> None:
        if self.log_top_k <= 0:
            return
        logger.info("=" * 60)
        logger.info(f"TOP {min(self.log_top_k, len(ranked))} SPLITS ({len(ranked)} evaluated):")
        for i, candidate in enumerate(ranked[: self.log_top_k], 1):
            b = candidate.breakdown
            repeat_note = " [recent repeat]" if candidate.signature in forbidden else ""
            logger.info(
                f"#{i} - Score: {b.score:.1f} (Total Diff: {b.total_diff:.1f}, Avg Diff: {b.avg_diff:.2f}, "
                f"Top Diff: {b.top_diff:.1f}, Elite Diff: {b.elite_count_diff}, "
                f"Elite Stack: {b.elite_stack_penalty}){repeat_note}"
            )
            logger.info(f"  Team A: {', '.join(str(p) for p in candidate.team_a.sorted_by_skill())}")
            logger.info(f"  Team B: {', '.join(str(p) for p in candidate.team_b.sorted_by_skill())}")
        logger.info("=" * 60)

    def shuffle(
        self,
        players: list[Player],
        forbidden_signatures: Iterable[str] | None = None,
        rng: random.Random | None = None,
    ) -> Split:
        """
        Shuffle players into two balanced teams.

        Args:
            players: Roster to split (at least 2 players)
            forbidden_signatures: Signatures of recent matchups to avoid when possible
            rng: Random source for tie-breaking; pass a seeded Random for
                 reproducible results

        Returns:
            The chosen Split

        Raises:
            InvalidInputError: If fewer than 2 players are given
            NoSolutionError: If enumeration produced no candidates
        """
        if len(players) < MIN_PLAYERS:
            raise InvalidInputError(f"Need at least {MIN_PLAYERS} players, got {len(players)}")

        players = list(players)
        forbidden = set(forbidden_signatures or ())
        rng = rng if rng is not None else random.Random()

        logger.info(
            f"Evaluating {count_candidate_splits(len(players))} candidate splits for {len(players)} players"
        )
        candidates = self.enumerate_candidates(players)
        if not candidates:
            raise NoSolutionError(f"No candidate splits generated for {len(players)} players")

        # Stable sort keeps enumeration order among equal scores
        ranked = sorted(candidates, key=lambda c: c.score)
        self._log_top_candidates(ranked, forbidden)

        chosen = self._select_candidate(ranked, forbidden, rng)
        split = self._weaker_team_gets_extra(chosen.to_split())

        logger.info(
            f"SELECTED: {split.signature} with score {split.score:.1f} "
            f"(Team A {split.total_a} / Team B {split.total_b})"
        )
        return split
