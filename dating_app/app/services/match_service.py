"""
Interest based matching.

``MatchService`` scores candidate profiles by the number of interests
they share with a given profile.  The profile never matches itself:
candidates owned by the same user id are skipped.  Results keep the
order of the candidate list; they are not sorted by score.
"""

import logging
from typing import List, Sequence, Tuple

from ..schemas.profile import Profile

logger = logging.getLogger(__name__)


class MatchService:
    """Stateless helpers for computing matches between profiles."""

    @classmethod
    def score_matches(
        cls,
        profile: Profile,
        candidates: Sequence[Profile],
        min_score: int,
    ) -> List[Tuple[Profile, int]]:
        """Return ``(candidate, score)`` pairs with ``score >= min_score``."""
        results: List[Tuple[Profile, int]] = []
        for candidate in candidates:
            if candidate.user.id == profile.user.id:
                continue
            score = profile.match(candidate)
            if score >= min_score:
                results.append((candidate, score))
        logger.debug(
            "Profile of user %s matched %d of %d candidates (min_score=%s)",
            profile.user.id,
            len(results),
            len(candidates),
            min_score,
        )
        return results

    @classmethod
    def find_matches(
        cls,
        profile: Profile,
        candidates: Sequence[Profile],
        min_score: int,
    ) -> List[Profile]:
        """Return the candidates sharing at least ``min_score`` interests."""
        return [candidate for candidate, _ in cls.score_matches(profile, candidates, min_score)]
