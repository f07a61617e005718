"""
Group partitioning for large rounds.

Splits the active participants into groups of 2-4 that each play an
independent elimination round.
"""
import random
from typing import List, Optional, Sequence, TypeVar

from rpsls.game.errors import InsufficientParticipantsError
from rpsls.utils.constants import MIN_GROUP_SIZE, MAX_GROUP_SIZE

T = TypeVar('T')


def group_sizes(n: int) -> List[int]:
    """
    Compute group sizes for n participants.

    Groups of 4 are formed first. The remainder decides the tail:
    - 0: nothing extra
    - 1: one group of 4 becomes 3 + 2 (no group of 1)
    - 2: one extra group of 2
    - 3: one extra group of 3

    Args:
        n: Number of participants (at least 2)

    Returns:
        List of group sizes summing to n, each between 2 and 4

    Raises:
        InsufficientParticipantsError: If n < 2
    """
    if n < MIN_GROUP_SIZE:
        raise InsufficientParticipantsError(
            f"Need at least {MIN_GROUP_SIZE} participants to form groups, got {n}"
        )

    full_groups, remainder = divmod(n, MAX_GROUP_SIZE)
    sizes = [MAX_GROUP_SIZE] * full_groups

    if remainder == 1:
        # n >= 5 here, so there is always a full group to break up
        return sizes[:-1] + [MAX_GROUP_SIZE - 1, MIN_GROUP_SIZE]
    if remainder:
        sizes.append(remainder)
    return sizes


def partition_into_groups(
    participants: Sequence[T],
    rng: Optional[random.Random] = None
) -> List[List[T]]:
    """
    Shuffle participants and split them into groups of 2-4.

    Every participant lands in exactly one group. The input sequence is
    not modified.

    Args:
        participants: Active participants to split
        rng: Random source for the shuffle (module random if None)

    Returns:
        List of groups, sized per group_sizes()

    Raises:
        InsufficientParticipantsError: If fewer than 2 participants are given
    """
    sizes = group_sizes(len(participants))

    shuffled = list(participants)
    (rng or random).shuffle(shuffled)

    groups = []
    start = 0
    for size in sizes:
        groups.append(shuffled[start:start + size])
        start += size

    return groups
