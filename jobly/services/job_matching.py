# job_matching.py
"""Match a user to the jobs whose requirements are exactly their qualifications."""

import logging
from typing import Sequence

from jobly.db.executor import Database
from jobly.errors import NotFoundError
from jobly.services import jobs as job_service
from jobly.services import users as user_service


logger = logging.getLogger(__name__)


def same_technologies(qualified: Sequence[int], required: Sequence[int]) -> bool:
    """Compare two ascending id lists position by position."""

    if len(qualified) != len(required):
        return False
    return all(q == r for q, r in zip(qualified, required))


def collect_candidate_jobs(db: Database, tech_ids: Sequence[int]) -> list[int]:
    """Jobs requiring at least one of `tech_ids`, in first-seen order, without repeats."""

    candidates: dict[int, None] = {}
    for tech_id in tech_ids:
        for job_id in job_service.find_ids_requiring(db, tech_id):
            candidates.setdefault(job_id, None)
    return list(candidates)


def get_matching_jobs(db: Database, username: str) -> list[int]:
    """Ids of jobs whose full requirement set equals the user's qualification set.

    A job requiring a subset or a superset of the user's technologies does not
    match. A user without qualifications matches nothing, including jobs with
    no requirements. Results keep candidate discovery order.

    Raises NotFoundError if the user does not exist.
    """

    if not user_service.exists(db, username):
        raise NotFoundError(f"No user: {username}")

    qualified = sorted(user_service.get_qualifications(db, username))
    if not qualified:
        return []

    matches: list[int] = []
    for job_id in collect_candidate_jobs(db, qualified):
        required = sorted(job_service.get_requirements(db, job_id))
        if same_technologies(qualified, required):
            matches.append(job_id)

    logger.debug(
        "job_matching username=%s qualifications=%d matches=%d", username, len(qualified), len(matches)
    )
    return matches
