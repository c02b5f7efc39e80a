"""Status transition rules for matches and projects.

The tables below are the whole state machine; services consult them before
mutating anything so that an illegal request fails without side effects.
"""

from src.marketplace.core.exceptions import InvalidStateTransitionError
from src.marketplace.models.enums import MatchStatus, ProjectStatus

# target status -> statuses it may be reached from
MATCH_TRANSITIONS: dict[MatchStatus, frozenset[MatchStatus]] = {
    MatchStatus.ACCEPTED: frozenset({MatchStatus.PENDING}),
    MatchStatus.REJECTED: frozenset({MatchStatus.PENDING}),
    MatchStatus.COMPLETED: frozenset({MatchStatus.ACCEPTED}),
}

PROJECT_TRANSITIONS: dict[ProjectStatus, frozenset[ProjectStatus]] = {
    ProjectStatus.IN_PROGRESS: frozenset({ProjectStatus.OPEN}),
    ProjectStatus.COMPLETED: frozenset({ProjectStatus.IN_PROGRESS}),
    ProjectStatus.CANCELLED: frozenset({ProjectStatus.OPEN}),
}

# Project status a match transition drags its parent project into
PROJECT_CASCADE: dict[MatchStatus, ProjectStatus] = {
    MatchStatus.ACCEPTED: ProjectStatus.IN_PROGRESS,
    MatchStatus.COMPLETED: ProjectStatus.COMPLETED,
}


def ensure_match_transition(current: MatchStatus, target: MatchStatus) -> None:
    """Raise InvalidStateTransitionError unless current -> target is legal."""
    if current not in MATCH_TRANSITIONS.get(target, frozenset()):
        raise InvalidStateTransitionError("match", current.value, target.value)


def ensure_project_transition(current: ProjectStatus, target: ProjectStatus) -> None:
    """Raise InvalidStateTransitionError unless current -> target is legal."""
    if current not in PROJECT_TRANSITIONS.get(target, frozenset()):
        raise InvalidStateTransitionError("project", current.value, target.value)


def ensure_proposal_allowed(current: MatchStatus) -> None:
    """Proposals may only be written while the match is pending."""
    if current is not MatchStatus.PENDING:
        raise InvalidStateTransitionError("match", current.value, "proposal submitted")
