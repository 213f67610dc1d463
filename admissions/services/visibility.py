"""
Visibility policy

Decides which applications a caller may see and which committee entries
must be hidden from them.

Roles:
- Election Committee: sees everything, nothing is redacted
- Main Board: sees every application except those addressed only to the
  Main Board; Main Board entries are redacted
- Ordinary: sees applications addressed to one of its committees; Main
  Board entries are redacted

Statuses carry their committee id, so committees and statuses are redacted
by the same key and always stay aligned.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from loguru import logger

from admissions.core.config import settings
from admissions.core.exceptions import ForbiddenException


class RoleKind(str, Enum):
    ELECTION_COMMITTEE = "election_committee"
    MAIN_BOARD = "main_board"
    ORDINARY = "ordinary"


@dataclass(frozen=True)
class CallerRole:
    """Caller's role, computed once per request from their memberships"""
    kind: RoleKind
    main_board_id: int
    committee_ids: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def is_election_committee(self) -> bool:
        return self.kind is RoleKind.ELECTION_COMMITTEE

    @property
    def is_main_board(self) -> bool:
        return self.kind is RoleKind.MAIN_BOARD


def build_caller_role(
    committee_ids: Iterable[int],
    election_committee_id: Optional[int] = None,
    main_board_id: Optional[int] = None,
) -> CallerRole:
    """Classify a membership set; Election Committee wins over Main Board"""
    if election_committee_id is None:
        election_committee_id = settings.election_committee_id
    if main_board_id is None:
        main_board_id = settings.main_board_id

    ids = frozenset(committee_ids)
    if election_committee_id in ids:
        kind = RoleKind.ELECTION_COMMITTEE
    elif main_board_id in ids:
        kind = RoleKind.MAIN_BOARD
    else:
        kind = RoleKind.ORDINARY
    return CallerRole(kind=kind, committee_ids=ids, main_board_id=main_board_id)


def require_membership(role: CallerRole) -> None:
    """Committee-scoped operations need at least one membership"""
    if not role.committee_ids:
        raise ForbiddenException("The user is not member of any committee")


def can_view(role: CallerRole, addressed_ids: Iterable[int]) -> bool:
    """Whether ``role`` may see an application addressed to ``addressed_ids``"""
    addressed = set(addressed_ids)
    if role.kind is RoleKind.ELECTION_COMMITTEE:
        return True
    if role.kind is RoleKind.MAIN_BOARD:
        return bool(addressed - {role.main_board_id})
    return bool(addressed & role.committee_ids)


def redact_application(
    role: CallerRole,
    committees: Sequence,
    statuses: Sequence,
) -> Tuple[list, list]:
    """
    Committees and statuses visible to ``role``

    Committees are matched on ``id`` and statuses on ``committee``.
    """
    if role.kind is RoleKind.ELECTION_COMMITTEE:
        return list(committees), list(statuses)
    hidden = role.main_board_id
    return (
        [c for c in committees if c.id != hidden],
        [s for s in statuses if s.committee != hidden],
    )


def authorize_application(role: CallerRole, application):
    """
    Detail-view decision for one application

    Returns a redacted copy of ``application`` (any model with ``committees``
    and ``statuses``) or raises ForbiddenException. The message is the same
    whatever the reason, so nothing is revealed about other committees.
    """
    addressed = [c.id for c in application.committees]
    if not can_view(role, addressed):
        logger.debug(f"Access denied: role={role.kind.value} application={application.id}")
        raise ForbiddenException("You do not have access to this application")

    committees, statuses = redact_application(role, application.committees, application.statuses)
    return application.model_copy(update={"committees": committees, "statuses": statuses})
