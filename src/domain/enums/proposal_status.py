"""Proposal lifecycle enums.

The CFP workflow moves a proposal between statuses through actions taken by
speakers (submit, confirm, withdraw) or organizers (accept, reject, remind).
Only the status/action values travel inside domain events; the transition
rules themselves live with the proposal CRUD code, outside this service.

Usage:
    from src.domain.enums import ProposalAction, ProposalStatus

    if event.action in {ProposalAction.CONFIRM, ProposalAction.WITHDRAW}:
        ...
"""

from enum import Enum


class ProposalStatus(str, Enum):
    """Proposal status as stored on the proposal document."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CONFIRMED = "confirmed"
    WITHDRAWN = "withdrawn"
    DELETED = "deleted"


class ProposalAction(str, Enum):
    """Action that triggered a proposal status change."""

    SUBMIT = "submit"
    UNSUBMIT = "unsubmit"
    ACCEPT = "accept"
    REJECT = "reject"
    REMIND = "remind"
    CONFIRM = "confirm"
    WITHDRAW = "withdraw"
    DELETE = "delete"
