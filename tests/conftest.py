"""Pytest configuration and shared fixtures.

Fixtures build the snapshots carried inside domain events so individual
tests only spell out the fields they care about.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.config import Settings
from src.core.enums import Environment
from src.domain.enums import ProposalAction, ProposalStatus
from src.domain.events import (
    GallerySpeakerTagged,
    ProposalEventMetadata,
    ProposalStatusChanged,
)
from src.domain.value_objects import (
    ConferenceSnapshot,
    GalleryImageSnapshot,
    ProposalSnapshot,
    Speaker,
    TriggeredBy,
)


class FakeDocumentStore:
    """Document store double recording patches and created documents."""

    def __init__(self, document=None):
        self.document = document
        self.fetch_one = AsyncMock(side_effect=lambda query, params: self.document)
        self.create = AsyncMock(side_effect=lambda doc: {"_id": "act-1", **doc})
        self.assets = MagicMock()
        self.assets.upload = AsyncMock(return_value={"_id": "file-abc-pdf"})
        self.patched: list[tuple[str, dict]] = []
        self.commit_error: Exception | None = None

    def patch(self, document_id):
        store = self
        fields: dict = {}

        class _Patch:
            def set(self, values):
                fields.update(values)
                return self

            async def commit(self):
                if store.commit_error is not None:
                    raise store.commit_error
                store.patched.append((document_id, dict(fields)))
                return {"_id": document_id}

        return _Patch()


@pytest.fixture
def mock_logger():
    """Logger double; assert on .info/.warning/.error calls."""
    return MagicMock()


@pytest.fixture
def settings():
    """Settings for tests, independent of the process environment."""
    return Settings(
        environment=Environment.TESTING,
        adobe_sign_client_id="test-client-id",
        public_base_url="https://cloudnativedays.no",
        slack_channel="#cfp",
        gallery_notification_batch_size=2,
    )


@pytest.fixture
def email_sender():
    sender = MagicMock()
    sender.send = AsyncMock()
    return sender


@pytest.fixture
def chat_notifier():
    notifier = MagicMock()
    notifier.post_message = AsyncMock()
    return notifier


@pytest.fixture
def audience():
    client = MagicMock()
    client.get_or_create_audience = AsyncMock(return_value="aud-1")
    client.add_contact = AsyncMock()
    client.remove_contact = AsyncMock()
    return client


@pytest.fixture
def conference():
    return ConferenceSnapshot(
        id="conf-1",
        title="Cloud Native Days Norway 2026",
        domains=("cloudnativedays.no", "www.cloudnativedays.no"),
        cfp_email="cfp@cloudnativedays.no",
        cfp_notification_channel="#cfp-2026",
    )


@pytest.fixture
def speakers():
    return (
        Speaker(id="spk-1", name="Ada Lovelace", email="ada@example.com"),
        Speaker(id="spk-2", name="Grace Brewster Hopper", email="grace@example.com"),
    )


@pytest.fixture
def make_proposal_event(conference, speakers):
    """Factory for ProposalStatusChanged with sensible defaults."""

    def _make(
        *,
        action: ProposalAction = ProposalAction.ACCEPT,
        previous_status: ProposalStatus = ProposalStatus.SUBMITTED,
        new_status: ProposalStatus = ProposalStatus.ACCEPTED,
        should_notify: bool = True,
        comment: str | None = None,
        domain: str | None = None,
        conference: ConferenceSnapshot = conference,
        speakers: tuple[Speaker, ...] = speakers,
    ) -> ProposalStatusChanged:
        return ProposalStatusChanged(
            proposal=ProposalSnapshot(
                id="prop-1",
                title="Scaling Kubernetes Operators",
                status=new_status,
            ),
            previous_status=previous_status,
            new_status=new_status,
            action=action,
            conference=conference,
            speakers=speakers,
            metadata=ProposalEventMetadata(
                triggered_by=TriggeredBy(speaker_id="org-1", is_organizer=True),
                should_notify=should_notify,
                comment=comment,
                domain=domain,
            ),
        )

    return _make


@pytest.fixture
def gallery_image():
    return GalleryImageSnapshot(
        id="img-1",
        image_url="https://cdn.example.com/img-1.jpg",
        conference_title="Cloud Native Days Norway 2026",
        photographer="Jane Doe",
    )


@pytest.fixture
def make_tag_event(gallery_image):
    """Factory for GallerySpeakerTagged."""

    def _make(speakers: tuple[Speaker, ...]) -> GallerySpeakerTagged:
        return GallerySpeakerTagged(image=gallery_image, speakers=speakers)

    return _make
