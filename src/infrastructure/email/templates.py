"""Transactional email templates.

Each template turns handler data into a subject and an HTML body. Values are
HTML-escaped; missing optional values render as empty sections.

Templates:
    - proposal_accepted: Talk accepted, asks the speaker to confirm
    - proposal_rejected: Talk not selected
    - proposal_reminder: Reminder to confirm an accepted talk
    - gallery_speaker_tagged: Speaker appears in a newly published photo
"""

from collections.abc import Callable
from dataclasses import dataclass
from html import escape
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class RenderedEmail:
    subject: str
    html: str


def _comment_block(data: dict[str, Any]) -> str:
    comment = data.get("comment")
    if not comment:
        return ""
    return (
        "<p><strong>Message from the organizers:</strong></p>"
        f"<blockquote>{escape(comment)}</blockquote>"
    )


def _button(url: str | None, label: str) -> str:
    if not url:
        return ""
    return f'<p><a href="{escape(url)}">{escape(label)}</a></p>'


def _proposal_accepted(data: dict[str, Any]) -> RenderedEmail:
    title = escape(data["proposal_title"])
    conference = escape(data["conference_title"])
    return RenderedEmail(
        subject=f"Your talk has been accepted for {data['conference_title']}",
        html=(
            f"<p>Hi {escape(data['speaker_name'])},</p>"
            f"<p>Great news! <em>{title}</em> has been accepted for {conference}.</p>"
            "<p>Please confirm your participation as soon as possible.</p>"
            f"{_comment_block(data)}"
            f"{_button(data.get('confirm_url'), 'Confirm your talk')}"
        ),
    )


def _proposal_rejected(data: dict[str, Any]) -> RenderedEmail:
    title = escape(data["proposal_title"])
    conference = escape(data["conference_title"])
    return RenderedEmail(
        subject=f"Update on your proposal for {data['conference_title']}",
        html=(
            f"<p>Hi {escape(data['speaker_name'])},</p>"
            f"<p>Thank you for submitting <em>{title}</em> to {conference}. "
            "Unfortunately we could not fit it into this year's program.</p>"
            f"{_comment_block(data)}"
        ),
    )


def _proposal_reminder(data: dict[str, Any]) -> RenderedEmail:
    title = escape(data["proposal_title"])
    return RenderedEmail(
        subject=f"Reminder: please confirm your talk for {data['conference_title']}",
        html=(
            f"<p>Hi {escape(data['speaker_name'])},</p>"
            f"<p>We are still waiting for you to confirm <em>{title}</em>.</p>"
            f"{_comment_block(data)}"
            f"{_button(data.get('confirm_url'), 'Confirm your talk')}"
        ),
    )


def _gallery_speaker_tagged(data: dict[str, Any]) -> RenderedEmail:
    conference = escape(data["conference_title"])
    credits = [
        escape(value)
        for value in (data.get("photographer"), data.get("location"), data.get("date"))
        if value
    ]
    caption = f"<p><small>{' · '.join(credits)}</small></p>" if credits else ""
    return RenderedEmail(
        subject=f"You were tagged in a photo from {data['conference_title']}",
        html=(
            f"<p>Hi {escape(data['speaker_name'])},</p>"
            f"<p>You have been tagged in a new photo from {conference}.</p>"
            f'<p><img src="{escape(data["image_url"])}" alt="{conference}" width="600"/></p>'
            f"{caption}"
            f"{_button(data.get('gallery_url'), 'View the gallery')}"
        ),
    )


TEMPLATES: dict[str, Callable[[dict[str, Any]], RenderedEmail]] = {
    "proposal_accepted": _proposal_accepted,
    "proposal_rejected": _proposal_rejected,
    "proposal_reminder": _proposal_reminder,
    "gallery_speaker_tagged": _gallery_speaker_tagged,
}


def render_template(template: str, data: dict[str, Any]) -> RenderedEmail:
    """Render a named template.

    Raises:
        KeyError: Unknown template name or missing required field.
    """
    return TEMPLATES[template](data)
