"""HTML pages served to sellers who click links in their email."""

from html import escape

from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.value import InvitationStatus

_BODY_STYLE = "font-family: ui-sans-serif; padding: 24px;"


def _page(body: str) -> str:
    return f"""
<html>
  <body style="{_BODY_STYLE}">{body}
  </body>
</html>
"""


def accepted_page(invitation: Invitation) -> str:
    title = escape(invitation.project_title or invitation.project_id)
    return _page(
        f"""
    <h2>Thanks, {escape(invitation.seller_name)}!</h2>
    <p>Your acceptance for project <b>{title}</b> has been recorded.</p>
    <p>You can reply to the email to discuss next steps.</p>"""
    )


def rejected_page(invitation: Invitation) -> str:
    title = escape(invitation.project_title or invitation.project_id)
    return _page(
        f"""
    <h2>Thanks, {escape(invitation.seller_name)}.</h2>
    <p>Your rejection for project <b>{title}</b> has been recorded.</p>
    <p>The admin has been notified.</p>"""
    )


def not_found_page() -> str:
    return _page(
        """
    <h2>Invite not found</h2>
    <p>This link is no longer valid. Please contact the admin.</p>"""
    )


def closed_page(current: InvitationStatus) -> str:
    if current.is_terminal:
        heading = "Nothing to do"
        detail = f"This invitation has already been answered ({current.value})."
    else:
        heading = "Invitation on hold"
        detail = (
            "We could not deliver the latest email for this invitation. "
            "The admin will send you an updated offer."
        )
    return _page(
        f"""
    <h2>{heading}</h2>
    <p>{escape(detail)}</p>"""
    )


def landing_page(base_url: str) -> str:
    return _page(
        f"""
    <h2>IdeaMatch Mailer</h2>
    <p>Mailer running at <b>{escape(base_url)}</b></p>
    <ul>
      <li><a href="/api/health">/api/health</a>: health check</li>
      <li><a href="/api/test-email">/api/test-email</a>: test endpoint</li>
    </ul>
    <p>Use the <code>/api/</code> routes for invites, offers, accept/reject.</p>"""
    )
