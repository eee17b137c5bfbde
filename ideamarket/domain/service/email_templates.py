"""Email bodies for invitation and offer messages.

Every message has a plain-text and an HTML part. The HTML part carries
accept/reject buttons plus the raw links for clients that strip styling.
"""

from html import escape

from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.model.mail import MailMessage
from ideamarket.domain.model.project import Project

PLACEHOLDER = "—"
SIGNATURE = "— IdeaMarket"

_BUTTON_STYLE = (
    "display:inline-block;padding:10px 14px;border-radius:8px;"
    "color:#081226;text-decoration:none;"
)


def _or_placeholder(value: object) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _link_block(invitation: Invitation) -> str:
    accept = escape(invitation.accept_url, quote=True)
    reject = escape(invitation.reject_url, quote=True)
    return f"""
    <p>
      <a href="{accept}" style="{_BUTTON_STYLE}background:#4ade80;margin-right:8px;">Accept</a>
      <a href="{reject}" style="{_BUTTON_STYLE}background:#fb7185;">Reject</a>
    </p>
    <hr/>
    <p style="color:#6b7280">If buttons don't work, use these links:<br/>
      Accept: <a href="{accept}">{accept}</a><br/>
      Reject: <a href="{reject}">{reject}</a>
    </p>
    <p>{SIGNATURE}</p>"""


def invitation_email(
    project: Project, invitation: Invitation, sender: str
) -> MailMessage:
    """Compose the initial invitation (no price attached)."""
    overlap = ", ".join(invitation.overlap)
    text = "\n".join(
        [
            f"Hi {invitation.seller_name},",
            "",
            f'You match a new project "{project.title}" (score {_or_placeholder(invitation.score)}).',
            f"Category: {_or_placeholder(project.category)}",
            f"Overlap skills: {_or_placeholder(overlap)}",
            f"Deadline: {_or_placeholder(project.deadline)}",
            "",
            f"Accept: {invitation.accept_url}",
            f"Reject: {invitation.reject_url}",
            "",
            SIGNATURE,
        ]
    )
    html = f"""
  <div style="font-family:system-ui,Segoe UI,Roboto,Arial;line-height:1.4;color:#0b1222">
    <p>Hi {escape(invitation.seller_name)},</p>
    <p>You match a new project "<strong>{escape(project.title)}</strong>" (score {_or_placeholder(invitation.score)}).</p>
    <p>Category: {escape(_or_placeholder(project.category))}<br/>
       Overlap skills: {escape(_or_placeholder(overlap))}<br/>
       Deadline: {escape(_or_placeholder(project.deadline))}</p>{_link_block(invitation)}
  </div>"""
    return MailMessage(
        sender=sender,
        to=invitation.seller_email,
        subject=f"[IdeaMarket] {project.title} — Invitation to propose",
        text=text,
        html=html,
    )


def offer_email(invitation: Invitation, sender: str) -> MailMessage:
    """Compose the offer email for an invitation that has a price attached."""
    title = invitation.project_title or invitation.project_id
    price = _or_placeholder(invitation.offered_price)
    note = _or_placeholder(invitation.offer_note)
    text = "\n".join(
        [
            f"Hi {invitation.seller_name},",
            "",
            f'Admin has sent an offer for the project "{title}".',
            f"Offered Price: {price}",
            f"Note: {note}",
            "",
            f"If you accept, click: {invitation.accept_url}",
            f"If you reject, click: {invitation.reject_url}",
            "",
            SIGNATURE,
        ]
    )
    html = f"""
  <div style="font-family:system-ui,Segoe UI,Roboto,Arial;color:#0b1222;line-height:1.4">
    <p>Hi {escape(invitation.seller_name)},</p>
    <p>Admin has sent an offer for the project "<strong>{escape(title)}</strong>".</p>
    <p>Offered Price: <strong>{escape(price)}</strong><br/>
       Note: {escape(note)}</p>{_link_block(invitation)}
  </div>"""
    return MailMessage(
        sender=sender,
        to=invitation.seller_email,
        subject=f'[IdeaMarket] Offer for "{title}"',
        text=text,
        html=html,
    )
