"""Interest notification template."""

from ..profiles.models import Profile
from .ports import InterestNotification

SUBJECT_TEMPLATE = "Interest by {first_name} {last_name}"

TEXT_TEMPLATE = (
    "Hello {recipient_name},\n\n"
    "{first_name} has shown interest in your profile. Here are their details:\n\n"
    "Name: {first_name} {last_name}\n"
    "Date of Birth: {dob}\n"
    "Height: {feet} feet {inches} inches\n"
    "Religion: {religion}\n"
    "City: {city}, {state}, {country}\n"
    "Contact: {contact}\n"
    "Community: {community}\n\n"
    "Best regards,\n"
    "Your Matrimony Team"
)


def build_interest_notification(sender: Profile, recipient: Profile) -> InterestNotification:
    """Collect the message data from the two profiles involved."""
    return InterestNotification(
        recipient_email=recipient.email,
        recipient_name=recipient.first_name,
        sender_first_name=sender.first_name,
        sender_last_name=sender.last_name,
        sender_dob=sender.dob,
        sender_height_feet=sender.height.feet if sender.height else None,
        sender_height_inches=sender.height.inches if sender.height else None,
        sender_religion=sender.religion,
        sender_city=sender.city,
        sender_state=sender.state,
        sender_country=sender.country,
        sender_contact=sender.contact,
        sender_community=sender.community,
    )


def _text(value) -> str:
    return "" if value is None else str(value)


def render_subject(notification: InterestNotification) -> str:
    return SUBJECT_TEMPLATE.format(
        first_name=notification.sender_first_name,
        last_name=_text(notification.sender_last_name),
    ).strip()


def render_text(notification: InterestNotification) -> str:
    return TEXT_TEMPLATE.format(
        recipient_name=notification.recipient_name,
        first_name=notification.sender_first_name,
        last_name=_text(notification.sender_last_name),
        dob=notification.sender_dob.isoformat() if notification.sender_dob else "",
        feet=_text(notification.sender_height_feet),
        inches=_text(notification.sender_height_inches),
        religion=_text(notification.sender_religion),
        city=_text(notification.sender_city),
        state=_text(notification.sender_state),
        country=_text(notification.sender_country),
        contact=_text(notification.sender_contact),
        community=_text(notification.sender_community),
    )
