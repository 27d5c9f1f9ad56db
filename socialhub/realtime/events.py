"""Builders and publishers for the two outbound events."""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .emitter import EventEmitter, DeliveryOutcome, NEW_MESSAGE_EVENT, NOTIFICATION_EVENT
from ..db.database_models import MessageDO, UserSummaryDO
from ..models.message import MessageResponse
from ..models.notification import NotificationEvent, UserDetails


_SUMMARIES = {
    "like": "{username} liked your post",
    "dislike": "{username} disliked your post",
    "message": "{username} sent you a message",
}


def build_message_payload(message: MessageDO) -> Dict[str, Any]:
    return MessageResponse(**asdict(message)).model_dump(mode="json")


def build_notification(
    kind: str,
    actor: UserSummaryDO,
    target_user_id: str,
    post_id: Optional[str] = None,
) -> NotificationEvent:
    """
    Build a notification about ``actor`` doing ``kind`` to something of ``target_user_id``.

    Args:
        kind: like, dislike, or message
        actor: Display info of the user who acted
        target_user_id: User who should hear about it
        post_id: Object acted on, when there is one

    Returns:
        NotificationEvent
    """
    return NotificationEvent(
        type=kind,
        user_id=actor.id,
        user_details=UserDetails(username=actor.username, profile_picture=actor.profile_picture),
        target_user_id=target_user_id,
        post_id=post_id,
        message=_SUMMARIES[kind].format(username=actor.username),
    )


async def publish_new_message(emitter: EventEmitter, message: MessageDO) -> List[DeliveryOutcome]:
    """
    Push ``newMessage`` to the receiver, then to the sender's own session.

    The two pushes are independent; a miss or failure on one does not affect
    the other. A message to oneself is pushed once.

    Returns:
        Outcomes in push order (receiver first)
    """
    payload = build_message_payload(message)
    outcomes = [await emitter.emit_to_user(message.receiver_id, NEW_MESSAGE_EVENT, payload)]
    if message.sender_id != message.receiver_id:
        outcomes.append(await emitter.emit_to_user(message.sender_id, NEW_MESSAGE_EVENT, payload))
    return outcomes


async def publish_notification(emitter: EventEmitter, notification: NotificationEvent) -> DeliveryOutcome:
    return await emitter.emit_to_user(
        notification.target_user_id,
        NOTIFICATION_EVENT,
        notification.model_dump(mode="json"),
    )
