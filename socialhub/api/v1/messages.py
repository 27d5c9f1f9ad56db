"""Direct message REST API routes - V1."""

from fastapi import APIRouter, Depends

from ...models import SendMessageRequest, SendMessageResponse, ConversationMessagesResponse
from ...services import MessageService
from .deps import get_message_service, get_current_user_id
from .presenters import message_response

router = APIRouter(prefix="/api/v1/message", tags=["Messages"])


@router.post("/send/{receiver_id}", response_model=SendMessageResponse, status_code=201)
async def send_message(
    receiver_id: str,
    request: SendMessageRequest,
    user_id: str = Depends(get_current_user_id),
    service: MessageService = Depends(get_message_service)
):
    """Send a message; both parties get a ``newMessage`` push when online."""
    message = await service.send_message(user_id, receiver_id, request.text_message)
    return SendMessageResponse(new_message=message_response(message))


@router.get("/all/{other_id}", response_model=ConversationMessagesResponse)
async def get_messages(
    other_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MessageService = Depends(get_message_service)
):
    """The caller's conversation with ``other_id``, oldest first."""
    messages = service.get_messages(user_id, other_id)
    return ConversationMessagesResponse(messages=[message_response(m) for m in messages])
