"""Support message use cases."""

from .common import MessageListResponse, MessageResponse
from .list_messages import ListAllMessagesUseCase, ListMessagesRequest, ListMyMessagesUseCase
from .mark_read import MarkMessageReadRequest, MarkMessageReadUseCase
from .reply_message import ReplyMessageRequest, ReplyMessageUseCase
from .send_message import SendMessageRequest, SendMessageUseCase

__all__ = [
    "ListAllMessagesUseCase",
    "ListMessagesRequest",
    "ListMyMessagesUseCase",
    "MarkMessageReadRequest",
    "MarkMessageReadUseCase",
    "MessageListResponse",
    "MessageResponse",
    "ReplyMessageRequest",
    "ReplyMessageUseCase",
    "SendMessageRequest",
    "SendMessageUseCase",
]
