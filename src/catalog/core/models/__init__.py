"""Core models package."""

from .demo import MessageGreeting, MessageIn, MessageReply

__all__ = ["MessageGreeting", "MessageIn", "MessageReply"]
