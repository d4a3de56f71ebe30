"""Request and response models for the inline demo endpoints."""

from pydantic import BaseModel


class MessageGreeting(BaseModel):
    message: str


class MessageIn(BaseModel):
    name: str | None = None
    message: str | None = None


class MessageReply(BaseModel):
    success: bool
    reply: str

    @classmethod
    def thanks(cls, name: str | None) -> "MessageReply":
        return cls(success=True, reply=f"Thanks {name}, we received your message!")
