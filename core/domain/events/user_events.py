"""
User lookup contract.

Request: email. Reply: user {id, email, name} or null, plus optional error.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..entities import User
from .base import REQUEST_ID, MessageContract, ReplyContract


@dataclass(frozen=True)
class UserLookupRequest(MessageContract):
    email: str

    def to_payload(self) -> Dict[str, Any]:
        return {"email": self.email}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserLookupRequest":
        return cls(email=str(payload.get("email") or ""))


@dataclass(frozen=True)
class UserLookupResponse(ReplyContract):
    user: Optional[User] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = self._base_payload()
        payload["user"] = (
            {"id": self.user.id, "email": self.user.email, "name": self.user.name}
            if self.user else None
        )
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserLookupResponse":
        data = payload.get("user")
        user = None
        if data:
            user = User(
                id=str(data.get("id") or data.get("_id")),
                email=data["email"],
                name=data.get("name", ""),
            )
        return cls(request_id=payload.get(REQUEST_ID, ""), error=payload.get("error"), user=user)
