"""Identity module responder: user lookup."""
from typing import Dict

from core.domain.events import UserLookupRequest, UserLookupResponse
from core.domain.repositories import UserRepository
from messaging import Event, RequestResponseService, Topic

from .base import ReplyBuilder, Responder


class UserResponder(Responder):
    def __init__(self, correlator: RequestResponseService, users: UserRepository):
        super().__init__(correlator)
        self.users = users

    def routes(self) -> Dict[Topic, ReplyBuilder]:
        return {Topic.USER_LOOKUP_REQUEST: self.lookup}

    async def lookup(self, request_id: str, event: Event) -> UserLookupResponse:
        request = UserLookupRequest.from_payload(event.payload)
        user = await self.users.find_by_email(request.email)
        return UserLookupResponse(request_id=request_id, user=user)
