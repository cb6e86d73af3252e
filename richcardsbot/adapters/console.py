from __future__ import annotations

import sys
import uuid
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import TextIO

from botbuilder.core import BotAdapter, TurnContext
from botbuilder.schema import (
    Activity,
    ActivityTypes,
    Attachment,
    AttachmentLayoutTypes,
    ChannelAccount,
    ConversationAccount,
    ConversationReference,
    ResourceResponse,
)

from richcardsbot.logging_setup import get_logger

BotLogic = Callable[[TurnContext], Awaitable]


class ConsoleAdapter(BotAdapter):
    """Local transport that exchanges plain text with a terminal.

    - Every line becomes a message activity on one fixed console conversation,
      so conversation state carries over between lines.
    - Outbound activities are rendered as text; attachments are summarised by
      kind and title.
    """

    CHANNEL_ID = "console"

    def __init__(self, output: TextIO | None = None, conversation_id: str = "console") -> None:
        super().__init__()
        self._output = output or sys.stdout
        self._logger = get_logger(self.__class__.__name__)
        self._reference = ConversationReference(
            channel_id=self.CHANNEL_ID,
            service_url="",
            conversation=ConversationAccount(id=conversation_id, name="Console"),
            user=ChannelAccount(id="user", name="User"),
            bot=ChannelAccount(id="bot", name="Bot"),
        )

    # Public API -----------------------------------------------------------------
    async def process_text(self, text: str, logic: BotLogic) -> None:
        activity = Activity(
            type=ActivityTypes.message,
            id=str(uuid.uuid4()),
            text=text,
            timestamp=datetime.now(tz=timezone.utc),
            channel_id=self._reference.channel_id,
            service_url=self._reference.service_url,
            conversation=self._reference.conversation,
            from_property=self._reference.user,
            recipient=self._reference.bot,
        )
        context = TurnContext(self, activity)
        await self.run_pipeline(context, logic)

    async def send_activities(self, context: TurnContext, activities: list[Activity]) -> list[ResourceResponse]:
        responses: list[ResourceResponse] = []
        for activity in activities:
            if activity.type == ActivityTypes.message:
                for line in render_activity(activity):
                    print(line, file=self._output)
            else:
                self._logger.debug("Not rendering %s activity", activity.type)
            responses.append(ResourceResponse(id=activity.id or str(uuid.uuid4())))
        self._output.flush()
        return responses

    async def update_activity(self, context: TurnContext, activity: Activity):
        raise NotImplementedError("ConsoleAdapter does not support updating activities")

    async def delete_activity(self, context: TurnContext, reference: ConversationReference):
        raise NotImplementedError("ConsoleAdapter does not support deleting activities")


def render_activity(activity: Activity) -> list[str]:
    lines: list[str] = []
    if activity.text:
        lines.append(activity.text)
    attachments = activity.attachments or []
    if attachments and activity.attachment_layout == AttachmentLayoutTypes.carousel:
        lines.append(f"(carousel: {len(attachments)} cards)")
    for attachment in attachments:
        lines.append(_render_attachment(attachment))
    return lines


def _render_attachment(attachment: Attachment) -> str:
    kind = (attachment.content_type or "attachment").rsplit(".", 1)[-1]
    content = attachment.content
    title = getattr(content, "title", None) or getattr(content, "text", None) or ""
    return f"[{kind}] {title}".rstrip()
