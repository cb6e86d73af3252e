from __future__ import annotations

import asyncio

from botbuilder.core import CardFactory, ConversationState, MemoryStorage
from botbuilder.core.adapters import TestAdapter as SdkTestAdapter
from botbuilder.schema import Activity, ActivityTypes, AttachmentLayoutTypes

from richcardsbot.bot import RichCardsBot
from richcardsbot.config import Settings


def _converse(bot: RichCardsBot, *activities) -> list[Activity]:
    adapter = SdkTestAdapter(bot.on_turn)

    async def _run() -> None:
        for activity in activities:
            await adapter.receive_activity(activity)

    asyncio.run(_run())
    return adapter.activity_buffer


def _bot(interactive: bool, storage: MemoryStorage | None = None) -> RichCardsBot:
    state = ConversationState(storage or MemoryStorage())
    return RichCardsBot(state, settings=Settings(INTERACTIVE_PROMPT=interactive))


def test_default_mode_answers_every_message_with_video_card():
    replies = _converse(_bot(False), "hi", "anything")

    assert len(replies) == 2
    for reply in replies:
        assert [a.content_type for a in reply.attachments] == [CardFactory.content_types.video_card]


def test_non_message_activity_leaves_storage_untouched():
    storage = MemoryStorage()
    replies = _converse(_bot(False, storage), Activity(type=ActivityTypes.conversation_update))

    assert replies == []
    assert storage.memory == {}


def test_interactive_prompt_then_video_card():
    replies = _converse(_bot(True), "hi", "video")

    assert replies[0].text == Settings().WELCOME_TEXT
    assert "Please select a card:" in replies[1].text
    assert "Video Card" in replies[1].text
    assert [a.content_type for a in replies[2].attachments] == [CardFactory.content_types.video_card]
    assert len(replies) == 3


def test_interactive_prompt_all_cards_carousel():
    replies = _converse(_bot(True), "hi", "all cards")

    carousel = replies[-1]
    assert carousel.attachment_layout == AttachmentLayoutTypes.carousel
    assert len(carousel.attachments) == 8


def test_interactive_prompt_retries_on_invalid_choice():
    replies = _converse(_bot(True), "hi", "nothing here", "video")

    assert replies[2].text.startswith(Settings().RETRY_PROMPT_TEXT)
    assert [a.content_type for a in replies[3].attachments] == [CardFactory.content_types.video_card]


def test_prompt_restarts_after_completion():
    replies = _converse(_bot(True), "hi", "video", "again")

    assert replies[3].text == Settings().WELCOME_TEXT
    assert "Please select a card:" in replies[4].text
