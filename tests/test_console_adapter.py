import asyncio
import io

import pytest
from botbuilder.core import ConversationState, MemoryStorage, MessageFactory

from richcardsbot.adapters.console import ConsoleAdapter, render_activity
from richcardsbot.bot import RichCardsBot
from richcardsbot.cards import create_all_cards, create_hero_card
from richcardsbot.config import Settings


def _chat(settings: Settings, *lines: str) -> list[str]:
    out = io.StringIO()
    adapter = ConsoleAdapter(output=out)
    bot = RichCardsBot(ConversationState(MemoryStorage()), settings=settings)

    async def _run() -> None:
        for line in lines:
            await adapter.process_text(line, bot.on_turn)

    asyncio.run(_run())
    return out.getvalue().splitlines()


def test_default_mode_prints_video_card():
    assert _chat(Settings(), "hi") == ["[video] Bienvenido al Tribunal"]


def test_interactive_mode_keeps_dialog_state_between_lines():
    lines = _chat(Settings(INTERACTIVE_PROMPT=True), "hi", "all cards")

    assert lines[0] == Settings().WELCOME_TEXT
    assert "(carousel: 8 cards)" in lines
    assert lines[-1] == "[video] Bienvenido al Tribunal"


def test_render_carousel():
    lines = render_activity(MessageFactory.carousel(create_all_cards()))
    assert lines[0] == "(carousel: 8 cards)"
    assert lines[1:] == [
        "[video] Bienvenido al Tribunal",
        "[animation] Microsoft Bot Framework",
        "[audio] I am your father",
        "[hero] BotFramework Hero Card",
        "[receipt] John Doe",
        "[signin] BotFramework Sign-in Card",
        "[thumbnail] BotFramework Thumbnail Card",
        "[video] Bienvenido al Tribunal",
    ]


def test_render_text_with_attachment():
    lines = render_activity(MessageFactory.attachment(create_hero_card(), text="Here you go"))
    assert lines == ["Here you go", "[hero] BotFramework Hero Card"]


def test_update_and_delete_are_unsupported():
    adapter = ConsoleAdapter(output=io.StringIO())
    with pytest.raises(NotImplementedError):
        asyncio.run(adapter.update_activity(None, None))
    with pytest.raises(NotImplementedError):
        asyncio.run(adapter.delete_activity(None, None))
