from __future__ import annotations

from botbuilder.core import Bot, ConversationState, MessageFactory, TurnContext
from botbuilder.dialogs import DialogContext, DialogSet, DialogTurnResult, DialogTurnStatus
from botbuilder.dialogs.choices import ListStyle
from botbuilder.dialogs.prompts import ChoicePrompt
from botbuilder.schema import ActivityTypes

from richcardsbot.cards import create_all_cards, create_video_card
from richcardsbot.choices import ALL_CARDS, VIDEO_CARD, build_prompt_options
from richcardsbot.config import Settings
from richcardsbot.logging_setup import get_logger

CARD_PROMPT_ID = "cardPrompt"
DIALOG_STATE_PROPERTY = "dialogState"
INVALID_SELECTION_TEXT = "An invalid selection was parsed. No corresponding Rich Cards were found."


def build_dialog_set(conversation_state: ConversationState) -> DialogSet:
    """Create the dialog set holding the card choice prompt.

    The dialog stack is persisted under the ``dialogState`` property of the
    given conversation state.
    """
    dialog_state = conversation_state.create_property(DIALOG_STATE_PROPERTY)
    dialogs = DialogSet(dialog_state)

    prompt = ChoicePrompt(CARD_PROMPT_ID)
    prompt.style = ListStyle.list_style
    dialogs.add(prompt)
    return dialogs


class RichCardsBot(Bot):
    """Prompts a user to select a rich card and returns the matching card.

    On every message turn the bot does one of the following:

    1. Starts the conversation when no dialog is active. By default this sends
       the video card straight away; with ``interactive_prompt`` enabled it
       greets the user and starts the card choice prompt instead.
    2. Stays quiet while the prompt is waiting, since the prompt has already
       re-prompted the user.
    3. Sends the card(s) matching a completed selection.

    Activities other than messages are ignored.
    """

    def __init__(
        self,
        conversation_state: ConversationState,
        dialogs: DialogSet | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.conversation_state = conversation_state
        self.dialogs = dialogs if dialogs is not None else build_dialog_set(conversation_state)
        self.settings = settings or Settings()
        self._logger = get_logger(self.__class__.__name__)

    async def on_turn(self, turn_context: TurnContext) -> None:
        activity_type = turn_context.activity.type
        if activity_type != ActivityTypes.message:
            self._logger.debug("Ignoring %s activity", activity_type)
            return

        dialog_context = await self.dialogs.create_context(turn_context)
        results = await dialog_context.continue_dialog()

        if not turn_context.responded and results.status == DialogTurnStatus.Empty:
            await self._start_conversation(turn_context, dialog_context)
        elif results.status == DialogTurnStatus.Complete:
            await self.send_card_response(turn_context, results)

        await self.conversation_state.save_changes(turn_context)

    async def send_card_response(self, turn_context: TurnContext, results: DialogTurnResult) -> None:
        """Send the card(s) matching a completed prompt's selection."""
        value = getattr(results.result, "value", None)
        self._logger.info("Selection parsed: %s", value)

        if value == VIDEO_CARD:
            await turn_context.send_activity(MessageFactory.attachment(create_video_card()))
        elif value == ALL_CARDS:
            await turn_context.send_activity(MessageFactory.carousel(create_all_cards()))
        else:
            self._logger.warning("No rich card matches selection %r", value)
            await turn_context.send_activity(INVALID_SELECTION_TEXT)

    # Internals -----------------------------------------------------------------
    async def _start_conversation(self, turn_context: TurnContext, dialog_context: DialogContext) -> None:
        if not self.settings.INTERACTIVE_PROMPT:
            await turn_context.send_activity(MessageFactory.attachment(create_video_card()))
            return

        await turn_context.send_activity(self.settings.WELCOME_TEXT)
        options = build_prompt_options(self.settings.PROMPT_TEXT, self.settings.RETRY_PROMPT_TEXT)
        await dialog_context.prompt(CARD_PROMPT_ID, options)
