from __future__ import annotations

from botbuilder.core import MessageFactory
from botbuilder.dialogs.choices import Choice
from botbuilder.dialogs.prompts import PromptOptions
from pydantic import BaseModel, ConfigDict


class CardChoice(BaseModel):
    """A label the user can pick plus the tokens accepted for it."""

    model_config = ConfigDict(frozen=True)

    label: str
    synonyms: tuple[str, ...] = ()

    def to_choice(self) -> Choice:
        return Choice(value=self.label, synonyms=list(self.synonyms))


VIDEO_CARD = "Video Card"
ALL_CARDS = "All Cards"

CARD_CHOICES: tuple[CardChoice, ...] = (
    CardChoice(label=VIDEO_CARD, synonyms=("7", "video", "hola")),
    CardChoice(label=ALL_CARDS, synonyms=("8", "all", "todas")),
)


def get_choices() -> list[Choice]:
    return [c.to_choice() for c in CARD_CHOICES]


def build_prompt_options(prompt_text: str, retry_text: str) -> PromptOptions:
    return PromptOptions(
        prompt=MessageFactory.text(prompt_text),
        retry_prompt=MessageFactory.text(retry_text),
        choices=get_choices(),
    )
