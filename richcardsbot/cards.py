"""Builders for the rich card attachments the bot can send.

Every builder returns a brand new ``Attachment`` so callers are free to mutate
what they get back. The card contents are fixed.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from botbuilder.core import CardFactory
from botbuilder.schema import (
    ActionTypes,
    AnimationCard,
    Attachment,
    AudioCard,
    CardAction,
    CardImage,
    Fact,
    HeroCard,
    MediaUrl,
    ReceiptCard,
    ReceiptItem,
    SigninCard,
    ThumbnailCard,
    ThumbnailUrl,
    VideoCard,
)

BOT_FRAMEWORK_LOGO = (
    "https://sec.ch9.ms/ch9/7ff5/e07cfef0-aa3b-40bb-9baa-7c9ef8ff7ff5/"
    "buildreactionbotframework_960.jpg"
)
BOT_FRAMEWORK_DOCS = "https://docs.microsoft.com/bot-framework"


class CardKind(str, Enum):
    VIDEO = "video"
    ANIMATION = "animation"
    AUDIO = "audio"
    HERO = "hero"
    RECEIPT = "receipt"
    SIGNIN = "signin"
    THUMBNAIL = "thumbnail"


def create_video_card() -> Attachment:
    return CardFactory.video_card(
        VideoCard(
            title="Bienvenido al Tribunal",
            media=[MediaUrl(url="https://www.youtube.com/watch?v=7mYgtd2rifY")],
        )
    )


def create_animation_card() -> Attachment:
    return CardFactory.animation_card(
        AnimationCard(
            title="Microsoft Bot Framework",
            subtitle="Animation Card",
            image=ThumbnailUrl(url="https://docs.microsoft.com/en-us/bot-framework/media/how-it-works/architecture-resize.png"),
            media=[MediaUrl(url="http://i.giphy.com/Ki55RUbOV5njy.gif")],
        )
    )


def create_audio_card() -> Attachment:
    return CardFactory.audio_card(
        AudioCard(
            title="I am your father",
            subtitle="Star Wars: Episode V - The Empire Strikes Back",
            text=(
                "The Empire Strikes Back (also known as Star Wars: Episode V - The Empire "
                "Strikes Back) is a 1980 American epic space opera film directed by Irvin "
                "Kershner."
            ),
            image=ThumbnailUrl(url="https://upload.wikimedia.org/wikipedia/en/3/3c/SW_-_Empire_Strikes_Back.jpg"),
            media=[MediaUrl(url="http://www.wavlist.com/movies/004/father.wav")],
            buttons=[
                CardAction(
                    type=ActionTypes.open_url,
                    title="Read more",
                    value="https://en.wikipedia.org/wiki/The_Empire_Strikes_Back",
                )
            ],
        )
    )


def create_hero_card() -> Attachment:
    return CardFactory.hero_card(
        HeroCard(
            title="BotFramework Hero Card",
            images=[CardImage(url=BOT_FRAMEWORK_LOGO)],
            buttons=[
                CardAction(type=ActionTypes.open_url, title="Get started", value=BOT_FRAMEWORK_DOCS)
            ],
        )
    )


def create_receipt_card() -> Attachment:
    return CardFactory.receipt_card(
        ReceiptCard(
            title="John Doe",
            facts=[
                Fact(key="Order Number", value="1234"),
                Fact(key="Payment Method", value="VISA 5555-****"),
            ],
            items=[
                ReceiptItem(
                    title="Data Transfer",
                    price="$38.45",
                    quantity="368",
                    image=CardImage(url="https://github.com/amido/azure-vector-icons/raw/master/renders/traffic-manager.png"),
                ),
                ReceiptItem(
                    title="App Service",
                    price="$45.00",
                    quantity="720",
                    image=CardImage(url="https://github.com/amido/azure-vector-icons/raw/master/renders/cloud-service.png"),
                ),
            ],
            tax="$7.50",
            total="$90.95",
            buttons=[
                CardAction(
                    type=ActionTypes.open_url,
                    title="More information",
                    value="https://azure.microsoft.com/en-us/pricing/details/bot-service/",
                )
            ],
        )
    )


def create_signin_card() -> Attachment:
    return CardFactory.signin_card(
        SigninCard(
            text="BotFramework Sign-in Card",
            buttons=[
                CardAction(type=ActionTypes.signin, title="Sign-in", value="https://login.microsoftonline.com")
            ],
        )
    )


def create_thumbnail_card() -> Attachment:
    return CardFactory.thumbnail_card(
        ThumbnailCard(
            title="BotFramework Thumbnail Card",
            images=[CardImage(url=BOT_FRAMEWORK_LOGO)],
            buttons=[
                CardAction(type=ActionTypes.open_url, title="Get started", value=BOT_FRAMEWORK_DOCS)
            ],
        )
    )


_BUILDERS: dict[CardKind, Callable[[], Attachment]] = {
    CardKind.VIDEO: create_video_card,
    CardKind.ANIMATION: create_animation_card,
    CardKind.AUDIO: create_audio_card,
    CardKind.HERO: create_hero_card,
    CardKind.RECEIPT: create_receipt_card,
    CardKind.SIGNIN: create_signin_card,
    CardKind.THUMBNAIL: create_thumbnail_card,
}


def build_card(kind: CardKind | str) -> Attachment:
    try:
        builder = _BUILDERS[CardKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown card kind: {kind!r}") from None
    return builder()


def create_all_cards() -> list[Attachment]:
    """Cards shown in the "All Cards" carousel, video both first and last."""
    return [
        create_video_card(),
        create_animation_card(),
        create_audio_card(),
        create_hero_card(),
        create_receipt_card(),
        create_signin_card(),
        create_thumbnail_card(),
        create_video_card(),
    ]


def attachment_to_dict(attachment: Attachment) -> dict[str, Any]:
    content = attachment.content
    if hasattr(content, "serialize"):
        content = content.serialize()
    return {"contentType": attachment.content_type, "content": content}
