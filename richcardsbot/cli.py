from __future__ import annotations

import asyncio
import json

import typer
from botbuilder.core import ConversationState, MemoryStorage

from richcardsbot.adapters.console import ConsoleAdapter
from richcardsbot.bot import RichCardsBot
from richcardsbot.cards import CardKind, attachment_to_dict, build_card
from richcardsbot.choices import CARD_CHOICES
from richcardsbot.config import load_settings
from richcardsbot.logging_setup import setup_logging

app = typer.Typer(help="RichCardsBot - Bot Framework rich card sample")

_EXIT_WORDS = {"exit", "quit"}


@app.callback()
def main(json_logs: bool = typer.Option(False, "--json-logs", help="Enable JSON logs")):
    settings = load_settings()
    setup_logging(json_logs=json_logs or settings.LOG_JSON, level=settings.LOG_LEVEL)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host"),
    port: int | None = typer.Option(None, "--port"),
):
    """Serve the Bot Framework messaging endpoint over HTTP."""
    from richcardsbot.server import run

    settings = load_settings()
    if host is not None:
        settings.HOST = host
    if port is not None:
        settings.PORT = port
    typer.echo(f"Listening on http://{settings.HOST}:{settings.PORT}/api/messages")
    run(settings)


@app.command()
def chat(
    interactive: bool | None = typer.Option(
        None, "--interactive/--no-interactive", help="Prompt for a card instead of sending the default one"
    ),
):
    """Talk to the bot in the terminal. Type 'exit' to leave."""
    settings = load_settings()
    if interactive is not None:
        settings.INTERACTIVE_PROMPT = interactive

    bot = RichCardsBot(ConversationState(MemoryStorage()), settings=settings)
    adapter = ConsoleAdapter()
    asyncio.run(_chat_loop(adapter, bot))


async def _chat_loop(adapter: ConsoleAdapter, bot: RichCardsBot) -> None:
    while True:
        try:
            text = input("> ").strip()
        except EOFError:
            break
        if text.lower() in _EXIT_WORDS:
            break
        if text:
            await adapter.process_text(text, bot.on_turn)


@app.command()
def choices():
    """Print the card choices offered by the prompt."""
    typer.echo(json.dumps([c.model_dump() for c in CARD_CHOICES], indent=2, ensure_ascii=False))


@app.command()
def card(kind: str = typer.Argument(..., help="|".join(k.value for k in CardKind))):
    """Print the wire JSON of one card attachment."""
    try:
        attachment = build_card(kind.lower())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None
    typer.echo(json.dumps(attachment_to_dict(attachment), indent=2, ensure_ascii=False))
