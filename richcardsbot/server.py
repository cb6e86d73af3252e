from __future__ import annotations

from botbuilder.core import (
    BotFrameworkAdapter,
    BotFrameworkAdapterSettings,
    ConversationState,
    MemoryStorage,
)
from botbuilder.schema import Activity
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from richcardsbot.bot import RichCardsBot
from richcardsbot.config import Settings, load_settings
from richcardsbot.logging_setup import get_logger, setup_logging


def build_adapter(settings: Settings) -> BotFrameworkAdapter:
    return BotFrameworkAdapter(
        BotFrameworkAdapterSettings(settings.MICROSOFT_APP_ID, settings.MICROSOFT_APP_PASSWORD)
    )


def build_bot(settings: Settings) -> RichCardsBot:
    conversation_state = ConversationState(MemoryStorage())
    return RichCardsBot(conversation_state, settings=settings)


def create_app(
    settings: Settings | None = None,
    *,
    bot: RichCardsBot | None = None,
    adapter: BotFrameworkAdapter | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    bot = bot or build_bot(settings)
    adapter = adapter or build_adapter(settings)
    logger = get_logger("server")

    app = FastAPI(title="Rich Cards Bot")

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @app.post("/api/messages")
    async def messages(request: Request) -> Response:
        if "application/json" not in request.headers.get("Content-Type", ""):
            raise HTTPException(status_code=415, detail="Expected application/json")

        body = await request.json()
        activity = Activity().deserialize(body)
        auth_header = request.headers.get("Authorization", "")

        try:
            response = await adapter.process_activity(activity, auth_header, bot.on_turn)
        except Exception:
            logger.exception("Turn failed for %s activity %s", activity.type, activity.id)
            raise

        if response:
            return JSONResponse(content=response.body, status_code=response.status)
        return Response(status_code=201)

    return app


def run(settings: Settings) -> None:
    import uvicorn

    get_logger("server").info("Listening on http://%s:%d/api/messages", settings.HOST, settings.PORT)
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        access_log=False,
        log_level="warning",
    )


def main() -> None:
    # Allow running via: python -m richcardsbot.server
    settings = load_settings()
    setup_logging(json_logs=settings.LOG_JSON, level=settings.LOG_LEVEL)
    run(settings)


if __name__ == "__main__":
    main()
