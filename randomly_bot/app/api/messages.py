"""
Microsoft Teams Bot Framework webhook endpoint for Randomly.
Authenticates incoming activities with the Bot Framework adapter and runs
them through the RandomlyBot turn handler.
"""
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, Response

# Microsoft Bot Framework imports
from botbuilder.core import (
    BotFrameworkAdapter,
    BotFrameworkAdapterSettings,
    ConversationState,
    MemoryStorage,
    MessageFactory,
    TurnContext
)
from botbuilder.schema import Activity

from randomly_bot.app.bots.randomly_bot import RandomlyBot
from randomly_bot.app.config import settings
from randomly_bot.app.services.card_reader import CardTemplate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["messages"])

ERROR_TEXT = "Sorry, something went wrong picking someone. Please try again."


def create_on_turn_error(conversation_state: ConversationState, reply_on_error: bool):
    """Build the adapter's turn error handler."""

    async def on_turn_error(turn_context: TurnContext, error: Exception):
        conversation_id = turn_context.activity.conversation.id if turn_context.activity.conversation else None
        logger.error(
            f"❌ Turn failed in conversation {conversation_id}: {type(error).__name__}: {error}",
            exc_info=error
        )

        if reply_on_error:
            try:
                await turn_context.send_activity(MessageFactory.text(ERROR_TEXT))
            except Exception as send_error:
                logger.error(f"Failed to send error message: {send_error}")

        # Drop anything the failed turn may have left in conversation state
        await conversation_state.delete(turn_context)

    return on_turn_error


# Bot Framework Adapter setup
adapter_settings = BotFrameworkAdapterSettings(
    app_id=settings.APP_ID,
    app_password=settings.APP_PASSWORD,
    channel_auth_tenant=settings.TENANT_ID  # Tenant ID for SingleTenant apps
)
adapter = BotFrameworkAdapter(adapter_settings)

conversation_state = ConversationState(MemoryStorage())
adapter.on_turn_error = create_on_turn_error(conversation_state, settings.REPLY_ON_ERROR)

bot = RandomlyBot(
    conversation_state=conversation_state,
    card_template=CardTemplate.announcement(settings.CONTENT_ROOT),
    image_pool=settings.WINNER_IMAGE_URLS
)


@router.post("/messages")
async def messages(request: Request):
    """
    Bot Framework webhook endpoint.
    Handles all incoming Teams activities; auth is enforced by the adapter.
    """
    if "application/json" not in request.headers.get("Content-Type", ""):
        return Response(status_code=415)

    try:
        body = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected malformed activity body: {e}")
        return JSONResponse(content={"error": f"Invalid JSON body: {e}"}, status_code=400)

    activity = Activity().deserialize(body)
    auth_header = request.headers.get("Authorization", "")

    logger.info(f"Received activity type={activity.type} id={activity.id}")

    try:
        invoke_response = await adapter.process_activity(activity, auth_header, bot.on_turn)
    except PermissionError as e:
        logger.warning(f"Rejected unauthorized activity: {e}")
        raise HTTPException(status_code=401, detail="Unauthorized")

    if invoke_response:
        return JSONResponse(content=invoke_response.body, status_code=invoke_response.status)

    return JSONResponse(content={"status": "ok"}, status_code=200)
