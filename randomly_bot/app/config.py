import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

DEFAULT_WINNER_IMAGE_URLS = [
    "https://media.giphy.com/media/44gu1V41ejJni/giphy.gif",
    "https://media.giphy.com/media/xUOwGmG2pRfFZUmdVe/giphy.gif",
    "https://media.giphy.com/media/3o7bu57lYhUEFiYDSM/giphy.gif",
    "https://media.giphy.com/media/xTiTnz33weTH3K8Uvu/giphy.gif",
    "https://media.giphy.com/media/ZcUGu59vhBGgbBhh0n/giphy.gif",
]


def _parse_image_urls(raw):
    """Split a comma-separated URL list, falling back to the default pool."""
    if not raw:
        return list(DEFAULT_WINNER_IMAGE_URLS)
    urls = [url.strip() for url in raw.split(",") if url.strip()]
    return urls or list(DEFAULT_WINNER_IMAGE_URLS)


class Settings:
    # Bot Framework credentials (empty values run the adapter without auth)
    APP_ID = os.getenv("MICROSOFT_APP_ID", os.getenv("TEAMS_BOT_APP_ID", ""))
    APP_PASSWORD = os.getenv(
        "MICROSOFT_APP_PASSWORD",
        os.getenv("TEAMS_BOT_APP_PASSWORD", "")
    )
    TENANT_ID = os.getenv("TEAMS_BOT_TENANT_ID")

    # Card templates live under CONTENT_ROOT/Cards
    CONTENT_ROOT = Path(os.getenv("CONTENT_ROOT", str(Path(__file__).resolve().parent)))

    WINNER_IMAGE_URLS = _parse_image_urls(os.getenv("WINNER_IMAGE_URLS"))

    # Send a short apology when a turn fails instead of staying silent
    REPLY_ON_ERROR = os.getenv("REPLY_ON_ERROR", "false").lower() == "true"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3978))

settings = Settings()
