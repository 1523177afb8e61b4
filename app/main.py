# app/main.py
import uvicorn

from app.api import create_app
from app.utils.settings import PORT, APP_ENV
from app.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info(f"Starting storefront API on port {PORT} ({APP_ENV})")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
