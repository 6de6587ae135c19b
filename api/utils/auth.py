# File: api/utils/auth.py
from typing import Optional
from fastapi import Header, HTTPException, status
from api.utils.config import Config
import logging

logger = logging.getLogger("score_cutter.api")


def _mask(key: str) -> str:
    return key[:4] + "..." + key[-4:] if len(key) > 8 else "***masked***"


async def get_api_key(x_api_key: Optional[str] = Header(None)):
    """Validate API key from header."""
    if not x_api_key:
        logger.warning("Request without API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API Key"
        )

    logger.debug(f"Received API key: {_mask(x_api_key)}")
    
    # Check against configured API key
    if x_api_key == Config.API_KEY:
        return {"key": x_api_key, "environment": Config.ENVIRONMENT}
    
    logger.warning("Invalid API key provided")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API Key"
    )

