#!/usr/bin/env python3
"""
Run script for the Voice Agent Gateway
"""
import uvicorn

from voice_gateway.config.settings import settings
from voice_gateway.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
