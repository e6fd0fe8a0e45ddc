#!/usr/bin/env python3
"""Run the API server."""

import uvicorn

from settings import HOST, LOG_LEVEL, PORT
from settings.logging import setup_logging
from web.app import create_app

if __name__ == "__main__":
    setup_logging(LOG_LEVEL)
    uvicorn.run(create_app(), host=HOST, port=PORT, log_config=None)
