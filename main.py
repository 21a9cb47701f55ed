# main.py

"""
Process entry point for the Server Time API.

Runs the application under Uvicorn on the configured host and port.
A failure to bind the port is fatal.
"""

# Config imports
from servertime.config import settings

# APP imports
from servertime.main import app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT, log_level=settings.LOG_LEVEL.lower())
