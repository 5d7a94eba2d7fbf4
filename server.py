import logging

import requests
import uvicorn
from fastapi import FastAPI, Response
from fastapi.staticfiles import StaticFiles

from services import rovers
from services.config import PORT, config

# ---------------------------
# Logging
# ---------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
)
logger = logging.getLogger("rover_proxy")

app = FastAPI(title="Mars Rover Photo Proxy", version="0.1.0")


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


@app.get("/rovers/{name}")
def rover_photos(name: str, sol: str = str(rovers.DEFAULT_SOL)):
    # the API key stays here; the dashboard only ever sees the photos body
    try:
        return Response(content=rovers.fetch_photos(name, sol), media_type="application/json")
    except (requests.RequestException, ValueError) as e:
        logger.error("error: %s", e)
        return Response()


public_dir = config.public_dir
if public_dir.is_dir():
    # mounted last so the API routes above win
    app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
else:
    logger.warning("Static directory %s not found; serving API routes only", public_dir)


if __name__ == "__main__":
    logger.info("App listening on port %d!", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)
