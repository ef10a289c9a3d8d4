from fastapi import FastAPI

from guessing_game import __version__
from guessing_game.api.routes import router
from guessing_game.infra.logging_setup import configure_logging

# Run with: uvicorn guessing_game.main:app
app = FastAPI(title="guessing-game", version=__version__)
app.include_router(router)

configure_logging()


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "guessing-game", "version": __version__}
