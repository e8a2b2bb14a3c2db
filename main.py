from contextlib import asynccontextmanager

from fastapi import FastAPI

from helpdesk.infrastructure.database import engine, initialize_database
from helpdesk.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application exposing the notification endpoints."""

    app = FastAPI(title="Helpdesk Notifications", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
