from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.routing import APIRoute

from app.errors import NotFoundError, register_error_handlers
from app.ids import UserIdGenerator
from app.logging_config import configure_logging, log_requests
from app.models import UserCreate, UserResponse, UserUpdate
from app.settings import Settings, get_settings
from app.store import User, UserStore

logger = logging.getLogger("user_service")

router = APIRouter()


def get_store(request: Request) -> UserStore:
    return request.app.state.store


def get_id_generator(request: Request) -> UserIdGenerator:
    return request.app.state.id_generator


@router.get("/health")
async def health():
    return {"status": "healthy"}


# Store-backed handlers are plain `def` so FastAPI runs them in its threadpool;
# the store's lock is a threading.Lock and must not be awaited on the loop.
@router.post("/users", status_code=201, response_model=UserResponse)
def create_user(
    user: UserCreate,
    store: UserStore = Depends(get_store),
    ids: UserIdGenerator = Depends(get_id_generator),
):
    record = User(
        id=ids.next_id(),
        name=user.name,
        email=user.email,
        created_at=datetime.now(timezone.utc).isoformat(),
    )
    store.insert(record)
    logger.info("Created user %s", record.id)
    return UserResponse.from_user(record)


@router.get("/users", response_model=List[UserResponse])
def list_users(store: UserStore = Depends(get_store)):
    return [UserResponse.from_user(u) for u in store.list()]


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str, store: UserStore = Depends(get_store)):
    record = store.get(user_id)
    if record is None:
        raise NotFoundError()
    return UserResponse.from_user(record)


@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(user_id: str, updates: UserUpdate, store: UserStore = Depends(get_store)):
    record = store.update(user_id, updates.model_dump())
    if record is None:
        raise NotFoundError()
    logger.info("Updated user %s", user_id)
    return UserResponse.from_user(record)


@router.delete("/users/{user_id}")
def delete_user(user_id: str, store: UserStore = Depends(get_store)):
    if not store.remove(user_id):
        raise NotFoundError()
    logger.info("Deleted user %s", user_id)
    return {"message": "User deleted successfully"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Routes:")
    for route in app.routes:
        if isinstance(route, APIRoute):
            logger.info("  %-6s %s", ",".join(sorted(route.methods)), route.path)
    yield
    logger.info("Shutting down with %d user(s) in memory", app.state.store.count())


def create_app(
    store: Optional[UserStore] = None,
    settings: Optional[Settings] = None,
    id_generator: Optional[UserIdGenerator] = None,
) -> FastAPI:
    """Build the service around an explicitly supplied (or fresh) store."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="User Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else UserStore()
    app.state.id_generator = id_generator or UserIdGenerator()

    app.middleware("http")(log_requests)
    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()
