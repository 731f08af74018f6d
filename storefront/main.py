import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from storefront.api.routes import admin_tickets, custom_orders, marketing, ping, profiles, tickets
from storefront.core.config import get_settings
from storefront.core.logging import configure_logging, init_tracer, shutdown_tracer
from storefront.middleware import RequestContextMiddleware
from storefront.profiles.repository import ProfileRepository
from storefront.services.postgres import PostgresConnectionTester, to_asyncpg_dsn
from storefront.tickets.repository import TicketRepository
from storefront.tickets.service import TicketService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - executed by framework
    settings = get_settings()
    configure_logging(settings)
    tracer_provider = init_tracer(settings)
    app.state.tracer_provider = tracer_provider

    postgres_tester = PostgresConnectionTester(dsn=settings.postgres_dsn)
    app.state.postgres_tester = postgres_tester
    app.state.ticket_service = None
    app.state.profile_repository = None

    db_engine = create_async_engine(to_asyncpg_dsn(settings.postgres_dsn), future=True)
    session_factory = async_sessionmaker(db_engine, expire_on_commit=False)
    ticket_repository = TicketRepository(session_factory, engine=db_engine)
    profile_repository = ProfileRepository(session_factory)
    try:
        await ticket_repository.ensure_schema()
    except Exception:
        logger.exception("Database initialisation failed; ticket routes are disabled")
    else:
        app.state.ticket_service = TicketService(ticket_repository, profile_repository)
        app.state.profile_repository = profile_repository
    try:
        yield
    finally:
        await db_engine.dispose()
        await postgres_tester.close()
        shutdown_tracer(tracer_provider)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(ping.router)
    app.include_router(tickets.router)
    app.include_router(admin_tickets.router)
    app.include_router(profiles.router)
    app.include_router(custom_orders.router)
    app.include_router(marketing.router)
    return app


app = create_app()
