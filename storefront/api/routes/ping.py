import logging

from fastapi import APIRouter, HTTPException, Request

from storefront.dependencies.tickets import AdminUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ping", tags=["health"])


@router.get("", summary="Public health check")
async def ping() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/database", summary="Database connectivity check")
async def ping_database(request: Request, _: AdminUser) -> dict[str, str]:
    tester = getattr(request.app.state, "postgres_tester", None)
    if tester is None:
        raise HTTPException(status_code=503, detail="Database is not configured")
    try:
        await tester.test_connection()
    except Exception as exc:
        logger.warning("Database check failed: %s", exc)
        raise HTTPException(status_code=503, detail="Database is unavailable") from exc
    return {"status": "ok"}
