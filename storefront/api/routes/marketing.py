from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse

from storefront.core.config import Settings, get_settings
from storefront.marketing.sections import BROCHURE_FILENAME, BROCHURE_URL, render_custom_orders_page

router = APIRouter(tags=["marketing"])

SettingsDep = Annotated[Settings, Depends(get_settings)]


@router.get("/custom-orders", response_class=HTMLResponse)
async def custom_orders_page(request: Request, settings: SettingsDep) -> HTMLResponse:
    html = render_custom_orders_page(
        pathname=request.url.path,
        measurement_id=settings.ga_measurement_id,
        title="Custom Apparel | THE LV8",
    )
    return HTMLResponse(html)


@router.get(BROCHURE_URL, response_class=FileResponse)
async def brochure(settings: SettingsDep) -> FileResponse:
    path = settings.brochure_path
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Brochure not found")
    return FileResponse(path, media_type="application/pdf", filename=BROCHURE_FILENAME)
