"""Top-level routes: health check and short code redirects."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse

from ..api.schemas import HealthResponse

router = APIRouter()


@router.get(
    "/healthz",
    tags=["Health"],
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Storage is unavailable"}},
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = HealthResponse(**(await service.health()).to_dict())

    return JSONResponse(
        content=health.model_dump(),
        status_code=status.HTTP_200_OK if health.ok else status.HTTP_503_SERVICE_UNAVAILABLE,
    )


# Registered last: matches any single path segment not claimed above
@router.get("/{code}", include_in_schema=False)
async def redirect_to_url(request: Request, code: str):
    """Redirect to the original URL, counting the click."""
    service = request.app.state.service

    response = await service.record_click(code)

    if not response.ok:
        raise HTTPException(
            status_code=response.status,
            detail=response.error or "Link not found",
        )

    return RedirectResponse(url=response.data, status_code=status.HTTP_302_FOUND)
