"""API routes implementation."""

from typing import Optional

from fastapi import APIRouter, Request, HTTPException, Query, status

from .schemas import (
    CreateLinkBody,
    LinkResponse,
    LinkListResponse,
    LinkStatsResponse,
    ClickHistoryPointResponse,
    DeleteResponse,
    ClickResponse,
    ErrorResponse,
)
from tinylink.models import ApiResponse, Link
from tinylink.common.urls import build_base_url, build_short_url, get_path_prefix

router = APIRouter()


def _raise_for_error(response: ApiResponse) -> None:
    """Surface a failed service response as an HTTP error with the same status."""
    if not response.ok:
        raise HTTPException(
            status_code=response.status,
            detail=response.error or "Request failed",
        )


def _link_response(request: Request, link: Link) -> LinkResponse:
    config = request.app.state.config
    headers = dict(request.headers)
    base_url = build_base_url(
        headers=headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    short_url = build_short_url(
        short_code=link.code,
        base_url=base_url,
        path_prefix=get_path_prefix(headers, config.path_prefix),
    )
    return LinkResponse.from_link(link, short_url)


@router.post(
    "/links",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or custom code"},
        409: {"model": ErrorResponse, "description": "Short code already in use"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
    },
    summary="Create short link",
    description="Create a short link. Optionally provide a custom short code.",
)
async def create_link(request: Request, body: CreateLinkBody):
    service = request.app.state.service

    response = await service.create_link(body.url, body.code)
    _raise_for_error(response)

    return _link_response(request, response.data)


@router.get(
    "/links",
    response_model=LinkListResponse,
    summary="List links",
    description="List links newest first. `q` filters by code or URL, case-insensitive.",
)
async def list_links(request: Request, q: Optional[str] = Query(None, description="Search text")):
    service = request.app.state.service

    response = await service.list_links(q)
    _raise_for_error(response)

    links = [_link_response(request, link) for link in response.data]
    return LinkListResponse(count=len(links), links=links)


@router.get(
    "/links/{code}",
    response_model=LinkResponse,
    responses={404: {"model": ErrorResponse, "description": "Link not found"}},
    summary="Get link",
)
async def get_link(request: Request, code: str):
    service = request.app.state.service

    response = await service.get_link(code)
    _raise_for_error(response)

    return _link_response(request, response.data)


@router.get(
    "/links/{code}/stats",
    response_model=LinkStatsResponse,
    responses={404: {"model": ErrorResponse, "description": "Link not found"}},
    summary="Get link statistics",
    description="Click totals plus a simulated per-day breakdown.",
)
async def get_link_stats(request: Request, code: str):
    service = request.app.state.service

    response = await service.get_link_stats(code)
    _raise_for_error(response)

    return LinkStatsResponse(
        link=_link_response(request, response.data["link"]),
        history=[
            ClickHistoryPointResponse(**point.to_dict())
            for point in response.data["history"]
        ],
    )


@router.delete(
    "/links/{code}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse, "description": "Link not found"}},
    summary="Delete link",
)
async def delete_link(request: Request, code: str):
    service = request.app.state.service

    response = await service.delete_link(code)
    _raise_for_error(response)

    return DeleteResponse(code=code, deleted=True)


@router.post(
    "/links/{code}/clicks",
    response_model=ClickResponse,
    responses={404: {"model": ErrorResponse, "description": "Link not found"}},
    summary="Record click",
    description="Count one click and return the destination without redirecting.",
)
async def record_click(request: Request, code: str):
    service = request.app.state.service

    response = await service.record_click(code)
    _raise_for_error(response)

    return ClickResponse(code=code, original_url=response.data)
