"""
Public news endpoints: paginated listing and detail in HTML, JSON or XML
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from loguru import logger

from newsdesk.api.dependencies import get_is_mobile, get_news_facade
from newsdesk.api.templating import templates
from newsdesk.domains.news import NewsFacade
from newsdesk.domains.news.renderers import (
    ResponseFormat,
    negotiate_format,
    render_json,
    render_json_item,
    render_xml,
    render_xml_item,
)

router = APIRouter(tags=["news"])


def _template_name(base: str, response_format: ResponseFormat) -> str:
    if response_format is ResponseFormat.MOBILE:
        return f"news/{base}.mobile.html"
    return f"news/{base}.html"


async def _news_index(
    request: Request,
    facade: NewsFacade,
    page: Optional[str],
    requested_format: Optional[str],
    is_mobile: bool,
) -> Response:
    response_format = negotiate_format(
        requested_format,
        request.headers.get("accept"),
        is_mobile=is_mobile,
    )
    logger.info(f"News index request: page={page}, format={response_format.value}")

    news_page = await facade.list_news(page)

    if response_format is ResponseFormat.JSON:
        return Response(content=render_json(news_page.items), media_type=response_format.media_type)
    if response_format is ResponseFormat.XML:
        return Response(content=render_xml(news_page.items), media_type=response_format.media_type)
    return templates.TemplateResponse(
        request,
        _template_name("index", response_format),
        {"news_page": news_page, "news_items": news_page.items},
    )


async def _news_show(
    request: Request,
    facade: NewsFacade,
    news_id: int,
    requested_format: Optional[str],
    is_mobile: bool,
) -> Response:
    response_format = negotiate_format(
        requested_format,
        request.headers.get("accept"),
        is_mobile=is_mobile,
    )
    logger.info(f"News show request: {news_id}, format={response_format.value}")

    news_item = await facade.get_news_item(news_id)

    if response_format is ResponseFormat.JSON:
        return Response(content=render_json_item(news_item), media_type=response_format.media_type)
    if response_format is ResponseFormat.XML:
        return Response(content=render_xml_item(news_item), media_type=response_format.media_type)
    return templates.TemplateResponse(
        request,
        _template_name("show", response_format),
        {"news_item": news_item},
    )


@router.get("/news", name="news_index")
async def list_news(
    request: Request,
    page: Optional[str] = Query(None, description="1-based page number"),
    format: Optional[str] = Query(None, description="html, json or xml"),
    facade: NewsFacade = Depends(get_news_facade),
    is_mobile: bool = Depends(get_is_mobile),
):
    """
    List news items newest first, one page at a time.
    """
    return await _news_index(request, facade, page, format, is_mobile)


@router.get("/news.{fmt}", name="news_index_formatted")
async def list_news_formatted(
    request: Request,
    fmt: str,
    page: Optional[str] = Query(None, description="1-based page number"),
    facade: NewsFacade = Depends(get_news_facade),
    is_mobile: bool = Depends(get_is_mobile),
):
    return await _news_index(request, facade, page, fmt, is_mobile)


@router.get("/news/{news_id:int}", name="news_show")
async def show_news(
    request: Request,
    news_id: int,
    format: Optional[str] = Query(None, description="html, json or xml"),
    facade: NewsFacade = Depends(get_news_facade),
    is_mobile: bool = Depends(get_is_mobile),
):
    """
    Show a single news item.
    """
    return await _news_show(request, facade, news_id, format, is_mobile)


@router.get("/news/{news_id:int}.{fmt}", name="news_show_formatted")
async def show_news_formatted(
    request: Request,
    news_id: int,
    fmt: str,
    facade: NewsFacade = Depends(get_news_facade),
    is_mobile: bool = Depends(get_is_mobile),
):
    return await _news_show(request, facade, news_id, fmt, is_mobile)
