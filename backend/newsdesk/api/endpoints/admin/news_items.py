"""
Admin screens for managing news items.

Access control is expected to be enforced in front of this router.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from loguru import logger

from newsdesk.api.dependencies import get_news_facade
from newsdesk.api.templating import templates
from newsdesk.domains.news import NewsFacade
from newsdesk.domains.news.dtos import SubmissionResult
from newsdesk.models.news import NewsItem, NewsItemInput

router = APIRouter(prefix="/admin/news_items", tags=["admin"])

TEMPLATE_DIR = "admin/news_items"


def news_item_form(
    name: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
) -> NewsItemInput:
    return NewsItemInput(name=name, body=body)


def _render(request: Request, template: str, news_item: NewsItem, status_code: int = status.HTTP_200_OK):
    return templates.TemplateResponse(
        request,
        f"{TEMPLATE_DIR}/{template}.html",
        {"news_item": news_item},
        status_code=status_code,
    )


def _respond(request: Request, result: SubmissionResult):
    if result.succeeded:
        request.session["notice"] = result.notice
        return RedirectResponse(
            url=request.url_for("admin_news_items_index"),
            status_code=status.HTTP_303_SEE_OTHER,
        )
    # Form redisplayed with the submitted values and their errors
    return _render(
        request,
        result.form,
        result.item,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


@router.get("", name="admin_news_items_index")
async def index(
    request: Request,
    facade: NewsFacade = Depends(get_news_facade),
):
    news_items = await facade.list_all_news()
    notice = request.session.pop("notice", None)
    return templates.TemplateResponse(
        request,
        f"{TEMPLATE_DIR}/index.html",
        {"news_items": news_items, "notice": notice},
    )


@router.get("/new", name="admin_news_items_new")
async def new(
    request: Request,
    facade: NewsFacade = Depends(get_news_facade),
):
    return _render(request, "new", facade.new_news_item())


@router.post("", name="admin_news_items_create")
async def create(
    request: Request,
    data: NewsItemInput = Depends(news_item_form),
    facade: NewsFacade = Depends(get_news_facade),
):
    logger.info("Create news item request")
    result = await facade.create_news(data)
    return _respond(request, result)


@router.get("/{news_id:int}", name="admin_news_items_show")
async def show(
    request: Request,
    news_id: int,
    facade: NewsFacade = Depends(get_news_facade),
):
    news_item = await facade.get_news_item(news_id)
    return _render(request, "show", news_item)


@router.get("/{news_id:int}/edit", name="admin_news_items_edit")
async def edit(
    request: Request,
    news_id: int,
    facade: NewsFacade = Depends(get_news_facade),
):
    news_item = await facade.get_news_item(news_id)
    return _render(request, "edit", news_item)


@router.api_route("/{news_id:int}", methods=["PUT", "PATCH"], name="admin_news_items_update")
async def update(
    request: Request,
    news_id: int,
    data: NewsItemInput = Depends(news_item_form),
    facade: NewsFacade = Depends(get_news_facade),
):
    logger.info(f"Update news item request: {news_id}")
    result = await facade.update_news(news_id, data)
    return _respond(request, result)


@router.post("/{news_id:int}", name="admin_news_items_update_form")
async def update_from_form(
    request: Request,
    news_id: int,
    data: NewsItemInput = Depends(news_item_form),
    facade: NewsFacade = Depends(get_news_facade),
):
    """
    HTML forms can only POST; this mirrors the PUT/PATCH route.
    """
    logger.info(f"Update news item request (form post): {news_id}")
    result = await facade.update_news(news_id, data)
    return _respond(request, result)
