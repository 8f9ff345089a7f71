from __future__ import annotations

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.models import NewsItem
from tests.utils.news_builders import create_news_item, create_news_items


BLANK_ERROR = "can&#39;t be blank"


async def _count(session: AsyncSession) -> int:
    result = await session.execute(select(func.count(NewsItem.id)))
    return result.scalar()


@pytest.mark.asyncio
async def test_index_lists_items_in_insertion_order(
    async_client: AsyncClient,
    async_session: AsyncSession,
) -> None:
    await create_news_items(async_session, ["First", "Second"])

    response = await async_client.get("/admin/news_items")

    assert response.status_code == 200
    assert response.text.index("First") < response.text.index("Second")


@pytest.mark.asyncio
async def test_new_renders_empty_form(async_client: AsyncClient) -> None:
    response = await async_client.get("/admin/news_items/new")

    assert response.status_code == 200
    assert 'action="http://testserver/admin/news_items"' in response.text
    assert "error_explanation" not in response.text


@pytest.mark.asyncio
async def test_create_redirects_to_index(async_client: AsyncClient, async_session: AsyncSession) -> None:
    response = await async_client.post(
        "/admin/news_items",
        data={"name": "Launch", "body": "We shipped it."},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "http://testserver/admin/news_items"
    assert await _count(async_session) == 1


@pytest.mark.asyncio
async def test_create_shows_notice_once_after_redirect(async_client: AsyncClient) -> None:
    await async_client.post("/admin/news_items", data={"name": "Launch", "body": "Text"})

    after_redirect = await async_client.get("/admin/news_items")
    next_visit = await async_client.get("/admin/news_items")

    assert "Created successfully." in after_redirect.text
    assert "Created successfully." not in next_visit.text


@pytest.mark.asyncio
async def test_create_with_blank_fields_redisplays_form(
    async_client: AsyncClient,
    async_session: AsyncSession,
) -> None:
    response = await async_client.post("/admin/news_items", data={"name": "", "body": ""})

    assert response.status_code == 422
    assert "error_explanation" in response.text
    assert f"Name {BLANK_ERROR}" in response.text
    assert f"Body {BLANK_ERROR}" in response.text
    assert await _count(async_session) == 0


@pytest.mark.asyncio
async def test_create_redisplay_keeps_submitted_values(async_client: AsyncClient) -> None:
    response = await async_client.post("/admin/news_items", data={"name": "Kept headline"})

    assert response.status_code == 422
    assert 'value="Kept headline"' in response.text
    assert f"Body {BLANK_ERROR}" in response.text
    assert f"Name {BLANK_ERROR}" not in response.text


@pytest.mark.asyncio
async def test_create_ignores_fields_outside_the_form(
    async_client: AsyncClient,
    async_session: AsyncSession,
) -> None:
    await async_client.post(
        "/admin/news_items",
        data={"name": "Launch", "body": "Text", "id": "500", "created_at": "1999-01-01"},
    )

    item = (await async_session.execute(select(NewsItem))).scalar_one()
    assert item.id != 500
    assert item.created_at.year != 1999


@pytest.mark.asyncio
async def test_show_and_edit(async_client: AsyncClient, async_session: AsyncSession) -> None:
    item = await create_news_item(async_session, name="Launch")

    shown = await async_client.get(f"/admin/news_items/{item.id}")
    edited = await async_client.get(f"/admin/news_items/{item.id}/edit")

    assert shown.status_code == 200
    assert "Launch" in shown.text
    assert edited.status_code == 200
    assert f'action="http://testserver/admin/news_items/{item.id}"' in edited.text
    assert 'value="Launch"' in edited.text


@pytest.mark.asyncio
async def test_update_redirects_to_index(async_client: AsyncClient, async_session: AsyncSession) -> None:
    item = await create_news_item(async_session, name="Old", body="Text")

    response = await async_client.put(
        f"/admin/news_items/{item.id}",
        data={"name": "New", "body": "Text"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "http://testserver/admin/news_items"
    await async_session.refresh(item)
    assert item.name == "New"

    index = await async_client.get("/admin/news_items")
    assert "Saved successfully." in index.text


@pytest.mark.asyncio
async def test_update_through_form_post(async_client: AsyncClient, async_session: AsyncSession) -> None:
    item = await create_news_item(async_session, name="Old", body="Text")

    response = await async_client.post(
        f"/admin/news_items/{item.id}",
        data={"name": "Posted", "body": "Text"},
    )

    assert response.status_code == 303
    await async_session.refresh(item)
    assert item.name == "Posted"


@pytest.mark.asyncio
async def test_failed_update_redisplays_edit_form(
    async_client: AsyncClient,
    async_session: AsyncSession,
) -> None:
    item = await create_news_item(async_session, name="Keep", body="Original")

    response = await async_client.patch(
        f"/admin/news_items/{item.id}",
        data={"name": "Changed", "body": ""},
    )

    assert response.status_code == 422
    assert "Editing news item" in response.text
    assert 'value="Changed"' in response.text
    assert f"Body {BLANK_ERROR}" in response.text
    await async_session.refresh(item)
    assert item.name == "Keep"
    assert item.body == "Original"


@pytest.mark.asyncio
async def test_missing_item_is_not_found(async_client: AsyncClient) -> None:
    shown = await async_client.get("/admin/news_items/999")
    edited = await async_client.get("/admin/news_items/999/edit")
    updated = await async_client.put("/admin/news_items/999", data={"name": "a", "body": "b"})

    assert shown.status_code == 404
    assert edited.status_code == 404
    assert updated.status_code == 404


@pytest.mark.asyncio
async def test_id_outside_column_range_is_not_found(async_client: AsyncClient) -> None:
    huge = "99999999999999999999"

    shown = await async_client.get(f"/admin/news_items/{huge}")
    edited = await async_client.get(f"/admin/news_items/{huge}/edit")
    put = await async_client.put(f"/admin/news_items/{huge}", data={"name": "a", "body": "b"})
    posted = await async_client.post(f"/admin/news_items/{huge}", data={"name": "a", "body": "b"})

    assert [r.status_code for r in (shown, edited, put, posted)] == [404, 404, 404, 404]


@pytest.mark.asyncio
async def test_create_without_any_fields_redisplays_form(
    async_client: AsyncClient,
    async_session: AsyncSession,
) -> None:
    response = await async_client.post("/admin/news_items")

    assert response.status_code == 422
    assert "New news item" in response.text
    assert await _count(async_session) == 0
