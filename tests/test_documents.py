"""Список, создание и просмотр документов."""
from datetime import datetime, timedelta

from sqlalchemy import select

from app.db.models import Document as DocumentModel

from helpers import login


async def _create_document(session, owner, name, privacy, updated_at=None):
    document = DocumentModel(
        name=name,
        content=f"Content of {name}",
        privacy=privacy,
        owner_id=owner.id,
        updated_at=updated_at or datetime.utcnow(),
    )
    session.add(document)
    await session.commit()
    await session.refresh(document)
    return document


async def test_documents_requires_login(client):
    res = await client.get("/documents")
    assert res.status_code == 302
    assert res.headers["location"] == "/login"


async def test_list_shows_own_and_public_documents(client, test_db, alice, bob):
    """Видны свои документы и публичные чужие, остальные скрыты"""
    await _create_document(test_db, alice, "alice-private", "restricted")
    await _create_document(test_db, bob, "bob-public", "public")
    await _create_document(test_db, bob, "bob-private", "restricted")
    await _create_document(test_db, bob, "bob-team", "team")

    await login(client, "alice@example.com")
    res = await client.get("/documents")

    assert res.status_code == 200
    assert "alice-private" in res.text
    assert "bob-public" in res.text
    assert "bob-private" not in res.text
    # Неизвестное значение privacy не попадает в список: он строится по owner/public
    assert "bob-team" not in res.text


async def test_list_is_ordered_by_updated_at_desc(client, test_db, alice):
    now = datetime.utcnow()
    await _create_document(test_db, alice, "oldest-doc", "public", now - timedelta(days=2))
    await _create_document(test_db, alice, "newest-doc", "public", now)
    await _create_document(test_db, alice, "middle-doc", "public", now - timedelta(days=1))

    await login(client, "alice@example.com")
    res = await client.get("/documents")

    text = res.text
    assert text.index("newest-doc") < text.index("middle-doc") < text.index("oldest-doc")


async def test_create_form_renders(client, alice):
    await login(client, "alice@example.com")
    res = await client.get("/document/create")
    assert res.status_code == 200
    assert 'name="privacy"' in res.text


async def test_create_document_redirects_and_persists(client, test_db, alice):
    await login(client, "alice@example.com")
    res = await client.post(
        "/document/create",
        data={"name": "  Plan  ", "content": "Q3 goals", "privacy": "public"},
    )

    assert res.status_code == 302
    assert res.headers["location"] == "/documents"

    result = await test_db.execute(select(DocumentModel).where(DocumentModel.owner_id == alice.id))
    document = result.scalar_one()
    assert document.name == "Plan"
    assert document.content == "Q3 goals"
    assert document.privacy == "public"


async def test_create_document_rejects_unknown_privacy(client, test_db, alice):
    await login(client, "alice@example.com")
    res = await client.post(
        "/document/create",
        data={"name": "Plan", "content": "", "privacy": "everyone"},
    )

    assert res.status_code == 400
    result = await test_db.execute(select(DocumentModel))
    assert result.scalars().all() == []


async def test_view_public_document_of_other_user(client, test_db, alice, bob):
    """Публичный документ чужого пользователя открывается"""
    document = await _create_document(test_db, bob, "bob-public", "public")

    await login(client, "alice@example.com")
    res = await client.get(f"/document/{document.id}")

    assert res.status_code == 200
    assert "Content of bob-public" in res.text


async def test_view_restricted_document_of_other_user_is_forbidden(client, test_db, alice, bob):
    document = await _create_document(test_db, bob, "bob-private", "restricted")

    await login(client, "alice@example.com")
    res = await client.get(f"/document/{document.id}")

    assert res.status_code == 403
    assert "This document is private." in res.text
    assert "Content of bob-private" not in res.text


async def test_owner_can_view_restricted_document(client, test_db, bob):
    document = await _create_document(test_db, bob, "bob-private", "restricted")

    await login(client, "bob@example.com")
    res = await client.get(f"/document/{document.id}")

    assert res.status_code == 200
    assert "Content of bob-private" in res.text


async def test_unknown_privacy_value_is_viewable(client, test_db, alice, bob):
    document = await _create_document(test_db, bob, "bob-team", "team")

    await login(client, "alice@example.com")
    res = await client.get(f"/document/{document.id}")

    assert res.status_code == 200


async def test_view_missing_document_returns_404(client, alice):
    await login(client, "alice@example.com")
    res = await client.get("/document/999")

    assert res.status_code == 404
    assert "Document does not exist" in res.text


async def test_view_non_numeric_document_id_returns_404(client, alice):
    await login(client, "alice@example.com")
    res = await client.get("/document/abc")

    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/html")
    assert "Document does not exist" in res.text


async def test_create_document_without_name_renders_error_page(client, test_db, alice):
    await login(client, "alice@example.com")
    res = await client.post("/document/create", data={"content": "Q3 goals", "privacy": "public"})

    assert res.status_code == 400
    assert res.headers["content-type"].startswith("text/html")
    assert "Bad request" in res.text
    result = await test_db.execute(select(DocumentModel))
    assert result.scalars().all() == []
