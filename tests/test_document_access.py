import pytest

from app.domains.documents.entities import Document, DocumentAccess


@pytest.mark.parametrize(
    "privacy, owner_id, user_id, expected",
    [
        ("public", 5, 7, True),
        ("restricted", 5, 7, False),
        ("restricted", 5, 5, True),
        ("public", 5, 5, True),
        ("team", 5, 7, True),
        ("", 5, 7, True),
    ],
)
def test_can_view(privacy, owner_id, user_id, expected):
    assert DocumentAccess(owner_id=owner_id, privacy=privacy).can_view(user_id) is expected


def test_for_document_prefers_loaded_owner():
    from app.domains.identity.entities import User

    owner = User(id=5, email="o@example.com", username="owner", password_hash="x")
    document = Document(id=2, name="d", privacy="restricted", owner_id=5, owner=owner)

    access = DocumentAccess.for_document(document)

    assert access.is_owner(5)
    assert not access.can_view(7)
