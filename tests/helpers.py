import base64
import hashlib
import hmac
import json

from app.core.config import settings

PASSWORD = "Secret123"


def make_signed_request(payload: dict, secret: str = None) -> str:
    """Формирует signed_request так же, как это делает Workplace"""
    secret = secret or settings.workplace_app_secret
    body = {"algorithm": "HMAC-SHA256", **payload}
    encoded_payload = base64.urlsafe_b64encode(json.dumps(body).encode()).decode().rstrip("=")
    signature = hmac.new(secret.encode(), encoded_payload.encode(), hashlib.sha256).digest()
    encoded_signature = base64.urlsafe_b64encode(signature).decode().rstrip("=")
    return f"{encoded_signature}.{encoded_payload}"


async def login(client, email, password=PASSWORD):
    response = await client.post("/login", data={"email": email, "password": password})
    assert response.status_code == 302
    return response
