from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    database_echo: bool = False
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 12

    # Подпись cookie сессии (SessionMiddleware)
    session_secret: str

    # Workplace: секрет приложения для signed_request и токен для Graph API
    workplace_app_secret: str
    workplace_access_token: str = ""
    graph_api_url: str = "https://graph.facebook.com/v18.0"
    graph_api_timeout: float = 10.0

    log_level: str = "INFO"
    log_format: str = "plain"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
