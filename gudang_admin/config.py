"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Backend API
    backend_base_url: str = "http://localhost:8080"
    backend_timeout: float = 30.0  # seconds
    backend_login_path: str = "/api/auth/login"
    backend_items_path: str = "/api/barang/viewall"
    backend_item_detail_path: str = "/api/barang/{item_id}"
    backend_users_path: str = "/api/user/all"
    backend_warehouses_path: str = "/api/gudang/viewall"
    backend_create_warehouse_path: str = "/api/gudang/add"
    backend_revenue_path: str = "/api/penerimaan/viewall"

    # Role used to filter users eligible as warehouse supervisor
    supervisor_role: str = "kepala_gudang"

    # Session
    session_cookie_name: str = "gudang_session"
    session_ttl_minutes: int = 480

    # UI behaviour
    redirect_delay_seconds: int = 2
    show_fetch_errors: bool = False

    # Application
    debug: bool = False
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000


settings = Settings()
