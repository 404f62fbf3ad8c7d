import os


def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def env_flag(name: str, default: bool) -> bool:
    return bool(int(os.getenv(name, "1" if default else "0")))


def env_weekdays(name: str) -> tuple:
    """Comma-separated weekday numbers (Monday=0 .. Sunday=6), e.g. "6" or "5,6"."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return ()
    days = tuple(int(part) for part in raw.split(",") if part.strip())
    for d in days:
        if not 0 <= d <= 6:
            raise ValueError(f"{name}: weekday out of range: {d}")
    return days
