import os


def get_settings_module() -> str:
    # APP_ENV로 설정 모듈 선택 (기본값: development)
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    # everything else runs with development settings
    return "config.development"
