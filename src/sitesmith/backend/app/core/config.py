from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')

    # project store
    PROJECT_STORE_PATH: str = '.store.json'

    # object store
    OBJECT_STORE_BACKEND: Literal['filesystem', 'http'] = 'filesystem'
    OBJECT_STORE_DIR: str = './object_store'
    OBJECT_STORE_URL: str = ''
    OBJECT_STORE_API_KEY: str = ''
    OBJECT_STORE_BUCKET: str = 'sites'
    OBJECT_KEY_PREFIX: str = 'website'

    # domain registry
    DOMAIN_REGISTRY_BACKEND: Literal['local', 'http'] = 'local'
    DOMAIN_REGISTRY_URL: str = 'https://laman.ai'
    DOMAIN_REGISTRY_API_KEY: str = ''
    DOMAIN_SUFFIX: str = 'laman.ai'

    # generation
    OPENAI_API_KEY: str = ''
    GENERATION_MODEL: str = 'gpt-4.1'
    CAPTION_MODEL: str = 'gpt-4.1-nano'
    GENERATION_TIMEOUT_S: float = 300.0

    UPSTREAM_TIMEOUT_S: float = 30.0
    LOG_LEVEL: str = 'INFO'


settings = Settings()
