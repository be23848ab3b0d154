"""
Secret store selection for Climate Monitor.
"""

from typing import Union
from climate_monitor.settings import DeviceAuth
from .static import StaticSecretStore
from .sqlite_secrets import SQLiteSecretStore

def secret_store_from_settings(auth: DeviceAuth) -> Union[StaticSecretStore, SQLiteSecretStore]:
    """
    설정에 맞는 비밀 저장소를 생성합니다.
    
    secrets_db_path 가 있으면 SQLite 저장소, 없으면 고정 비밀 집합을 사용합니다.
    SQLite 스키마 생성(init)은 호출자가 담당합니다.
    """
    if auth.secrets_db_path:
        return SQLiteSecretStore(auth.secrets_db_path)
    return StaticSecretStore(auth.secrets)
