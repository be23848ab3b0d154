"""
SQLite-based device secret store for Climate Monitor.

This module implements a read-mostly SQLite secret table
consulted asynchronously on every request.
"""

import aiosqlite
from climate_monitor.observability.logging_setup import get_logger

log = get_logger("climate_monitor.secrets")

# SQLite 스키마
SCHEMA = """
CREATE TABLE IF NOT EXISTS device_secrets (
    secret TEXT PRIMARY KEY
);
"""

class SQLiteSecretStore:
    """SQLite 기반 장치 비밀 저장소"""
    
    def __init__(self, path: str):
        """
        초기화합니다.
        
        Args:
            path: SQLite 데이터베이스 파일 경로
        """
        self.path = path
        log.info(f"SQLiteSecretStore 초기화: {path}")
    
    async def init(self) -> None:
        """데이터베이스를 초기화합니다."""
        async with aiosqlite.connect(self.path) as db:
            await db.executescript(SCHEMA)
            await db.commit()
        log.info("SQLiteSecretStore 스키마 초기화 완료")
    
    async def add(self, secret: str) -> bool:
        """
        비밀을 추가합니다.
        
        Args:
            secret: 추가할 비밀
            
        Returns:
            추가 여부 (이미 있으면 False)
        """
        if not secret:
            return False
        try:
            async with aiosqlite.connect(self.path) as db:
                await db.execute("INSERT INTO device_secrets (secret) VALUES (?)", (secret,))
                await db.commit()
                return True
        except aiosqlite.IntegrityError:
            # 이미 존재함
            return False
    
    async def is_authorized(self, secret: str) -> bool:
        """
        제시된 비밀이 테이블에 존재하는지 확인합니다.
        
        조회 오류 시 거부(fail closed)합니다.
        
        Args:
            secret: 장치가 제시한 공유 비밀
            
        Returns:
            허용 여부
        """
        if not isinstance(secret, str) or not secret:
            return False
        try:
            async with aiosqlite.connect(self.path) as db:
                cursor = await db.execute(
                    "SELECT 1 FROM device_secrets WHERE secret = ? LIMIT 1",
                    (secret,)
                )
                row = await cursor.fetchone()
                return row is not None
        except Exception as e:
            log.error(f"SQLiteSecretStore is_authorized 오류: {e}")
            return False
    
    async def get_count(self) -> int:
        """
        등록된 비밀 수를 반환합니다.
        
        Returns:
            비밀 수
        """
        try:
            async with aiosqlite.connect(self.path) as db:
                cursor = await db.execute("SELECT COUNT(*) FROM device_secrets")
                result = await cursor.fetchone()
                return result[0] if result else 0
        except Exception as e:
            log.error(f"SQLiteSecretStore get_count 오류: {e}")
            return 0
