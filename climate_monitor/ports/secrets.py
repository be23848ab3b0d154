"""
Device secret lookup port interface.

This module defines the protocol for device secret validation.
"""

from typing import Awaitable, Protocol, Union

class DeviceSecretPort(Protocol):
    """장치 비밀 조회 포트 인터페이스"""
    
    def is_authorized(self, secret: str) -> Union[bool, Awaitable[bool]]:
        """
        제시된 비밀이 허용된 비밀 집합에 속하는지 확인합니다.
        
        동기 또는 비동기 구현 모두 허용됩니다.
        
        Args:
            secret: 장치가 제시한 공유 비밀
            
        Returns:
            허용 여부
        """
        ...
