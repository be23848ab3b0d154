"""
HTTP server runner for Climate Monitor.

This module provides a simple way to run the FastAPI server
hosting the reading endpoint and the observability endpoints.
"""

import uvicorn
from typing import Optional
from fastapi import FastAPI
from climate_monitor.settings import Settings
from climate_monitor.observability.logging_setup import setup_logging_dev, get_logger

def run_http_server(settings: Settings, app: Optional[FastAPI] = None,
                    host: Optional[str] = None, port: Optional[int] = None):
    """
    HTTP 서버를 실행합니다.
    
    Args:
        settings: 애플리케이션 설정
        app: 실행할 FastAPI 앱 (None이면 설정으로 생성)
        host: 바인딩할 호스트 (None이면 설정에서 가져옴)
        port: 바인딩할 포트 (None이면 설정에서 가져옴)
    """
    from climate_monitor.api.app import create_app

    # 로거 설정
    setup_logging_dev(settings.observability.log_level)
    log = get_logger("climate_monitor.observability")
    
    host = host or settings.observability.http_host
    if port is None:
        port = settings.observability.http_port
    
    if app is None:
        app = create_app(settings)
    
    log.info(f"HTTP 서버 시작 중 host:{host} port:{port}")
    
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=settings.observability.log_level.lower(),
        access_log=True
    )
