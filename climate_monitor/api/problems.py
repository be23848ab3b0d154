"""
Problem details (RFC 7807) responses for Climate Monitor.
"""

from typing import Dict, List, Optional
from fastapi.responses import JSONResponse

PROBLEM_JSON = "application/problem+json"

def problem(status: int, title: str, detail: Optional[str] = None) -> JSONResponse:
    """단순 문제 상세 응답을 생성합니다."""
    body = {"status": status, "title": title}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(body, status_code=status, media_type=PROBLEM_JSON)

def validation_problem(errors: Dict[str, List[str]], title: str,
                       detail: Optional[str] = None, status: int = 400) -> JSONResponse:
    """필드별 검증 오류를 담은 문제 상세 응답을 생성합니다."""
    body = {"status": status, "title": title, "errors": errors}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(body, status_code=status, media_type=PROBLEM_JSON)

def field_key(loc) -> str:
    """pydantic 오류 위치를 응답 키로 변환합니다 (firmwareVersion -> FirmwareVersion)."""
    # JSON 디코딩 오류 위치는 ("body", 오프셋) 형태
    parts = [p for p in loc if isinstance(p, str) and p != "body"]
    if not parts:
        return "body"
    name = parts[0]
    return name[:1].upper() + name[1:]
