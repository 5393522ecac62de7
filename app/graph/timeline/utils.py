"""타임라인 그래프 공통 유틸리티."""

import re

_BULLET_PREFIX = re.compile(r"^[\s•·▪●◦>\-\*–—]+")
_TIME_PREFIX = re.compile(
    r"^\d{1,2}(?::\d{2}\s*(?:[AaPp][Mm]\b)?|\s*[AaPp][Mm]\b)"
    r"(?:\s*(?:[-–—~]|to)\s*\d{1,2}(?::\d{2})?\s*(?:[AaPp][Mm]\b)?)?"
    r"\s*[-–—:~]?\s*"
)
_NUMBERING_PREFIX = re.compile(r"^[\s•·▪●◦>\-\*–—\d\.\)\(:]+")
_PARENTHESIZED = re.compile(r"\([^)]*\)")
_DAY_HEADER = re.compile(r"^Day\s*(\d+)(?:\s*[:\-–—]|$)", re.IGNORECASE)
_STARTS_WITH_LETTER = re.compile(r"^[A-Za-z]")


def match_day_header(line: str) -> int | None:
    """`Day N:` 형식의 일차 헤더면 일차 번호를, 아니면 None을 반환합니다."""
    match = _DAY_HEADER.match((line or "").strip())
    return int(match.group(1)) if match else None


def clean_activity_text(line: str) -> str:
    """앞쪽 글머리표, 시각 표기, 번호, 구두점을 제거합니다."""
    text = _BULLET_PREFIX.sub("", (line or "").strip())
    text = _TIME_PREFIX.sub("", text)
    text = _NUMBERING_PREFIX.sub("", text)
    return text.strip()


def is_activity_candidate(cleaned_text: str) -> bool:
    """정제된 텍스트가 영문자로 시작하는지 반환합니다."""
    return bool(_STARTS_WITH_LETTER.match(cleaned_text or ""))


def strip_parenthesized(text: str) -> str:
    """괄호로 감싼 부분을 제거하고 양끝 공백을 정리합니다."""
    return _PARENTHESIZED.sub("", text or "").strip()


def build_activity_id(day_number: int, index_in_day: int) -> str:
    """일자 내에서 고유한 활동 ID를 생성합니다."""
    return f"activity-{day_number}-{index_in_day}"
