"""일정 텍스트 타임라인 변환 API."""

from fastapi import APIRouter, Depends

from app.api.dependencies import require_service_secret
from app.core.logger import get_logger
from app.schemas.timeline import Timeline, TimelineParseRequest
from app.services.timeline_service import parse

router = APIRouter(prefix="/api/v1", tags=["timeline"])
logger = get_logger(__name__)

TIMELINE_ERROR_EXAMPLES = {
    401: {
        "missing_secret": {
            "summary": "서비스 시크릿 누락",
            "description": "x-service-secret 헤더가 누락된 경우",
            "value": {"detail": "서비스 시크릿 헤더가 누락되었습니다."},
        },
        "invalid_secret": {
            "summary": "서비스 시크릿 불일치",
            "description": "x-service-secret 값이 올바르지 않은 경우",
            "value": {"detail": "유효하지 않은 서비스 시크릿입니다."},
        },
    },
    500: {
        "missing_config": {
            "summary": "서비스 시크릿 미설정",
            "description": "서버에 SERVICE_SECRET 설정이 없는 경우",
            "value": {"detail": "서비스 시크릿 설정이 없습니다."},
        }
    },
}


@router.post(
    "/timeline",
    response_model=Timeline,
    dependencies=[Depends(require_service_secret)],
    responses={
        401: {
            "description": "인증 실패",
            "content": {"application/json": {"examples": TIMELINE_ERROR_EXAMPLES[401]}},
        },
        500: {
            "description": "서버 오류",
            "content": {"application/json": {"examples": TIMELINE_ERROR_EXAMPLES[500]}},
        },
    },
)
def parse_timeline(request: TimelineParseRequest) -> Timeline:
    """일정 텍스트를 일차별 타임라인으로 변환한다."""
    timeline = parse(request.itinerary_text, request.trip)
    logger.info(
        "Timeline parsed: %d days, %d activities",
        len(timeline.days),
        sum(len(day.activities) for day in timeline.days),
    )
    return timeline
