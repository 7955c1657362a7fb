class WildwatchError(Exception):
    """Base class for service errors."""
    pass


class ExtractionError(WildwatchError):
    """추출 엔진 호출 실패 또는 응답이 스키마와 다를 때."""
    pass


class RiskPolicyError(WildwatchError):
    """Risk policy table is incomplete or cannot be loaded."""
    pass
