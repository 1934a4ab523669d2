class ConfigValidationError(ValueError):
    """설정 입력값 검증 실패 (설정은 바뀌지 않음)"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
