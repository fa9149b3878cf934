class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    error_code = "DOMAIN_ERROR"


class ResourceNotFoundException(DomainException):
    """参照先のリソース（ツアー・車両・ドライバー・予約）が見つからない場合"""

    error_code = "NOT_FOUND"


class ForbiddenException(DomainException):
    """操作主体に対象への権限がない場合"""

    error_code = "FORBIDDEN"


class ValidationException(DomainException):
    """入力値が不正・不足している場合（乗客情報の不整合、キャンセル理由の欠落など）"""

    error_code = "VALIDATION_ERROR"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class InvalidDateRangeException(BusinessRuleViolationException):
    """期間から算出した日数が 1 未満の場合"""

    error_code = "INVALID_DATE_RANGE"


class InvalidTransitionException(BusinessRuleViolationException):
    """現在のステータスから要求されたステータスへ遷移できない場合"""

    error_code = "INVALID_TRANSITION"

    def __init__(self, current: str, target: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Invalid booking status transition: {current} -> {target}"
        )
        self.current = current
        self.target = target


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    error_code = "DUPLICATE_RESOURCE"


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    error_code = "CONFLICT"
