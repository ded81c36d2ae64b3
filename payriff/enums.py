from enum import Enum


class Language(str, Enum):
    AZ = "AZ"
    EN = "EN"
    RU = "RU"


class Currency(str, Enum):
    AZN = "AZN"
    USD = "USD"
    EUR = "EUR"


class Operation(str, Enum):
    PURCHASE = "PURCHASE"
    PRE_AUTH = "PRE_AUTH"


class Status(str, Enum):
    CREATED = "CREATED"
    APPROVED = "APPROVED"
    CANCELED = "CANCELED"
    DECLINED = "DECLINED"
    REFUNDED = "REFUNDED"
    PREAUTH_APPROVED = "PREAUTH_APPROVED"
    EXPIRED = "EXPIRED"
    REVERSE = "REVERSE"
    PARTIAL_REFUND = "PARTIAL_REFUND"


class ResultCode(str, Enum):
    """
    Коды результата Payriff (поле `code` в ответе).
    Члены сравниваются со строками напрямую: ResultCode.SUCCESS == "00000".
    """

    SUCCESS = "00000"
    SUCCESS_GATEWAY = "00"
    SUCCESS_GATEWAY_APPROVE = "APPROVED"
    SUCCESS_GATEWAY_PREAUTH_APPROVE = "PREAUTH-APPROVED"
    WARNING = "01000"
    ERROR = "15000"
    INVALID_PARAMETERS = "15400"
    UNAUTHORIZED = "14010"
    TOKEN_NOT_PRESENT = "14013"
    INVALID_TOKEN = "14014"


SUCCESS_CODES = (ResultCode.SUCCESS.value, ResultCode.SUCCESS_GATEWAY.value)
