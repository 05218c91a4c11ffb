"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-02-10
@Docs: Form checker error hierarchy.
表单校验异常体系。
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from form_checker.messages import Message


class FormCheckerError(Exception):
    """
    Form checker errors.
    表单校验异常。

    Errors caused by misuse of the library (bad configuration, invalid accessor
    calls) or raised on purpose by integrations. Per-field validation failures
    are NOT raised as FormCheckerError; they end up in `invalid_messages`.
    由库的误用（配置错误、非法访问）或集成层主动抛出的异常。
    单个字段的校验失败不会以 FormCheckerError 抛出，而是写入 `invalid_messages`。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "form_checker_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class CheckerConfigError(FormCheckerError):
    """
    Checker configuration error.
    校验器配置错误。
    """

    def __init__(self, *, message: str, details: Any | None = None) -> None:
        super().__init__(message=message, status_code=500, details=details, error_code="checker_config_error")


class FieldAccessError(FormCheckerError, LookupError):
    """
    Field access error.
    字段访问错误。

    Raised when reading a result that the last validation did not produce,
    e.g. `get_required` on an invalid field. Callers should check `is_valid` first.
    读取上一次校验未产生的结果时抛出，例如对无效字段调用 `get_required`。
    调用方应先检查 `is_valid`。
    """

    def __init__(self, *, message: str, details: Any | None = None) -> None:
        super().__init__(message=message, status_code=500, details=details, error_code="field_access_error")


class InvalidFormError(FormCheckerError):
    """
    Invalid form error.
    表单校验未通过。

    `details` holds the field name -> rendered message mapping.
    `details` 保存字段名 -> 渲染后消息的映射。
    """

    def __init__(self, *, errors: dict[str, str], message: str = "Invalid form / 表单校验未通过") -> None:
        super().__init__(message=message, status_code=422, details=dict(errors), error_code="invalid_form")


class FieldInvalid(Exception):
    """
    Single field validation failure.
    单个字段校验失败。

    Raised by field types and rules, caught by the Validator per checker.
    由字段类型与规则抛出，由 Validator 按校验器捕获。
    """

    def __init__(self, message: "Message") -> None:
        super().__init__(message)
        self.message = message
