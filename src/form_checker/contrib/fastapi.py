"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: fastapi.py
@DateTime: 2026-02-10
@Docs: FastAPI integration for query string validation.
FastAPI 查询参数校验集成。

Examples:
        >>> from fastapi import Depends, FastAPI
        >>> from form_checker import Checker, I64, Min, Str
        >>> app = FastAPI()
        >>> install_exception_handler(app)
        >>> people = query_validator(Checker("name", "姓名", Str()), Checker("age", "年龄", I64()).meet(Min(18)))
        >>> @app.get("/people")
        ... def list_people(v: Validator = Depends(people)) -> dict:
        ...     return v.report().model_dump()
"""

from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from form_checker.checker import Checker
from form_checker.exceptions import FormCheckerError, InvalidFormError
from form_checker.helpers.params import params_from_pairs
from form_checker.messages import MessageRenderer
from form_checker.validator import Validator


def query_validator(
    *checkers: Checker,
    renderer: MessageRenderer | None = None,
) -> Callable[[Request], Validator]:
    """Build a dependency validating `request.query_params`.
    构建校验 `request.query_params` 的依赖。

    Checkers are registered once here, so configuration errors surface at
    import time; each request gets its own Validator.
    字段校验器在此处一次性注册，配置错误在导入时即暴露；每个请求使用独立的 Validator。

    Args:
        *checkers: Field checkers.
            字段校验器。
        renderer: Message renderer (optional).
            消息渲染器（可选）。
    Returns:
        A FastAPI dependency returning a validated Validator.
            返回已完成校验的 Validator 的 FastAPI 依赖。
    Raises:
        InvalidFormError: From the dependency, when any field is invalid.
            任一字段无效时由依赖抛出。
    """
    Validator(message_renderer=renderer).check_all(checkers)

    def dependency(request: Request) -> Validator:
        validator = Validator(message_renderer=renderer).check_all(checkers)
        params = params_from_pairs(request.query_params.multi_items())
        if not validator.validate(params):
            raise InvalidFormError(errors=validator.invalid_messages)
        return validator

    return dependency


def install_exception_handler(app: FastAPI) -> None:
    """Render FormCheckerError as a JSON response.
    将 FormCheckerError 渲染为 JSON 响应。

    Args:
        app: FastAPI application.
            FastAPI 应用。
    """

    @app.exception_handler(FormCheckerError)
    async def _form_checker_error_handler(request: Request, exc: FormCheckerError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "error_code": exc.error_code, "details": exc.details},
        )
