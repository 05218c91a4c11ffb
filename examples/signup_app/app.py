"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: app.py
@DateTime: 2026-02-10
@Docs: FastAPI app validating a signup query string.
校验注册查询参数的 FastAPI 示例应用。
"""

from typing import Any

from fastapi import Depends, FastAPI

from form_checker import I64, Checker, ChinaMobile, Email, Lambda, Max, Min, Str, Validator, resolve_config
from form_checker.contrib.fastapi import install_exception_handler, query_validator


def _not_reserved(value: Any) -> bool:
    return value.as_str() not in {"admin", "root"}


def create_app(language: str | None = None) -> FastAPI:
    """Create the signup example app.
    创建注册示例应用。

    Args:
        language: Message language override / 消息语言覆盖。

    Returns:
        FastAPI app instance / FastAPI 应用实例。
    """
    config = resolve_config(language=language)
    app = FastAPI(title="Signup Example")
    install_exception_handler(app)

    signup = query_validator(
        Checker("username", "用户名", Str())
        .meet(Max(16))
        .meet(Min(2))
        .meet(Lambda(_not_reserved, lambda name, title, raw: f"{title} {raw} 已被保留")),
        Checker("age", "年龄", I64()).meet(Min(18)).meet(Max(120)),
        Checker("mobile", "手机号", ChinaMobile(), optional=True),
        Checker("email", "邮箱", Email(), optional=True),
        Checker("interest", "兴趣", Str(), optional=True, multiple=True).meet(Max(10)),
        renderer=config.renderer(),
    )

    @app.get("/signup")
    def signup_route(v: Validator = Depends(signup)) -> dict[str, Any]:
        """Validate a signup request / 校验注册请求。"""
        mobile = v.get_optional("mobile")
        interests = v.get_optional_multiple("interest") or []
        return {
            "username": v.get_required("username").as_str(),
            "age": v.get_required("age").as_i64(),
            "mobile": mobile.as_str() if mobile is not None else None,
            "interests": [i.as_str() for i in interests],
        }

    return app
