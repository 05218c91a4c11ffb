"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-02-10
@Docs: Form checker configuration helpers.
表单校验配置助手。

Configuration helpers for form checking.
表单校验配置助手。

Configuration is resolved explicitly by the caller and handed to
`Validator.from_config`; nothing here changes process-wide state.
配置由调用方显式解析并传给 `Validator.from_config`；本模块不修改任何全局状态。

Environment variables / 环境变量:
        - FORM_CHECKER_LANGUAGE:
            Message language, `zh` (default) or `en`.
            消息语言，`zh`（默认）或 `en`。

Examples:
        Use defaults / 使用默认值:

        >>> from form_checker.config import resolve_config
        >>> resolve_config(language="zh").language
        'zh'
"""

import os
from dataclasses import dataclass

from form_checker.exceptions import CheckerConfigError
from form_checker.messages import EnglishMessageRenderer, MessageRenderer

DEFAULT_LANGUAGE = "zh"
RENDERERS: dict[str, type[MessageRenderer]] = {
    "zh": MessageRenderer,
    "en": EnglishMessageRenderer,
}


@dataclass(frozen=True, slots=True)
class FormCheckerConfig:
    """Form checker configuration.

    表单校验配置。

    Attributes:
        language: Message language key, one of RENDERERS.
            消息语言键，取值见 RENDERERS。
    """

    language: str = DEFAULT_LANGUAGE

    def renderer(self) -> MessageRenderer:
        """Return a renderer for the configured language.

        返回配置语言对应的渲染器。
        """
        return renderer_for(self.language)


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _normalize_language(value: str) -> str:
    """
    Normalize a language key, e.g. "zh_CN" -> "zh", "EN" -> "en".
    规范化语言键，例如 "zh_CN" -> "zh"，"EN" -> "en"。
    """
    item = str(value).strip().lower().replace("_", "-")
    return item.split("-", 1)[0]


def renderer_for(language: str) -> MessageRenderer:
    """Return a new renderer for a language key.

    返回语言键对应的新渲染器。

    Raises:
        CheckerConfigError: When the language is not supported.
            语言不受支持时抛出。
    """
    key = _normalize_language(language)
    renderer_cls = RENDERERS.get(key)
    if renderer_cls is None:
        raise CheckerConfigError(
            message=f"Unsupported language: {language} / 不支持的语言: {language}",
            details={"supported": sorted(RENDERERS)},
        )
    return renderer_cls()


def resolve_config(*, language: str | None = None, env_prefix: str = "FORM_CHECKER") -> FormCheckerConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) `language` parameter / 函数参数 language
        2) env: `{env_prefix}_LANGUAGE` / 环境变量：`{env_prefix}_LANGUAGE`
        3) default `zh` / 默认值 `zh`

    Args:
        language: Message language.
            消息语言。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FORM_CHECKER）。

    Returns:
        A FormCheckerConfig instance.
            返回 FormCheckerConfig 配置实例。

    Raises:
        CheckerConfigError: When the resolved language is not supported.
            解析出的语言不受支持时抛出。
    """
    raw = language if language is not None else (_env_get(f"{env_prefix}_LANGUAGE") or DEFAULT_LANGUAGE)
    resolved = _normalize_language(raw)
    if resolved not in RENDERERS:
        raise CheckerConfigError(
            message=f"Unsupported language: {raw} / 不支持的语言: {raw}",
            details={"supported": sorted(RENDERERS)},
        )
    return FormCheckerConfig(language=resolved)
