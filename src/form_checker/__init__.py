"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-10
@Docs: Package exports for form_checker.
form_checker 包导出定义。
"""

from form_checker.checker import Checkable, Checker, CheckerOptions, Params
from form_checker.config import FormCheckerConfig, renderer_for, resolve_config
from form_checker.exceptions import (
    CheckerConfigError,
    FieldAccessError,
    FieldInvalid,
    FormCheckerError,
    InvalidFormError,
)
from form_checker.field_types import I64, ChinaMobile, Email, FieldType, PatternType, Str
from form_checker.helpers import params_from_mapping, params_from_pairs
from form_checker.messages import (
    AnyMessage,
    EnglishMessageRenderer,
    Message,
    MessageKind,
    MessageRenderer,
    SomeMessage,
    render_message,
)
from form_checker.rules import Format, Lambda, Max, Min, Rule, compile_pattern
from form_checker.schemas import ValidationReport
from form_checker.validator import Validator
from form_checker.values import FieldValue, I64Value, StrValue

__all__ = [
    "Validator",
    "Checker",
    "Checkable",
    "CheckerOptions",
    "Params",
    "FieldType",
    "Str",
    "I64",
    "ChinaMobile",
    "Email",
    "PatternType",
    "FieldValue",
    "StrValue",
    "I64Value",
    "Rule",
    "Max",
    "Min",
    "Format",
    "Lambda",
    "compile_pattern",
    "Message",
    "MessageKind",
    "SomeMessage",
    "AnyMessage",
    "MessageRenderer",
    "EnglishMessageRenderer",
    "render_message",
    "FormCheckerError",
    "CheckerConfigError",
    "FieldAccessError",
    "InvalidFormError",
    "FieldInvalid",
    "FormCheckerConfig",
    "resolve_config",
    "renderer_for",
    "ValidationReport",
    "params_from_pairs",
    "params_from_mapping",
]
