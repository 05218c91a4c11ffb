"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: field_types.py
@DateTime: 2026-02-10
@Docs: Field types turning raw strings into typed values.
字段类型：将原始字符串转换为类型化值。
"""

import re
from typing import Protocol, runtime_checkable

from form_checker.messages import MessageKind
from form_checker.rules import compile_pattern, failure
from form_checker.values import I64_MAX, I64_MIN, FieldValue, I64Value, StrValue

_INT_RE = re.compile(r"-?[0-9]+")


@runtime_checkable
class FieldType(Protocol):
    """Field type protocol.
    字段类型协议。

    Implement `from_str` to support your own field type. Raise `FieldInvalid`
    (or a plain ValueError, reported as a format error) when the raw value
    cannot be interpreted.
    实现 `from_str` 即可支持自定义字段类型。原始值无法解析时抛出 `FieldInvalid`
    （或普通 ValueError，按格式错误处理）。
    """

    def from_str(self, field_name: str, field_title: str, value: str) -> FieldValue:
        """Parse a raw string into a FieldValue.
        将原始字符串解析为 FieldValue。

        Args:
            field_name: Field name in the form.
                表单中的字段名。
            field_title: Descriptive title used in messages.
                用于消息展示的字段标题。
            value: Raw string value.
                原始字符串值。
        Returns:
            The parsed FieldValue.
                解析后的 FieldValue。
        """
        ...


class Str:
    """A general string field.
    通用字符串字段。
    """

    def from_str(self, field_name: str, field_title: str, value: str) -> FieldValue:
        return StrValue(value)

    def __repr__(self) -> str:
        return "Str()"


class I64:
    """A signed 64-bit integer field.
    有符号 64 位整数字段。

    Only `-?[0-9]+` is accepted: no surrounding whitespace, no leading `+`,
    no digit separators.
    仅接受 `-?[0-9]+`：不允许首尾空白、前导 `+` 或数字分隔符。
    """

    def from_str(self, field_name: str, field_title: str, value: str) -> FieldValue:
        if _INT_RE.fullmatch(value) is None:
            raise failure(MessageKind.FORMAT, field_name, field_title, value)
        number = int(value)
        if not I64_MIN <= number <= I64_MAX:
            raise failure(MessageKind.FORMAT, field_name, field_title, value)
        return I64Value(number)

    def __repr__(self) -> str:
        return "I64()"


class PatternType:
    """A string field that must fully match a regex.
    必须完整匹配正则表达式的字符串字段。

    Args:
        pattern: Regex pattern, matched with `fullmatch`.
            正则表达式，使用 `fullmatch` 匹配。
        flags: Regex flags.
            正则标志。
    """

    pattern: str = ""
    flags: int = 0

    def __init__(self, pattern: str | None = None, flags: int | None = None) -> None:
        if pattern is not None:
            self.pattern = pattern
        if flags is not None:
            self.flags = flags
        self._regex = compile_pattern(self.pattern, self.flags)

    def from_str(self, field_name: str, field_title: str, value: str) -> FieldValue:
        if self._regex.fullmatch(value) is None:
            raise failure(MessageKind.FORMAT, field_name, field_title, value)
        return StrValue(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pattern={self.pattern!r})"


class ChinaMobile(PatternType):
    """A mobile number used in China.
    中国大陆手机号。
    """

    pattern = r"1[0-9]{10}"


class Email(PatternType):
    """An email address.
    电子邮箱地址。
    """

    pattern = r"[\w.%+-]+@(?:[A-Z0-9-]+\.)+[A-Z]{2,4}"
    flags = re.IGNORECASE
