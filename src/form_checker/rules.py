"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rules.py
@DateTime: 2026-02-10
@Docs: Rules applied to parsed field values.
作用于已解析字段值的规则。

The same rule may mean different things for different value types:
`Max` is a maximum length for str values and a maximum value for integers.
String length is counted in Unicode code points, so "张三" has length 2.
同一规则对不同值类型含义不同：`Max` 对字符串是最大长度，对整数是最大值。
字符串长度按 Unicode 码点计数，"张三" 长度为 2。
"""

import re
from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeAlias

from form_checker.exceptions import CheckerConfigError, FieldInvalid
from form_checker.messages import AnyMessage, MessageKind, SomeMessage
from form_checker.values import FieldValue, I64Value, StrValue

Predicate: TypeAlias = Callable[[FieldValue], Any]
MessageBuilder: TypeAlias = Callable[[str, str, str], str]


@lru_cache(maxsize=256)
def _compile(pattern: str, flags: int) -> re.Pattern[str]:
    return re.compile(pattern, flags)


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern[str]:
    """Compile a regex once and reuse it.
    编译正则并缓存复用。

    Args:
        pattern: Regex pattern.
            正则表达式。
        flags: Regex flags.
            正则标志。

    Returns:
        re.Pattern[str]: Compiled pattern.
            编译后的正则。

    Raises:
        CheckerConfigError: When the pattern is not a valid regex.
            正则表达式非法时抛出。
    """
    try:
        return _compile(pattern, flags)
    except re.error as exc:
        raise CheckerConfigError(
            message=f"Invalid regex pattern: {pattern!r} / 非法正则表达式: {pattern!r}",
            details={"pattern": pattern, "error": str(exc)},
        ) from exc


def failure(kind: MessageKind, field_name: str, field_title: str, raw: str | None, *rule_values: object) -> FieldInvalid:
    """Build a field failure of a predefined kind.
    构造预定义类型的字段失败。
    """
    return FieldInvalid(
        SomeMessage(
            kind=kind,
            name=field_name,
            title=field_title,
            value=raw,
            rule_values=tuple(str(v) for v in rule_values),
        )
    )


def _check_limit(rule: str, limit: object) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise CheckerConfigError(
            message=f"{rule} limit must be an integer: {limit!r} / {rule} 的限制值必须为整数: {limit!r}",
            details={"rule": rule, "limit": repr(limit)},
        )
    return limit


def _unsupported(rule: str, value: object) -> TypeError:
    kind = type(value).__name__
    return TypeError(f"{rule} cannot check {kind} values / {rule} 无法校验 {kind} 类型的值")


class Rule:
    """Base class of rules.
    规则基类。

    Subclasses implement `match` and raise `FieldInvalid` to reject a value.
    子类实现 `match`，通过抛出 `FieldInvalid` 拒绝取值。
    """

    __slots__ = ()

    def match(self, value: FieldValue, field_name: str, field_title: str, raw: str) -> None:
        """Check a parsed value against this rule.
        使用本规则检查已解析的值。

        Args:
            value: Parsed value.
                已解析的值。
            field_name: Field name.
                字段名。
            field_title: Field title.
                字段标题。
            raw: Raw string the value was parsed from.
                解析前的原始字符串。

        Raises:
            FieldInvalid: When the value does not satisfy the rule.
                值不满足规则时抛出。
        """
        raise NotImplementedError


class Max(Rule):
    """Maximum limit: length for str values, value for integers.
    上限：字符串为长度，整数为数值。
    """

    __slots__ = ("limit",)

    def __init__(self, limit: int) -> None:
        self.limit = _check_limit("Max", limit)

    def match(self, value: FieldValue, field_name: str, field_title: str, raw: str) -> None:
        if isinstance(value, StrValue):
            if len(value.value) > self.limit:
                raise failure(MessageKind.MAX_LEN, field_name, field_title, raw, self.limit)
        elif isinstance(value, I64Value):
            if value.value > self.limit:
                raise failure(MessageKind.MAX, field_name, field_title, raw, self.limit)
        else:
            raise _unsupported("Max", value)

    def __repr__(self) -> str:
        return f"Max({self.limit})"


class Min(Rule):
    """Minimum limit: length for str values, value for integers.
    下限：字符串为长度，整数为数值。
    """

    __slots__ = ("limit",)

    def __init__(self, limit: int) -> None:
        self.limit = _check_limit("Min", limit)

    def match(self, value: FieldValue, field_name: str, field_title: str, raw: str) -> None:
        if isinstance(value, StrValue):
            if len(value.value) < self.limit:
                raise failure(MessageKind.MIN_LEN, field_name, field_title, raw, self.limit)
        elif isinstance(value, I64Value):
            if value.value < self.limit:
                raise failure(MessageKind.MIN, field_name, field_title, raw, self.limit)
        else:
            raise _unsupported("Min", value)

    def __repr__(self) -> str:
        return f"Min({self.limit})"


class Format(Rule):
    """A regex searched in the str form of the value.
    在值的字符串形式中搜索的正则。

    The pattern is searched, not fully matched; anchor it with `^`/`$` when
    the whole value must match.
    使用 search 而非完整匹配；需要整体匹配时请使用 `^`/`$` 锚定。
    """

    __slots__ = ("pattern", "_regex")

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._regex = compile_pattern(pattern)

    def match(self, value: FieldValue, field_name: str, field_title: str, raw: str) -> None:
        if self._regex.search(str(value)) is None:
            raise failure(MessageKind.FORMAT, field_name, field_title, raw)

    def __repr__(self) -> str:
        return f"Format({self.pattern!r})"


class Lambda(Rule):
    """Custom check logic.
    自定义校验逻辑。

    Args:
        predicate: Called with the parsed value; a falsy result rejects it.
            以已解析的值调用；返回假值即拒绝。
        message_builder: Optional `(field_name, field_title, raw) -> str`;
            its result is shown verbatim instead of the format message.
            可选 `(field_name, field_title, raw) -> str`，其结果将原样展示以替代格式错误消息。
    """

    __slots__ = ("predicate", "message_builder")

    def __init__(self, predicate: Predicate, message_builder: MessageBuilder | None = None) -> None:
        self.predicate = predicate
        self.message_builder = message_builder

    def match(self, value: FieldValue, field_name: str, field_title: str, raw: str) -> None:
        if self.predicate(value):
            return
        if self.message_builder is not None:
            raise FieldInvalid(AnyMessage(self.message_builder(field_name, field_title, raw)))
        raise failure(MessageKind.FORMAT, field_name, field_title, raw)

    def __repr__(self) -> str:
        return f"Lambda({self.predicate!r})"
