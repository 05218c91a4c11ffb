"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: checker.py
@DateTime: 2026-02-10
@Docs: Per-field checker binding a name to a type, rules and options.
字段校验器：将字段名与类型、规则和选项绑定。

Examples:
        Declare a checker / 声明校验器:

        >>> from form_checker.field_types import Str
        >>> from form_checker.rules import Max, Min
        >>> checker = Checker("name", "姓名", Str()).meet(Max(5)).meet(Min(2))
        >>> [v.as_str() for v in checker.check({"name": ["bob"]})]
        ['bob']
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Protocol, TypeAlias, runtime_checkable

from form_checker.exceptions import CheckerConfigError
from form_checker.field_types import FieldType
from form_checker.messages import MessageKind
from form_checker.rules import Rule, failure
from form_checker.values import FieldValue

Params: TypeAlias = Mapping[str, Sequence[str]]


@dataclass(frozen=True, slots=True)
class CheckerOptions:
    """Checker options (explicit configuration layer).
    校验器选项（显式配置层）。

    Attributes:
        optional: True means the field may be missing (default: required).
            为 True 表示字段可缺失（默认必填）。
        multiple: True means the field holds multiple values (default: single).
            为 True 表示字段包含多个值（默认单值）。
    """

    optional: bool = False
    multiple: bool = False


@runtime_checkable
class Checkable(Protocol):
    """Anything the Validator can run.
    可被 Validator 执行的对象。
    """

    @property
    def name(self) -> str: ...

    def check(self, params: Params) -> list[FieldValue] | None: ...


class Checker:
    """The checker for a field.
    单个字段的校验器。

    Args:
        field_name: Field name in the form, used to look up values.
            表单中的字段名，用于查找取值。
        field_title: Descriptive title used in messages.
            用于消息展示的字段标题。
        field_type: A FieldType implementation.
            FieldType 实现。
        optional: Allow the field to be missing.
            允许字段缺失。
        multiple: Check every value instead of only the first.
            校验所有值而非仅第一个。
    """

    def __init__(
        self,
        field_name: str,
        field_title: str,
        field_type: FieldType,
        *,
        optional: bool = False,
        multiple: bool = False,
    ) -> None:
        self.field_name = field_name
        self.field_title = field_title
        self.field_type = field_type
        self.rules: list[Rule] = []
        self.options = CheckerOptions(optional=bool(optional), multiple=bool(multiple))

    @property
    def name(self) -> str:
        return self.field_name

    @property
    def optional(self) -> bool:
        return self.options.optional

    @property
    def multiple(self) -> bool:
        return self.options.multiple

    def meet(self, rule: Rule) -> "Checker":
        """Add a rule; rules run in the order they are added.
        添加规则；规则按添加顺序执行。

        Raises:
            CheckerConfigError: When `rule` is not a Rule.
                `rule` 不是 Rule 时抛出。
        """
        self._check_rule(rule)
        self.rules.append(rule)
        return self

    def set(self, *, optional: bool | None = None, multiple: bool | None = None) -> "Checker":
        """Update options, leaving unspecified ones unchanged.
        更新选项，未指定的保持不变。
        """
        changes: dict[str, bool] = {}
        if optional is not None:
            changes["optional"] = bool(optional)
        if multiple is not None:
            changes["multiple"] = bool(multiple)
        self.options = replace(self.options, **changes)
        return self

    def validate_config(self) -> None:
        """Validate the configuration once, at registration.
        在注册时一次性校验配置。

        Raises:
            CheckerConfigError: When the checker is misconfigured.
                配置错误时抛出。
        """
        if not isinstance(self.field_name, str) or not self.field_name:
            raise CheckerConfigError(message="Field name must be a non-empty string / 字段名必须为非空字符串")
        if not callable(getattr(self.field_type, "from_str", None)):
            raise CheckerConfigError(
                message=f"Field type of {self.field_name!r} has no from_str / 字段 {self.field_name!r} 的类型缺少 from_str",
                details={"field_type": repr(self.field_type)},
            )
        for rule in self.rules:
            self._check_rule(rule)

    def _check_rule(self, rule: object) -> None:
        if not isinstance(rule, Rule):
            raise CheckerConfigError(
                message=f"Not a Rule on field {self.field_name!r}: {rule!r} / 字段 {self.field_name!r} 含非法规则: {rule!r}",
            )

    def check(self, params: Params) -> list[FieldValue] | None:
        """Check this field against the input mapping.
        按输入映射校验本字段。

        An absent field and a field with no values are treated alike:
        required fields fail with a blank message, optional ones yield None.
        字段缺失与字段无取值同等处理：必填字段报空值错误，可选字段返回 None。

        Args:
            params: Field name -> raw values.
                字段名 -> 原始取值列表。

        Returns:
            list[FieldValue] | None: Parsed values, None when optional and missing.
                解析后的值列表；可选且缺失时为 None。

        Raises:
            FieldInvalid: On the first failure.
                遇到第一个失败时抛出。
            CheckerConfigError: When the field type returns something other than a FieldValue.
                字段类型返回的不是 FieldValue 时抛出。
        """
        values = params.get(self.field_name)
        if not values:
            if not self.options.optional:
                raise failure(MessageKind.BLANK, self.field_name, self.field_title, None)
            return None
        if isinstance(values, str):
            values = [values]

        if self.options.multiple:
            return [self.check_value(v) for v in values]
        return [self.check_value(values[0])]

    def check_value(self, value: str) -> FieldValue:
        """Parse one raw value and run every rule on it.
        解析单个原始值并依次执行所有规则。
        """
        try:
            field_value = self.field_type.from_str(self.field_name, self.field_title, value)
        except ValueError as exc:
            raise failure(MessageKind.FORMAT, self.field_name, self.field_title, value) from exc
        if not isinstance(field_value, FieldValue):
            raise CheckerConfigError(
                message=(
                    f"Field type of {self.field_name!r} returned {type(field_value).__name__}, not a FieldValue / "
                    f"字段 {self.field_name!r} 的类型返回了 {type(field_value).__name__}，而非 FieldValue"
                ),
                details={"field": self.field_name, "field_type": repr(self.field_type)},
            )
        for rule in self.rules:
            rule.match(field_value, self.field_name, self.field_title, value)
        return field_value

    def __repr__(self) -> str:
        return (
            f"Checker({self.field_name!r}, {self.field_title!r}, {self.field_type!r}, "
            f"rules={self.rules!r}, optional={self.optional}, multiple={self.multiple})"
        )
