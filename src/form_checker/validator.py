"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validator.py
@DateTime: 2026-02-10
@Docs: Validator running checkers and collecting results.
校验器：执行字段校验器并收集结果。

Examples:
        >>> from form_checker import Checker, I64, Max, Min, Str, Validator
        >>> validator = Validator()
        >>> _ = validator.check(Checker("name", "姓名", Str()).meet(Max(5)).meet(Min(2))).check(
        ...     Checker("age", "年龄", I64()).meet(Max(100)).meet(Min(18))
        ... )
        >>> validator.validate({"name": ["bob"], "age": ["20"]})
        True
        >>> validator.get_required("age").as_i64()
        20
"""

import logging
from collections.abc import Iterable

from form_checker.checker import Checkable, Params
from form_checker.config import FormCheckerConfig
from form_checker.exceptions import CheckerConfigError, FieldAccessError, FieldInvalid
from form_checker.messages import MessageRenderer, render_message
from form_checker.schemas import ValidationReport
from form_checker.values import FieldValue, I64Value

logger = logging.getLogger(__name__)


class Validator:
    """The Validator.
    校验器。

    Add checkers with `check`, run `validate`, then read valid values from
    `valid_data` (or the `get_*` accessors) and rendered messages from
    `invalid_messages`. Call `reset` before reusing it on another input.
    通过 `check` 添加字段校验器，执行 `validate`，然后从 `valid_data`（或 `get_*`
    访问器）读取有效值，从 `invalid_messages` 读取渲染后的消息。
    复用于其他输入前请调用 `reset`。

    Args:
        message_renderer: Renderer for messages, Simple Chinese by default.
            消息渲染器，默认简体中文。
    """

    def __init__(self, message_renderer: MessageRenderer | None = None) -> None:
        self.checkers: list[Checkable] = []
        self.valid_data: dict[str, list[FieldValue] | None] = {}
        self.invalid_messages: dict[str, str] = {}
        self.message_renderer = message_renderer if message_renderer is not None else MessageRenderer()
        self._names: set[str] = set()

    @classmethod
    def from_config(cls, config: FormCheckerConfig) -> "Validator":
        """Construct a Validator using the renderer of a FormCheckerConfig.
        使用 FormCheckerConfig 的渲染器构造 Validator。
        """
        return cls(message_renderer=config.renderer())

    @property
    def field_names(self) -> list[str]:
        """Registered field names in order / 按顺序返回已注册字段名。"""
        return [c.name for c in self.checkers]

    def check(self, checker: Checkable) -> "Validator":
        """Add a checker; calls can be chained.
        添加字段校验器；可链式调用。

        Args:
            checker: Checker to register.
                待注册的字段校验器。

        Returns:
            Validator: self.

        Raises:
            CheckerConfigError: When the checker is misconfigured or its
                field name is already registered.
                校验器配置错误或字段名已注册时抛出。
        """
        if not isinstance(checker, Checkable):
            raise CheckerConfigError(message=f"Not a checker: {checker!r} / 不是字段校验器: {checker!r}")
        validate_config = getattr(checker, "validate_config", None)
        if callable(validate_config):
            validate_config()
        name = checker.name
        if name in self._names:
            raise CheckerConfigError(
                message=f"Duplicate field name: {name} / 字段名重复: {name}",
                details={"field": name},
            )
        self._names.add(name)
        self.checkers.append(checker)
        return self

    def check_all(self, checkers: Iterable[Checkable]) -> "Validator":
        """Add several checkers in order / 按顺序添加多个字段校验器。"""
        for checker in checkers:
            self.check(checker)
        return self

    def validate(self, params: Params) -> bool:
        """Run every checker against the input mapping.
        对输入映射执行所有字段校验器。

        A failing field never stops the others. Results overwrite previous
        results of the same field; fields are never left in both maps.
        单个字段失败不会中断其他字段。结果会覆盖同名字段的旧结果，同一字段不会同时出现在两个映射中。

        Args:
            params: Field name -> raw values.
                字段名 -> 原始取值列表。

        Returns:
            bool: Same as `is_valid()` after the run.
                运行后 `is_valid()` 的结果。
        """
        for checker in self.checkers:
            name = checker.name
            try:
                values = checker.check(params)
            except FieldInvalid as exc:
                self.valid_data.pop(name, None)
                self.invalid_messages[name] = render_message(self.message_renderer, exc.message)
                logger.debug("Field %s invalid: %s", name, self.invalid_messages[name])
            else:
                self.invalid_messages.pop(name, None)
                self.valid_data[name] = values
        logger.debug(
            "Validated %d fields: %d valid, %d invalid",
            len(self.checkers),
            len(self.valid_data),
            len(self.invalid_messages),
        )
        return self.is_valid()

    def is_valid(self) -> bool:
        """Whether every checker produced a valid result; call `validate` first.
        是否所有字段校验器均产生有效结果；请先调用 `validate`。
        """
        return not self.invalid_messages and all(c.name in self.valid_data for c in self.checkers)

    def _values(self, name: str) -> list[FieldValue] | None:
        if name not in self._names:
            raise FieldAccessError(message=f"Field not registered: {name} / 字段未注册: {name}", details={"field": name})
        if name not in self.valid_data:
            raise FieldAccessError(message=f"Field not valid: {name} / 字段无效: {name}", details={"field": name})
        return self.valid_data[name]

    def _required_values(self, name: str) -> list[FieldValue]:
        values = self._values(name)
        if values is None:
            raise FieldAccessError(message=f"Field missing: {name} / 字段缺失: {name}", details={"field": name})
        return values

    def get_required(self, name: str) -> FieldValue:
        """Get a required valid value.
        获取必填字段的有效值。

        Raises:
            FieldAccessError: When the field is unregistered, invalid or missing.
                字段未注册、无效或缺失时抛出。
        """
        values = self._required_values(name)
        if not values:
            raise FieldAccessError(message=f"Field missing: {name} / 字段缺失: {name}", details={"field": name})
        return values[0]

    def get_optional(self, name: str) -> FieldValue | None:
        """Get an optional valid value, None when it was missing.
        获取可选字段的有效值，缺失时返回 None。

        Raises:
            FieldAccessError: When the field is unregistered or invalid.
                字段未注册或无效时抛出。
        """
        values = self._values(name)
        if not values:
            return None
        return values[0]

    def get_required_multiple(self, name: str) -> list[FieldValue]:
        """Get all valid values of a required multiple field.
        获取必填多值字段的全部有效值。

        Raises:
            FieldAccessError: When the field is unregistered, invalid or missing.
                字段未注册、无效或缺失时抛出。
        """
        return list(self._required_values(name))

    def get_optional_multiple(self, name: str) -> list[FieldValue] | None:
        """Get all valid values of an optional multiple field, None when missing.
        获取可选多值字段的全部有效值，缺失时返回 None。

        Raises:
            FieldAccessError: When the field is unregistered or invalid.
                字段未注册或无效时抛出。
        """
        values = self._values(name)
        return None if values is None else list(values)

    def get_error(self, name: str) -> str:
        """Get the rendered message of an invalid field.
        获取无效字段的渲染后消息。

        Raises:
            FieldAccessError: When the field is not invalid.
                字段并非无效时抛出。
        """
        try:
            return self.invalid_messages[name]
        except KeyError:
            raise FieldAccessError(
                message=f"Field has no error: {name} / 字段无错误: {name}", details={"field": name}
            ) from None

    def reset(self) -> None:
        """Clear results as if `validate` was never called.
        清空结果，如同从未调用 `validate`。
        """
        self.valid_data.clear()
        self.invalid_messages.clear()

    def report(self) -> ValidationReport:
        """Return a serializable snapshot of the current results.
        返回当前结果的可序列化快照。
        """
        data: dict[str, list[str | int] | None] = {}
        for name, values in self.valid_data.items():
            data[name] = None if values is None else [_plain(v) for v in values]
        return ValidationReport(valid=self.is_valid(), data=data, errors=dict(self.invalid_messages))


def _plain(value: FieldValue) -> str | int:
    if isinstance(value, I64Value):
        return value.value
    return str(value)
