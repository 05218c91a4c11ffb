"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_validator.py
@DateTime: 2026-02-10
@Docs: Tests for validator.py module.
validator.py 模块测试。
"""

import logging

import pytest

from form_checker import (
    I64,
    Checker,
    CheckerConfigError,
    ChinaMobile,
    EnglishMessageRenderer,
    FieldAccessError,
    Format,
    FormCheckerConfig,
    I64Value,
    Lambda,
    Max,
    Min,
    Str,
    StrValue,
    ValidationReport,
    Validator,
)


class TestStrField:
    """Str field with Max(5), Min(2).
    带 Max(5)、Min(2) 的字符串字段。
    """

    def test_valid(self, username_validator: Validator) -> None:
        assert username_validator.validate({"username": ["bob"]})
        assert username_validator.get_required("username").as_str() == "bob"

    def test_too_short(self, username_validator: Validator) -> None:
        assert not username_validator.validate({"username": ["b"]})
        assert len(username_validator.invalid_messages) == 1
        assert username_validator.get_error("username") == "username长度不能小于2"

    def test_too_long(self, username_validator: Validator) -> None:
        username_validator.validate({"username": ["hellokitty"]})
        assert len(username_validator.invalid_messages) == 1
        assert username_validator.get_error("username") == "username长度不能大于5"

    def test_format_rule(self) -> None:
        v = Validator().check(Checker("username", "username", Str()).meet(Format(r"\d")))
        v.validate({"username": ["hellokitty"]})
        assert v.get_error("username") == "username格式不正确"
        v.reset()
        v.validate({"username": ["l5y"]})
        assert len(v.invalid_messages) == 0
        assert v.get_required("username").as_str() == "l5y"

    def test_round_trip_unchanged(self) -> None:
        """Str without rules keeps the raw value / 无规则的 Str 保留原始值。"""
        raw = "  带空格 & symbols\t"
        v = Validator().check(Checker("s", "s", Str()))
        assert v.validate({"s": [raw]})
        assert v.get_required("s").as_str() == raw


class TestIntField:
    """I64 field with Max(5), Min(2).
    带 Max(5)、Min(2) 的整数字段。
    """

    def test_valid(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": ["3"]})
        assert age_validator.get_required("age").as_i64() == 3

    def test_too_small(self, age_validator: Validator) -> None:
        age_validator.validate({"age": ["1"]})
        assert age_validator.get_error("age") == "age不能小于2"

    def test_too_large(self, age_validator: Validator) -> None:
        age_validator.validate({"age": ["6"]})
        assert age_validator.get_error("age") == "age不能大于5"

    def test_missing(self, age_validator: Validator) -> None:
        age_validator.validate({})
        assert len(age_validator.invalid_messages) == 1
        assert age_validator.get_error("age") == "age不能为空"

    def test_empty_string(self, age_validator: Validator) -> None:
        age_validator.validate({"age": [""]})
        assert age_validator.get_error("age") == "age格式不正确"

    def test_format_on_integer(self) -> None:
        v = Validator().check(Checker("age", "age", I64()).meet(Format(r"^\d{3}$")))
        v.validate({"age": ["3456"]})
        assert v.get_error("age") == "age格式不正确"
        v.reset()
        v.validate({"age": ["345"]})
        assert v.get_required("age").as_i64() == 345


class TestOptional:
    """Optional fields.
    可选字段。
    """

    def test_present(self) -> None:
        v = Validator().check(Checker("username", "username", Str(), optional=True).meet(Max(5)))
        assert v.validate({"username": ["bcc"]})
        assert v.get_optional("username") == StrValue("bcc")

    def test_absent(self) -> None:
        v = Validator().check(Checker("username", "username", Str(), optional=True).meet(Max(5)))
        assert v.validate({})
        assert v.valid_data == {"username": None}
        assert v.get_optional("username") is None
        assert v.get_optional_multiple("username") is None

    def test_get_required_on_absent_optional_raises(self) -> None:
        v = Validator().check(Checker("username", "username", Str(), optional=True))
        v.validate({})
        with pytest.raises(FieldAccessError):
            v.get_required("username")


class TestMultiple:
    """Multiple-value fields.
    多值字段。
    """

    def _validator(self, **options: bool) -> Validator:
        return Validator().check(
            Checker("username", "username", Str(), multiple=True, **options).meet(Max(5)).meet(Min(2))
        )

    def test_all_valid(self) -> None:
        v = self._validator()
        assert v.validate({"username": ["bob", "mary"]})
        assert [x.as_str() for x in v.get_required_multiple("username")] == ["bob", "mary"]

    def test_second_invalid(self) -> None:
        v = self._validator()
        assert not v.validate({"username": ["bob", "i"]})
        assert v.get_error("username") == "username长度不能小于2"
        assert "username" not in v.valid_data

    def test_optional_multiple(self) -> None:
        v = self._validator(optional=True)
        assert v.validate({"username": ["bob", "mary"]})
        assert v.get_optional_multiple("username") == [StrValue("bob"), StrValue("mary")]

    def test_accessor_returns_copy(self) -> None:
        v = self._validator()
        v.validate({"username": ["bob"]})
        v.get_required_multiple("username").append(StrValue("x"))
        assert v.get_required_multiple("username") == [StrValue("bob")]


class TestLambdaMessages:
    """Lambda custom messages.
    Lambda 自定义消息。
    """

    def test_custom_literal_message(self) -> None:
        v = Validator().check(
            Checker("code", "编码", Str()).meet(
                Lambda(lambda value: value.as_str() == "ok", lambda name, title, raw: f"{title}格式不对:{raw}")
            )
        )
        v.validate({"code": ["bad"]})
        assert v.get_error("code") == "编码格式不对:bad"

    def test_literal_message_ignores_renderer(self) -> None:
        v = Validator(EnglishMessageRenderer()).check(
            Checker("code", "code", Str()).meet(Lambda(lambda value: False, lambda n, t, r: "自定义"))
        )
        v.validate({"code": ["x"]})
        assert v.get_error("code") == "自定义"

    def test_without_builder_is_format(self) -> None:
        v = Validator().check(Checker("n", "数量", I64()).meet(Lambda(lambda value: value.as_i64() % 2 == 0)))
        v.validate({"n": ["3"]})
        assert v.get_error("n") == "数量格式不正确"


class TestRenderer:
    """Custom renderers.
    自定义渲染器。
    """

    def test_english(self) -> None:
        v = Validator(message_renderer=EnglishMessageRenderer()).check(
            Checker("username", "username", Str()).meet(Format(r"\d"))
        )
        v.validate({"username": ["hellokitty"]})
        assert v.get_error("username") == "username is in wrong format"

    def test_from_config(self) -> None:
        v = Validator.from_config(FormCheckerConfig(language="en")).check(Checker("age", "Age", I64()))
        v.validate({})
        assert v.get_error("age") == "Age is missing"


class TestAggregation:
    """Result maps and is_valid.
    结果映射与 is_valid。
    """

    def _validator(self) -> Validator:
        return (
            Validator()
            .check(Checker("name", "姓名", Str()).meet(Max(5)).meet(Min(2)))
            .check(Checker("age", "年龄", I64()).meet(Max(100)).meet(Min(18)))
            .check(Checker("mobile", "手机", ChinaMobile(), optional=True))
        )

    def test_every_field_in_exactly_one_map(self) -> None:
        v = self._validator()
        v.validate({"name": ["b"], "age": ["20"], "mobile": ["123"]})
        for name in v.field_names:
            assert (name in v.valid_data) != (name in v.invalid_messages)

    def test_failures_do_not_stop_other_fields(self) -> None:
        v = self._validator()
        v.validate({"name": ["b"], "age": ["1"]})
        assert v.invalid_messages == {"name": "姓名长度不能小于2", "age": "年龄不能小于18"}
        assert v.valid_data == {"mobile": None}
        assert not v.is_valid()

    def test_is_valid_iff_no_messages(self) -> None:
        v = self._validator()
        assert v.validate({"name": ["bob"], "age": ["20"]}) is True
        assert v.is_valid()
        assert v.invalid_messages == {}
        assert v.get_required("age") == I64Value(20)

    def test_not_valid_before_validate(self) -> None:
        assert not self._validator().is_valid()
        assert Validator().is_valid()

    def test_repeat_validate_overwrites(self) -> None:
        """A field flips between maps without residue / 字段在两个映射间切换且无残留。"""
        v = self._validator()
        v.validate({"name": ["b"], "age": ["20"]})
        v.validate({"name": ["bob"], "age": ["20"]})
        assert "name" not in v.invalid_messages
        assert v.is_valid()

    def test_reset_matches_fresh_validator(self) -> None:
        first = {"name": ["b"], "age": ["x"], "mobile": ["13800138000"]}
        second = {"name": ["alice"], "age": ["30"]}
        reused = self._validator()
        reused.validate(first)
        reused.reset()
        assert reused.valid_data == {}
        assert reused.invalid_messages == {}
        reused.validate(second)
        fresh = self._validator()
        fresh.validate(second)
        assert reused.valid_data == fresh.valid_data
        assert reused.invalid_messages == fresh.invalid_messages

    def test_reset_keeps_checkers_and_renderer(self) -> None:
        v = Validator(EnglishMessageRenderer()).check(Checker("a", "A", Str()))
        v.validate({})
        v.reset()
        assert v.field_names == ["a"]
        assert isinstance(v.message_renderer, EnglishMessageRenderer)

    def test_logs_invalid_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        v = self._validator()
        with caplog.at_level(logging.DEBUG, logger="form_checker.validator"):
            v.validate({"name": ["b"], "age": ["20"]})
        assert any("name" in r.getMessage() for r in caplog.records)


class TestRegistration:
    """Checker registration.
    字段校验器注册。
    """

    def test_duplicate_name_rejected(self) -> None:
        v = Validator().check(Checker("a", "A", Str()))
        with pytest.raises(CheckerConfigError) as exc_info:
            v.check(Checker("a", "A2", I64()))
        assert exc_info.value.details == {"field": "a"}
        assert v.field_names == ["a"]

    def test_misconfigured_checker_rejected(self) -> None:
        with pytest.raises(CheckerConfigError):
            Validator().check(Checker("", "t", Str()))

    def test_not_a_checker(self) -> None:
        with pytest.raises(CheckerConfigError):
            Validator().check("name")  # type: ignore[arg-type]

    def test_check_all(self) -> None:
        v = Validator().check_all([Checker("a", "A", Str()), Checker("b", "B", Str())])
        assert v.field_names == ["a", "b"]


class TestAccessors:
    """Accessor preconditions.
    访问器前置条件。
    """

    def test_unregistered(self) -> None:
        v = Validator()
        v.validate({})
        with pytest.raises(FieldAccessError):
            v.get_required("nope")
        with pytest.raises(FieldAccessError):
            v.get_optional("nope")

    def test_invalid_field(self, age_validator: Validator) -> None:
        age_validator.validate({"age": ["1"]})
        for getter in (
            age_validator.get_required,
            age_validator.get_optional,
            age_validator.get_required_multiple,
            age_validator.get_optional_multiple,
        ):
            with pytest.raises(FieldAccessError):
                getter("age")

    def test_get_error_on_valid_field(self, age_validator: Validator) -> None:
        age_validator.validate({"age": ["3"]})
        with pytest.raises(FieldAccessError):
            age_validator.get_error("age")

    def test_field_access_error_is_lookup_error(self, age_validator: Validator) -> None:
        with pytest.raises(LookupError):
            age_validator.get_required("age")


class TestReport:
    """Tests for report().
    report() 测试。
    """

    def test_report(self) -> None:
        v = (
            Validator()
            .check(Checker("name", "姓名", Str()))
            .check(Checker("age", "年龄", I64()).meet(Min(18)))
            .check(Checker("tags", "标签", Str(), optional=True, multiple=True))
        )
        v.validate({"name": ["bob"], "age": ["3"]})
        report = v.report()
        assert isinstance(report, ValidationReport)
        assert report.valid is False
        assert report.data == {"name": ["bob"], "tags": None}
        assert report.errors == {"age": "年龄不能小于18"}

    def test_report_keeps_int_type(self) -> None:
        v = Validator().check(Checker("ids", "ids", I64(), multiple=True))
        v.validate({"ids": ["1", "2"]})
        assert v.report().model_dump() == {"valid": True, "data": {"ids": [1, 2]}, "errors": {}}
