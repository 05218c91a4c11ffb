"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: values.py
@DateTime: 2026-02-10
@Docs: Typed values produced by field types.
字段类型解析出的类型化值。
"""

from dataclasses import dataclass

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class FieldValue:
    """Base class of the typed field value variants.
    类型化字段值各变体的基类。

    Exactly one concrete variant is produced per field occurrence:
    `StrValue` or `I64Value`.
    每次字段出现只产生一个具体变体：`StrValue` 或 `I64Value`。
    """

    __slots__ = ()

    def as_str(self) -> str | None:
        """Return the str primitive, or None for other variants.
        返回字符串原始值；其他变体返回 None。
        """
        return None

    def as_i64(self) -> int | None:
        """Return the integer primitive, or None for other variants.
        返回整数原始值；其他变体返回 None。
        """
        return None


@dataclass(frozen=True, slots=True)
class StrValue(FieldValue):
    """A str value.
    字符串值。
    """

    value: str

    def as_str(self) -> str | None:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class I64Value(FieldValue):
    """A signed 64-bit integer value.
    有符号 64 位整数值。
    """

    value: int

    def __post_init__(self) -> None:
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError(f"Integer out of i64 range: {self.value} / 整数超出 i64 范围: {self.value}")

    def as_i64(self) -> int | None:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
