"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-02-10
@Docs: Pydantic schemas for validation results.
校验结果的 Pydantic 模型。
"""

from pydantic import BaseModel, ConfigDict, Field


class ValidationReport(BaseModel):
    """
    Validation report.
    校验报告。

    A serializable snapshot of one `Validator.validate` run.
    一次 `Validator.validate` 运行的可序列化快照。

    Attributes:
        valid: Whether every field is valid.
        valid: 是否所有字段均有效。
        data: Field name -> plain values, None for optional missing fields.
        data: 字段名 -> 原始类型值列表；可选且缺失的字段为 None。
        errors: Field name -> rendered message.
        errors: 字段名 -> 渲染后的消息。
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    data: dict[str, list[str | int] | None] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
