"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: params.py
@DateTime: 2026-02-10
@Docs: Helpers to build the input mapping for a Validator.
构建 Validator 输入映射的辅助函数。
"""

from collections.abc import Iterable, Mapping
from typing import Any


def params_from_pairs(pairs: Iterable[tuple[str, Any]]) -> dict[str, list[str]]:
    """Group `(key, value)` pairs into field name -> values, keeping order.
    将 `(key, value)` 对按字段名分组，保持顺序。

    Suits decoded query strings, e.g. `urllib.parse.parse_qsl` output or
    Starlette's `QueryParams.multi_items()`.
    适用于已解码的查询串，例如 `urllib.parse.parse_qsl` 或 Starlette 的 `QueryParams.multi_items()`。

    Args:
        pairs: Iterable of key/value pairs.
            键值对可迭代对象。
    Returns:
        dict[str, list[str]]: Field name -> raw values.
            字段名 -> 原始取值列表。
    """
    params: dict[str, list[str]] = {}
    for key, value in pairs:
        params.setdefault(str(key), []).append(str(value))
    return params


def params_from_mapping(data: Mapping[str, Any]) -> dict[str, list[str]]:
    """Normalize a mapping whose values are scalars or sequences.
    规范化取值为标量或序列的映射。

    Scalars become one-element lists; None becomes an empty list.
    标量转换为单元素列表；None 转换为空列表。

    Args:
        data: Field name -> value or values.
            字段名 -> 单个值或多个值。
    Returns:
        dict[str, list[str]]: Field name -> raw values.
            字段名 -> 原始取值列表。
    """
    if not isinstance(data, Mapping):
        raise TypeError("params must be a mapping / 参数必须是映射")
    params: dict[str, list[str]] = {}
    for key, value in data.items():
        if value is None:
            params[str(key)] = []
        elif isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            params[str(key)] = [_text(value)]
        else:
            params[str(key)] = [_text(v) for v in value]
    return params


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
