"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-10
@Docs: Helpers for building validator input.
校验器输入构建辅助。
"""

from form_checker.helpers.params import params_from_mapping, params_from_pairs

__all__ = ["params_from_mapping", "params_from_pairs"]
