"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-10
@Docs: Optional framework integrations.
可选框架集成。

Import submodules explicitly, e.g. `form_checker.contrib.fastapi`.
请显式导入子模块，例如 `form_checker.contrib.fastapi`。
"""
