"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-02-10
@Docs: Shared test fixtures for the form-checker test suite.
测试套件的公共 fixtures。
"""

import pytest

from form_checker import I64, Checker, Max, Min, Str, Validator


@pytest.fixture
def username_checker() -> Checker:
    """Str checker with length 2..5.
    长度 2..5 的字符串校验器。
    """
    return Checker("username", "username", Str()).meet(Max(5)).meet(Min(2))


@pytest.fixture
def age_checker() -> Checker:
    """I64 checker with value 2..5.
    取值 2..5 的整数校验器。
    """
    return Checker("age", "age", I64()).meet(Max(5)).meet(Min(2))


@pytest.fixture
def username_validator(username_checker: Checker) -> Validator:
    """Validator with the username checker registered.
    已注册 username 校验器的 Validator。
    """
    return Validator().check(username_checker)


@pytest.fixture
def age_validator(age_checker: Checker) -> Validator:
    """Validator with the age checker registered.
    已注册 age 校验器的 Validator。
    """
    return Validator().check(age_checker)
