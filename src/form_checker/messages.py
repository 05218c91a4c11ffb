"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: messages.py
@DateTime: 2026-02-10
@Docs: Validation failure messages and renderers.
校验失败消息与渲染器。

A failure is described abstractly (kind + interpolation data) and rendered
to a display string by a MessageRenderer. The default renderer speaks Simple
Chinese; pass another renderer to the Validator for other languages.
校验失败先以抽象形式描述（类型 + 插值数据），再由 MessageRenderer 渲染为展示文本。
默认渲染器输出简体中文；如需其他语言，请向 Validator 传入其他渲染器。

Examples:
        Custom renderer / 自定义渲染器:

        >>> class ShoutRenderer(MessageRenderer):
        ...     def blank(self, title: str) -> str:
        ...         return f"{title.upper()} IS REQUIRED"
        >>> ShoutRenderer().render_message(SomeMessage(kind=MessageKind.BLANK, name="age", title="age"))
        'AGE IS REQUIRED'
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class MessageKind(StrEnum):
    """Kinds of predefined messages.
    预定义消息类型。
    """

    MAX = "max"
    """Greater than the maximum value / 大于最大值。"""
    MIN = "min"
    """Less than the minimum value / 小于最小值。"""
    MAX_LEN = "max_len"
    """Longer than the maximum length / 长度大于最大长度。"""
    MIN_LEN = "min_len"
    """Shorter than the minimum length / 长度小于最小长度。"""
    BLANK = "blank"
    """Required but missing / 必填但缺失。"""
    FORMAT = "format"
    """Not in the expected format / 格式不符合。"""


@dataclass(frozen=True, slots=True)
class SomeMessage:
    """A predefined kind of message.
    预定义类型的消息。

    Attributes:
        kind: Message kind.
            消息类型。
        name: Field name.
            字段名。
        title: Field title used for display.
            用于展示的字段标题。
        value: Raw value, None when missing.
            原始值，缺失时为 None。
        rule_values: Rule parameters as strings, e.g. ("5",) for Max(5).
            规则参数（字符串形式），例如 Max(5) 为 ("5",)。
    """

    kind: MessageKind
    name: str
    title: str
    value: str | None = None
    rule_values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AnyMessage:
    """A literal message, shown as is.
    字面消息，按原样展示。
    """

    text: str


Message: TypeAlias = SomeMessage | AnyMessage


class MessageRenderer:
    """Render SomeMessage values into display strings (Simple Chinese).
    将 SomeMessage 渲染为展示文本（简体中文）。

    Override the per-kind methods to change a single message, or override
    `render_message` to take over entirely.
    重写对应类型的方法可修改单条消息；重写 `render_message` 可完全接管渲染。
    """

    def render_message(self, m: SomeMessage) -> str:
        """Render a message by dispatching on its kind.
        按消息类型分派渲染。

        Args:
            m: Message to render.
                待渲染消息。

        Returns:
            str: Display string.
                展示文本。
        """
        rule = m.rule_values[0] if m.rule_values else ""
        match m.kind:
            case MessageKind.MAX:
                return self.max(m.title, rule)
            case MessageKind.MIN:
                return self.min(m.title, rule)
            case MessageKind.MAX_LEN:
                return self.max_len(m.title, rule)
            case MessageKind.MIN_LEN:
                return self.min_len(m.title, rule)
            case MessageKind.BLANK:
                return self.blank(m.title)
            case MessageKind.FORMAT:
                return self.format(m.title)
        raise ValueError(f"Unknown message kind: {m.kind!r} / 未知消息类型: {m.kind!r}")

    def max(self, title: str, rule: str) -> str:
        return f"{title}不能大于{rule}"

    def min(self, title: str, rule: str) -> str:
        return f"{title}不能小于{rule}"

    def max_len(self, title: str, rule: str) -> str:
        return f"{title}长度不能大于{rule}"

    def min_len(self, title: str, rule: str) -> str:
        return f"{title}长度不能小于{rule}"

    def blank(self, title: str) -> str:
        return f"{title}不能为空"

    def format(self, title: str) -> str:
        return f"{title}格式不正确"


class EnglishMessageRenderer(MessageRenderer):
    """Render messages in English.
    以英文渲染消息。
    """

    def max(self, title: str, rule: str) -> str:
        return f"{title} can't be more than {rule}"

    def min(self, title: str, rule: str) -> str:
        return f"{title} can't be less than {rule}"

    def max_len(self, title: str, rule: str) -> str:
        return f"{title} can't be longer than {rule}"

    def min_len(self, title: str, rule: str) -> str:
        return f"{title} can't be shorter than {rule}"

    def blank(self, title: str) -> str:
        return f"{title} is missing"

    def format(self, title: str) -> str:
        return f"{title} is in wrong format"


def render_message(renderer: MessageRenderer, message: Message) -> str:
    """Render any message; literal messages bypass the renderer.
    渲染任意消息；字面消息不经过渲染器。

    Args:
        renderer: Renderer for predefined messages.
            预定义消息的渲染器。
        message: Message to render.
            待渲染消息。

    Returns:
        str: Display string.
            展示文本。
    """
    if isinstance(message, AnyMessage):
        return message.text
    return renderer.render_message(message)
