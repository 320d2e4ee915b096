"""转换门面 - 组合扫描器、调度场引擎和栈归约器"""
import logging
from enum import Enum
from typing import Optional

from config.config import CONVERTER_CONFIG
from core import (
    ConversionError, InfixTokenizer, ShuntingYard, StackEvaluator, split_linear
)

logger = logging.getLogger(__name__)

SEPARATOR = CONVERTER_CONFIG["token_separator"]

_tokenizer = InfixTokenizer()
_engine = ShuntingYard()
_evaluator = StackEvaluator()


class ConversionKind(Enum):
    INFIX_TO_POSTFIX = "infix-to-postfix"
    INFIX_TO_PREFIX = "infix-to-prefix"
    PREFIX_TO_POSTFIX = "prefix-to-postfix"
    POSTFIX_TO_PREFIX = "postfix-to-prefix"
    PREFIX_TO_INFIX = "prefix-to-infix"
    POSTFIX_TO_INFIX = "postfix-to-infix"

    @classmethod
    def parse(cls, kind):
        """接受枚举本身、取值（infix-to-postfix）或成员名（infix_to_postfix）"""
        if isinstance(kind, cls):
            return kind
        name = str(kind).strip()
        for member in cls:
            if name == member.value or name.upper() == member.name:
                return member
        raise ValueError(f"Unknown conversion kind '{kind}'. "
                         f"Available: {', '.join(m.value for m in cls)}")


class ConversionResult:
    """value 和 error 恰好有一个被设置"""

    def __init__(self, value: Optional[str] = None, error: Optional[ConversionError] = None):
        if (value is None) == (error is None):
            raise ValueError("ConversionResult needs exactly one of value or error")
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"ConversionResult(value={self.value!r})"
        return f"ConversionResult(error={self.error.kind.value}: {self.error})"


def _join(tokens):
    return SEPARATOR.join(str(token) for token in tokens)


def _is_blank(text):
    return not text or not text.strip()


def infix_to_postfix(text: str) -> str:
    if _is_blank(text):
        return ""
    return _join(_engine.to_postfix(_tokenizer.tokenize(text)))


def infix_to_prefix(text: str) -> str:
    if _is_blank(text):
        return ""
    return _join(_engine.to_prefix(_tokenizer.tokenize(text)))


def prefix_to_infix(text: str) -> str:
    if _is_blank(text):
        return ""
    return _evaluator.from_prefix(split_linear(text))


def postfix_to_infix(text: str) -> str:
    if _is_blank(text):
        return ""
    return _evaluator.from_postfix(split_linear(text))


def _reconvert_infix(infix, target):
    """
    组合转换的第二阶段：重新扫描求值器生成的中缀。
    这里失败说明中间结果不合法（内部不变量被破坏），而不是用户输入有误。
    """
    try:
        return target(infix)
    except ConversionError as e:
        e.internal = True
        logger.error(f"Internal invariant violated: intermediate infix '{infix}' "
                     f"failed to convert ({e.kind.value}: {e})")
        raise


def prefix_to_postfix(text: str) -> str:
    if _is_blank(text):
        return ""
    infix = prefix_to_infix(text)
    logger.debug(f"Intermediate infix: {infix}")
    return _reconvert_infix(infix, infix_to_postfix)


def postfix_to_prefix(text: str) -> str:
    if _is_blank(text):
        return ""
    infix = postfix_to_infix(text)
    logger.debug(f"Intermediate infix: {infix}")
    return _reconvert_infix(infix, infix_to_prefix)


OPERATIONS = {
    ConversionKind.INFIX_TO_POSTFIX: infix_to_postfix,
    ConversionKind.INFIX_TO_PREFIX: infix_to_prefix,
    ConversionKind.PREFIX_TO_POSTFIX: prefix_to_postfix,
    ConversionKind.POSTFIX_TO_PREFIX: postfix_to_prefix,
    ConversionKind.PREFIX_TO_INFIX: prefix_to_infix,
    ConversionKind.POSTFIX_TO_INFIX: postfix_to_infix,
}


def convert(kind, text):
    """
    单次同步转换，供UI/CLI/批量任务调用。

    Args:
        kind: ConversionKind 或其名称
        text: 输入表达式
    Returns:
        ConversionResult；空白输入返回空字符串结果而非错误
    Raises:
        ValueError: 未知的转换类型
    """
    operation = OPERATIONS[ConversionKind.parse(kind)]
    try:
        return ConversionResult(value=operation(text))
    except ConversionError as e:
        logger.debug(f"Conversion failed ({e.kind.value}): {e}")
        return ConversionResult(error=e)
