"""core/tokenizer.py - 中缀扫描器与线性（前缀/后缀）分割器"""
import logging
import string
from enum import Enum

from core.errors import InvalidCharacter
from core.token_system import DEFAULT_CLASSIFIER, PAREN_TOKENS, Token, TokenType

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
DECIMAL_POINT = "."


class AccumulatorState(Enum):
    EMPTY = "empty"
    NUMBER = "number"  # 数字或小数
    IDENTIFIER = "identifier"  # 多字母标识符


class InfixTokenizer:
    """从左到右单遍扫描中缀字符串，生成Token序列"""

    def __init__(self, classifier=None):
        self.classifier = classifier or DEFAULT_CLASSIFIER

    def tokenize(self, text):
        """
        Args:
            text: 原始中缀字符串，可以包含空白
        Returns:
            Token列表
        Raises:
            InvalidCharacter: 遇到无法识别的字符
        """
        tokens = []
        buffer = []
        state = AccumulatorState.EMPTY

        def flush():
            if buffer:
                tokens.append(Token(TokenType.OPERAND, "".join(buffer)))
                buffer.clear()
            return AccumulatorState.EMPTY

        for i, char in enumerate(text):
            if char.isspace():
                state = flush()

            elif char in DIGITS or (char == DECIMAL_POINT and text[i + 1:i + 2] in DIGITS):
                # 标识符后紧跟数字：先结束标识符
                if state == AccumulatorState.IDENTIFIER:
                    state = flush()
                buffer.append(char)
                state = AccumulatorState.NUMBER

            elif char in self.classifier.operator_tokens:
                state = flush()
                tokens.append(self.classifier.operator_tokens[char])

            elif char in PAREN_TOKENS:
                state = flush()
                tokens.append(PAREN_TOKENS[char])

            elif char in LETTERS:
                # 数字后紧跟字母：结束数字，开始新的标识符
                if state == AccumulatorState.NUMBER:
                    state = flush()
                buffer.append(char)
                state = AccumulatorState.IDENTIFIER

            else:
                raise InvalidCharacter(char)

        flush()
        logger.debug(f"Tokenized infix into {len(tokens)} tokens")
        return tokens


def split_linear(text):
    """按空白分割前缀/后缀表达式；空输入返回空列表"""
    return text.split()


_default_tokenizer = InfixTokenizer()


def tokenize_infix(text):
    return _default_tokenizer.tokenize(text)
