"""core/token_system.py"""
import re
from collections import namedtuple
from enum import Enum

from config.config import CONVERTER_CONFIG
from core.errors import InvalidToken

LEFT_PAREN = CONVERTER_CONFIG["left_paren"]
RIGHT_PAREN = CONVERTER_CONFIG["right_paren"]

# 操作数字面量：纯字母标识符，或数字串（每个小数点后必须紧跟数字）
_OPERAND_LITERAL = re.compile(r'^(?:[A-Za-z]+|\.?[0-9]+(?:\.[0-9]+)*)$')


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 二元操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token(namedtuple("Token", "type text")):
    """不可变的记号：类型 + 原文"""
    __slots__ = ()

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def mirrored(self):
        """括号在反转扫描方向时需要互换"""
        if self.type == TokenType.LEFT_PAREN:
            return PAREN_TOKENS[RIGHT_PAREN]
        if self.type == TokenType.RIGHT_PAREN:
            return PAREN_TOKENS[LEFT_PAREN]
        return self

    def __str__(self):
        return self.text


PAREN_TOKENS = {
    LEFT_PAREN: Token(TokenType.LEFT_PAREN, LEFT_PAREN),
    RIGHT_PAREN: Token(TokenType.RIGHT_PAREN, RIGHT_PAREN),
}


class Classifier:
    """
    操作符分类与优先级查询。
    优先级表可注入，引擎只通过这里比较优先级，不依赖具体的操作符集合。
    """

    def __init__(self, precedence_table=None):
        table = CONVERTER_CONFIG["operator_precedence"] if precedence_table is None else precedence_table
        self.precedence_table = dict(table)
        self.operator_tokens = {
            symbol: Token(TokenType.OPERATOR, symbol) for symbol in self.precedence_table
        }

    def is_operator(self, token):
        return str(token) in self.precedence_table

    def is_paren(self, token):
        return str(token) in PAREN_TOKENS

    def is_operand(self, token):
        """不是操作符也不是括号的都视为操作数"""
        return not self.is_operator(token) and not self.is_paren(token)

    def precedence(self, token):
        """操作符的优先级；括号等非操作符返回0（栈比较时的哨兵）"""
        return self.precedence_table.get(str(token), 0)

    @staticmethod
    def is_operand_literal(text):
        return bool(_OPERAND_LITERAL.match(text))

    def classify(self, text):
        """把单个片段转换为Token；无法识别的片段抛出InvalidToken"""
        if text in self.operator_tokens:
            return self.operator_tokens[text]
        if text in PAREN_TOKENS:
            return PAREN_TOKENS[text]
        if self.is_operand_literal(text):
            return Token(TokenType.OPERAND, text)
        raise InvalidToken(text)


DEFAULT_CLASSIFIER = Classifier()


def is_operator(token):
    return DEFAULT_CLASSIFIER.is_operator(token)


def is_operand(token):
    return DEFAULT_CLASSIFIER.is_operand(token)


def precedence(token):
    return DEFAULT_CLASSIFIER.precedence(token)
