"""core/errors.py - 转换错误类型"""
from enum import Enum


class ErrorKind(Enum):
    # 结构性错误
    MISMATCHED_PAREN_UNEXPECTED_CLOSE = "MismatchedParenUnexpectedClose"
    MISMATCHED_PAREN_UNCLOSED = "MismatchedParenUnclosed"
    INSUFFICIENT_OPERANDS = "InsufficientOperands"
    MALFORMED_EXPRESSION = "MalformedExpression"
    # 词法错误
    INVALID_CHARACTER = "InvalidCharacter"
    INVALID_TOKEN = "InvalidToken"
    # 空输入（门面层视为成功的空结果）
    EMPTY_INPUT = "EmptyInput"


class ConversionError(ValueError):
    """
    所有转换失败的基类。
    每个实例携带一个ErrorKind；internal=True 表示在组合转换的中间中缀阶段失败
    （即求值器生成了非法中缀，而不是用户输入有误）。
    """
    kind = None
    default_message = "Conversion failed"

    def __init__(self, message=None, internal=False):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.internal = internal

    def __str__(self):
        return self.message


class MismatchedParenUnexpectedClose(ConversionError):
    kind = ErrorKind.MISMATCHED_PAREN_UNEXPECTED_CLOSE
    default_message = "Mismatched parentheses: Unexpected ')'"


class MismatchedParenUnclosed(ConversionError):
    kind = ErrorKind.MISMATCHED_PAREN_UNCLOSED
    default_message = "Mismatched parentheses: Unclosed '('"


class InsufficientOperands(ConversionError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS
    default_message = "Invalid expression: insufficient operands for operator"


class MalformedExpression(ConversionError):
    kind = ErrorKind.MALFORMED_EXPRESSION
    default_message = "Invalid expression format"


class InvalidCharacter(ConversionError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char, message=None, internal=False):
        self.char = char
        super().__init__(message or f"Invalid character in expression: {char}", internal=internal)


class InvalidToken(ConversionError):
    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token, message=None, internal=False):
        self.token = token
        super().__init__(message or f"Invalid token in expression: {token}", internal=internal)


class EmptyInput(ConversionError):
    kind = ErrorKind.EMPTY_INPUT
    default_message = "Input expression is empty"
