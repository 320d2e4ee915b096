"""核心模块 - Token系统、扫描器、调度场引擎和栈归约器"""
from .errors import (
    ErrorKind, ConversionError, MismatchedParenUnexpectedClose,
    MismatchedParenUnclosed, InvalidCharacter, InvalidToken,
    InsufficientOperands, MalformedExpression, EmptyInput
)
from .token_system import (
    TokenType, Token, Classifier, DEFAULT_CLASSIFIER,
    is_operator, is_operand, precedence
)
from .tokenizer import InfixTokenizer, AccumulatorState, tokenize_infix, split_linear
from .shunting_yard import ShuntingYard
from .stack_evaluator import StackEvaluator

__all__ = [
    'ErrorKind', 'ConversionError', 'MismatchedParenUnexpectedClose',
    'MismatchedParenUnclosed', 'InvalidCharacter', 'InvalidToken',
    'InsufficientOperands', 'MalformedExpression', 'EmptyInput',
    'TokenType', 'Token', 'Classifier', 'DEFAULT_CLASSIFIER',
    'is_operator', 'is_operand', 'precedence',
    'InfixTokenizer', 'AccumulatorState', 'tokenize_infix', 'split_linear',
    'ShuntingYard', 'StackEvaluator'
]
