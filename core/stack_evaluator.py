"""前缀/后缀表达式栈归约器 - 生成全括号中缀字符串"""
import logging

from core.errors import EmptyInput, InsufficientOperands, InvalidToken, MalformedExpression
from core.token_system import DEFAULT_CLASSIFIER

logger = logging.getLogger(__name__)


class StackEvaluator:
    """把前缀或后缀片段序列归约为 (left OP right) 形式的中缀"""

    def __init__(self, classifier=None):
        self.classifier = classifier or DEFAULT_CLASSIFIER

    def from_prefix(self, fragments):
        """
        从右向左扫描前缀序列。
        第一次出栈的是左操作数，第二次是右操作数。
        """
        return self._reduce(reversed(fragments), left_first=True, count=len(fragments))

    def from_postfix(self, fragments):
        """
        从左向右扫描后缀序列。
        第一次出栈的是右操作数，第二次是左操作数。
        """
        return self._reduce(iter(fragments), left_first=False, count=len(fragments))

    def _reduce(self, fragments, left_first, count):
        if count == 0:
            raise EmptyInput()

        stack = []
        for fragment in fragments:
            try:
                token = self.classifier.classify(fragment)
            except InvalidToken:
                logger.debug(f"Unrecognized fragment: {fragment!r}")
                raise

            if token.is_operand:
                stack.append(token.text)

            elif token.is_operator:
                if len(stack) < 2:
                    raise InsufficientOperands(
                        f"Invalid expression: insufficient operands for operator '{token.text}'"
                    )
                first = stack.pop()
                second = stack.pop()
                left, right = (first, second) if left_first else (second, first)
                stack.append(f"({left} {token.text} {right})")

            else:
                # 前缀/后缀中不允许出现括号
                raise InvalidToken(fragment)

        if len(stack) != 1:
            raise MalformedExpression(
                f"Invalid expression format: {len(stack)} operands left after reduction"
            )
        return stack[0]
