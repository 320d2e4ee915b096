"""core/shunting_yard.py - 中缀到后缀/前缀的调度场算法"""
import logging

from core.errors import MismatchedParenUnclosed, MismatchedParenUnexpectedClose
from core.token_system import DEFAULT_CLASSIFIER, TokenType

logger = logging.getLogger(__name__)


class ShuntingYard:
    """
    调度场引擎。
    后缀：栈顶优先级 >= 当前操作符时出栈（同级左结合）。
    前缀：反转记号并互换括号后运行同一算法，但只在 > 时出栈，最后再反转输出。
    两种比较不能合并，否则前缀路径的左结合会被反转。
    """

    def __init__(self, classifier=None):
        self.classifier = classifier or DEFAULT_CLASSIFIER

    def to_postfix(self, tokens):
        """中缀Token序列 -> 后缀Token序列"""
        output = self._run(tokens, strict=False)
        logger.debug(f"Postfix output has {len(output)} tokens")
        return output

    def to_prefix(self, tokens):
        """中缀Token序列 -> 前缀Token序列"""
        mirrored = [token.mirrored() for token in reversed(tokens)]
        try:
            output = self._run(mirrored, strict=True)
        except MismatchedParenUnexpectedClose as e:
            # 反转后多余的 ')' 对应原式中未匹配的 '('
            raise MismatchedParenUnexpectedClose(
                "Mismatched parentheses: Unexpected '(' in original expression",
                internal=e.internal
            ) from e
        except MismatchedParenUnclosed as e:
            raise MismatchedParenUnclosed(
                "Mismatched parentheses: Unclosed ')' in original expression",
                internal=e.internal
            ) from e
        output.reverse()
        logger.debug(f"Prefix output has {len(output)} tokens")
        return output

    def _should_pop(self, top, op, strict):
        top_rank = self.classifier.precedence(top)
        op_rank = self.classifier.precedence(op)
        if strict:
            return top_rank > op_rank
        return top_rank >= op_rank

    def _run(self, tokens, strict):
        stack = []
        output = []

        for token in tokens:
            if token.is_operand:
                output.append(token)

            elif token.type == TokenType.LEFT_PAREN:
                stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while stack and stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParenUnexpectedClose()
                stack.pop()  # 丢弃匹配的 '('

            else:
                while (stack and stack[-1].type != TokenType.LEFT_PAREN
                       and self._should_pop(stack[-1], token, strict)):
                    output.append(stack.pop())
                stack.append(token)

        while stack:
            top = stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                raise MismatchedParenUnclosed()
            output.append(top)

        return output
