"""Unit tests for parser module."""

import unittest

from bulat_pkg.parser import iter_tokens, normalize_sign_run, parse, to_postfix
from bulat_pkg.types import ErrorKind, ExpressionError


class TestTokenize(unittest.TestCase):
    """Test scanning lines into tokens."""

    def test_space_separated(self):
        self.assertEqual(list(iter_tokens("2 + 3")), ["2", "+", "3"])

    def test_repeated_spaces(self):
        self.assertEqual(list(iter_tokens("  a   *  10 ")), ["a", "*", "10"])

    def test_parentheses_are_single_tokens(self):
        self.assertEqual(
            list(iter_tokens("((a) + 1)")),
            ["(", "(", "a", ")", "+", "1", ")"],
        )

    def test_operand_runs_until_space_or_parenthesis(self):
        # Operators are not delimiters
        self.assertEqual(list(iter_tokens("(2+3)")), ["(", "2+3", ")"])

    def test_malformed_operator_token(self):
        with self.assertRaises(ExpressionError) as cm:
            list(iter_tokens("2 ** 3"))
        self.assertEqual(cm.exception.code, "MALFORMED_OPERATOR")
        with self.assertRaises(ExpressionError):
            list(iter_tokens("2 // 3"))

    def test_spaced_sign_runs_are_joined(self):
        self.assertEqual(list(iter_tokens("5 - - 3")), ["5", "+", "3"])
        self.assertEqual(list(iter_tokens("5 - - - 3")), ["5", "-", "3"])
        self.assertEqual(list(iter_tokens("5 + + + 3")), ["5", "+", "3"])

    def test_sign_before_literal_is_not_joined(self):
        self.assertEqual(list(iter_tokens("5 - -3")), ["5", "-", "-3"])

    def test_tokens_are_lazy(self):
        tokens = iter_tokens("1 + 2 ** 3")
        self.assertEqual(next(tokens), "1")
        self.assertEqual(next(tokens), "+")
        self.assertEqual(next(tokens), "2")
        with self.assertRaises(ExpressionError):
            next(tokens)


class TestNormalizeSignRun(unittest.TestCase):
    """Test collapsing of unary sign chains."""

    def test_single_characters_unchanged(self):
        for token in ("+", "-", "*", "/", "^", "a", "7"):
            self.assertEqual(normalize_sign_run(token), token)

    def test_plus_runs(self):
        self.assertEqual(normalize_sign_run("++"), "+")
        self.assertEqual(normalize_sign_run("+++"), "+")
        self.assertEqual(normalize_sign_run("+-"), "+")

    def test_minus_runs(self):
        self.assertEqual(normalize_sign_run("--"), "+")
        self.assertEqual(normalize_sign_run("---"), "-")
        self.assertEqual(normalize_sign_run("----"), "+")
        self.assertEqual(normalize_sign_run("-+"), "+")

    def test_signed_literals(self):
        self.assertEqual(normalize_sign_run("-3"), "-3")
        self.assertEqual(normalize_sign_run("--3"), "3")
        self.assertEqual(normalize_sign_run("+12"), "12")

    def test_malformed_signed_operand_code(self):
        with self.assertRaises(ExpressionError) as cm:
            normalize_sign_run("-a")
        self.assertEqual(cm.exception.code, "MALFORMED_OPERAND")

    def test_malformed_tokens(self):
        for token in ("*2", "/a", "^^", "-a", "+-x", "-3a"):
            with self.assertRaises(ExpressionError, msg=token):
                normalize_sign_run(token)


class TestToPostfix(unittest.TestCase):
    """Test shunting-yard conversion."""

    def assertPostfix(self, line, expected):
        result = parse(line)
        self.assertTrue(result.ok, f"{line!r} failed with {result.error}")
        self.assertEqual(result.value, expected)

    def test_single_operand(self):
        self.assertPostfix("42", ["42"])

    def test_precedence(self):
        self.assertPostfix("2 + 3 * 4", ["2", "3", "4", "*", "+"])
        self.assertPostfix("2 * 3 + 4", ["2", "3", "*", "4", "+"])

    def test_parentheses_override_precedence(self):
        self.assertPostfix("(2 + 3) * 4", ["2", "3", "+", "4", "*"])
        self.assertPostfix("2 * (3 + 4)", ["2", "3", "4", "+", "*"])

    def test_left_associative(self):
        self.assertPostfix("8 - 2 - 1", ["8", "2", "-", "1", "-"])
        self.assertPostfix("2 ^ 3 ^ 2", ["2", "3", "^", "2", "^"])

    def test_power_binds_tightest(self):
        self.assertPostfix("2 * 3 ^ 2", ["2", "3", "2", "^", "*"])

    def test_equal_priority_pops_down_to_parenthesis(self):
        self.assertPostfix("1 + 2 * 3 * 4", ["1", "2", "3", "*", "+", "4", "*"])
        self.assertPostfix(
            "1 + (2 * 3 * 4)", ["1", "2", "3", "*", "4", "*", "+"]
        )

    def test_nested_parentheses(self):
        self.assertPostfix(
            "((1 + 2) * (3 - 4))", ["1", "2", "+", "3", "4", "-", "*"]
        )

    def test_accepts_token_list(self):
        result = to_postfix(["a", "+", "b"])
        self.assertTrue(result.ok)
        self.assertEqual(result.value, ["a", "b", "+"])

    def test_unbalanced_open(self):
        result = parse("(1 + 2")
        self.assertFalse(result.ok)
        self.assertEqual(result.error, ErrorKind.INVALID_EXPRESSION)

    def test_unbalanced_close(self):
        for line in ("1 + 2)", ")", "(1 + 2))"):
            result = parse(line)
            self.assertFalse(result.ok, line)
            self.assertEqual(result.error, ErrorKind.INVALID_EXPRESSION)

    def test_tokenizer_error_becomes_result(self):
        result = parse("3 *** 3")
        self.assertFalse(result.ok)
        self.assertEqual(result.error, ErrorKind.INVALID_EXPRESSION)


if __name__ == "__main__":
    unittest.main()
