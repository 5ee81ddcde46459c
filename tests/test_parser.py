"""
Command parser tests.

Run with: python -m pytest tests/test_parser.py -v
"""

import unittest

from witsh.exceptions import ShellSyntaxError
from witsh.shell.parser import CommandParser, ParsedCommand, TokenType


class TestTokenize(unittest.TestCase):

    def setUp(self):
        self.parser = CommandParser()

    def test_words_and_operator(self):
        tokens = self.parser.tokenize("ls -l > out")
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.WORD, TokenType.WORD, TokenType.REDIRECT_OUT, TokenType.WORD]
        )
        self.assertEqual([t.value for t in tokens], ["ls", "-l", ">", "out"])

    def test_any_whitespace_separates(self):
        tokens = self.parser.tokenize(" a\tb \r c ")
        self.assertEqual([t.value for t in tokens], ["a", "b", "c"])

    def test_glued_operator_is_a_word(self):
        """Test that only a bare '>' token is an operator."""
        tokens = self.parser.tokenize("a>b")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.WORD)


class TestParse(unittest.TestCase):

    def setUp(self):
        self.parser = CommandParser()

    def test_simple_command(self):
        cmd = self.parser.parse("ls -la /home")

        self.assertEqual(cmd.argv, ["ls", "-la", "/home"])
        self.assertEqual(cmd.command, "ls")
        self.assertEqual(cmd.args, ["-la", "/home"])
        self.assertIsNone(cmd.redirect)
        self.assertFalse(cmd.has_redirect)

    def test_redirection(self):
        cmd = self.parser.parse("echo hello > output.txt")

        self.assertEqual(cmd.argv, ["echo", "hello"])
        self.assertEqual(cmd.redirect, "output.txt")
        self.assertTrue(cmd.has_redirect)

    def test_redirection_without_arguments(self):
        self.assertEqual(
            self.parser.parse("pwd > out"),
            ParsedCommand(argv=["pwd"], redirect="out")
        )

    def test_blank_segment_is_noop(self):
        self.assertIsNone(self.parser.parse(""))
        self.assertIsNone(self.parser.parse("   \t"))

    def test_multiple_redirections(self):
        with self.assertRaises(ShellSyntaxError):
            self.parser.parse("cmd > a > b")

    def test_redirection_without_command(self):
        with self.assertRaises(ShellSyntaxError):
            self.parser.parse("> cmd")

    def test_redirection_without_target(self):
        with self.assertRaises(ShellSyntaxError):
            self.parser.parse("cmd args >")

    def test_redirection_with_two_targets(self):
        with self.assertRaises(ShellSyntaxError):
            self.parser.parse("cmd > a b")

    def test_lone_operator(self):
        with self.assertRaises(ShellSyntaxError):
            self.parser.parse(">")

    def test_syntax_error_carries_segment(self):
        with self.assertRaises(ShellSyntaxError) as ctx:
            self.parser.parse("ls > a > b")
        self.assertEqual(ctx.exception.segment, "ls > a > b")
        self.assertEqual(ctx.exception.error_code, 1002)


if __name__ == '__main__':
    unittest.main()
