"""
Tests for the Lox token model and keyword table.
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS, lookup_keyword
)


class TestTokenModel(unittest.TestCase):
    """Test cases for Token."""

    def test_token_is_immutable(self):
        token = Token(TokenType.NUMBER, "1", 1.0, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.line = 2

    def test_tokens_compare_by_value(self):
        self.assertEqual(Token(TokenType.DOT, ".", None, 3), Token(TokenType.DOT, ".", None, 3))
        self.assertNotEqual(Token(TokenType.DOT, ".", None, 3), Token(TokenType.DOT, ".", None, 4))

    def test_str_without_literal(self):
        self.assertEqual(str(Token(TokenType.VAR, "var", None, 1)), "VAR('var')")
        self.assertEqual(str(Token(TokenType.EOF, "", None, 1)), "EOF('')")

    def test_str_with_literal(self):
        self.assertEqual(str(Token(TokenType.NUMBER, "12.5", 12.5, 1)), "NUMBER('12.5' -> 12.5)")
        self.assertEqual(str(Token(TokenType.STRING, '"hi"', "hi", 1)), "STRING('\"hi\"' -> 'hi')")

    def test_repr(self):
        token = Token(TokenType.IDENTIFIER, "x", None, 7)
        self.assertEqual(repr(token), "Token(IDENTIFIER, 'x', None, 7)")

    def test_category_properties(self):
        self.assertTrue(Token(TokenType.STRING, '""', "", 1).is_literal)
        self.assertFalse(Token(TokenType.IDENTIFIER, "x", None, 1).is_literal)
        self.assertTrue(Token(TokenType.WHILE, "while", None, 1).is_keyword)
        self.assertFalse(Token(TokenType.IDENTIFIER, "whilst", None, 1).is_keyword)
        self.assertTrue(Token(TokenType.EOF, "", None, 1).is_eof)


class TestKeywordTable(unittest.TestCase):
    """Test cases for the keyword table."""

    def test_all_sixteen_reserved_words(self):
        expected = {
            "and", "class", "else", "false", "for", "fun", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        }
        self.assertEqual(set(KEYWORDS), expected)
        for word in expected:
            self.assertEqual(KEYWORDS[word], TokenType[word.upper()])

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["let"] = TokenType.VAR

    def test_lookup_is_exact_and_case_sensitive(self):
        self.assertIs(lookup_keyword("class"), TokenType.CLASS)
        self.assertIs(lookup_keyword("Class"), TokenType.IDENTIFIER)
        self.assertIs(lookup_keyword("classy"), TokenType.IDENTIFIER)
        self.assertIs(lookup_keyword(""), TokenType.IDENTIFIER)

    def test_punctuation_tables_do_not_overlap(self):
        self.assertFalse(set(SINGLE_CHAR_TOKENS) & set(EQUAL_SUFFIX_TOKENS))
        self.assertNotIn("/", SINGLE_CHAR_TOKENS)


if __name__ == '__main__':
    unittest.main()
