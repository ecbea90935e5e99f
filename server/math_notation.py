#!/usr/bin/env python3
"""
Math Notation Converter
Rewrites $...$ and $$...$$ spans in Markdown into Unicode approximations
so a plain Markdown renderer can display them without a math engine
"""

import logging
import re
from typing import Dict, List, NamedTuple, Optional, Tuple

from math_symbols import GREEK_LETTERS, MATH_SYMBOLS, SUPERSCRIPT_DIGITS, SUBSCRIPT_DIGITS

logger = logging.getLogger(__name__)

BLOCK = 'block'
INLINE = 'inline'

BLOCK_MATH_PATTERN = re.compile(r'\$\$([^$]+)\$\$')
INLINE_MATH_PATTERN = re.compile(r'\$([^$]+)\$')

SUPERSCRIPT_PATTERN = re.compile(r'\^([0-9])')
SUBSCRIPT_PATTERN = re.compile(r'_([0-9])')
FRACTION_PATTERN = re.compile(r'\\frac\{([^}]+)\}\{([^}]+)\}')

BLOCK_TOKEN = '[BLOCKMATH_{index}]'
BLOCK_PLACEHOLDER = '\n\n' + BLOCK_TOKEN + '\n\n'

_LINE_BREAK = re.compile(r'\r\n|\n|\r')


class MathSegment(NamedTuple):
    """A delimited math span found in a document"""
    kind: str
    body: str
    source: str

    @property
    def is_block(self) -> bool:
        return self.kind == BLOCK


def find_block_segments(text: str) -> List[MathSegment]:
    """All non-overlapping $$...$$ spans, in document order"""
    return [MathSegment(BLOCK, m.group(1), m.group(0))
            for m in BLOCK_MATH_PATTERN.finditer(text)]


def find_inline_segments(text: str) -> List[MathSegment]:
    """
    All non-overlapping $...$ spans, in document order.
    Run this on text whose block spans were already replaced,
    otherwise $$x$$ is read as an inline $x$ between stray dollars.
    """
    return [MathSegment(INLINE, m.group(1), m.group(0))
            for m in INLINE_MATH_PATTERN.finditer(text)]


def _longest_first(table: Dict[str, str]) -> List[Tuple[str, str]]:
    # \cdot must not eat the front of \cdots, \in the front of \int, ...
    return sorted(table.items(), key=lambda item: len(item[0]), reverse=True)


def _indent_width(line: str) -> int:
    for index, char in enumerate(line):
        if not char.isspace():
            return index
    return len(line)


def trim_indent(text: str) -> str:
    """
    Remove the common indentation of all non-blank lines.
    A blank first or last line is dropped entirely.
    """
    lines = _LINE_BREAK.split(text)
    indents = [_indent_width(line) for line in lines if line.strip()]
    min_indent = min(indents) if indents else 0

    last = len(lines) - 1
    trimmed = []
    for index, line in enumerate(lines):
        if index in (0, last) and not line.strip():
            continue
        trimmed.append(line[min_indent:])
    return '\n'.join(trimmed)


class MathNotationConverter:
    def __init__(self, greek: Optional[Dict[str, str]] = None,
                 symbols: Optional[Dict[str, str]] = None):
        self.greek = dict(GREEK_LETTERS if greek is None else greek)
        self.symbols = dict(MATH_SYMBOLS if symbols is None else symbols)
        self._greek_order = _longest_first(self.greek)
        self._symbol_order = _longest_first(self.symbols)

    def convert_symbols(self, latex: str) -> str:
        """
        Convert a LaTeX math body to Unicode.

        Greek letters, then operators, then single-digit superscripts and
        subscripts, then one level of \\frac{a}{b}. Anything unsupported
        is left as written: x^12 gives x¹2, \\frac{\\frac{a}{b}}{c} is not
        rewritten as a nested fraction.
        """
        result = latex.strip()

        for command, glyph in self._greek_order:
            result = result.replace(command, glyph)
        for command, glyph in self._symbol_order:
            result = result.replace(command, glyph)

        result = SUPERSCRIPT_PATTERN.sub(lambda m: SUPERSCRIPT_DIGITS[m.group(1)], result)
        result = SUBSCRIPT_PATTERN.sub(lambda m: SUBSCRIPT_DIGITS[m.group(1)], result)
        result = FRACTION_PATTERN.sub(r'(\1/\2)', result)

        return result

    def preprocess_document(self, text: str) -> str:
        """
        Replace math spans in a Markdown document.

        Block spans become [BLOCKMATH_<n>] paragraphs and their content is
        dropped. Inline spans are converted in place. Replacement is by
        value, so identical spans elsewhere in the text are replaced too.
        """
        processed = text

        blocks = find_block_segments(processed)
        for index, segment in enumerate(blocks):
            processed = processed.replace(segment.source, BLOCK_PLACEHOLDER.format(index=index))

        inlines = find_inline_segments(processed)
        for segment in inlines:
            processed = processed.replace(segment.source, self.convert_symbols(segment.body))

        logger.debug(f"Preprocessed {len(blocks)} block and {len(inlines)} inline math spans")
        return processed

    def resolve_block_placeholders(self, processed: str, blocks: List[MathSegment]) -> str:
        """
        Fill [BLOCKMATH_<n>] tokens with the converted body of the n-th block span.
        Replacement is by value, so a [BLOCKMATH_<n>] typed literally into
        the document is filled as well.
        """
        for index, segment in enumerate(blocks):
            processed = processed.replace(BLOCK_TOKEN.format(index=index),
                                          self.convert_symbols(segment.body))
        return processed

    def renderable_text(self, text: str) -> str:
        """Preprocessed document with its indentation trimmed, ready for a renderer"""
        return trim_indent(self.preprocess_document(text))


_default_converter = MathNotationConverter()


def convert_symbols(latex: str) -> str:
    return _default_converter.convert_symbols(latex)


def preprocess_document(text: str) -> str:
    return _default_converter.preprocess_document(text)


def renderable_text(text: str) -> str:
    return _default_converter.renderable_text(text)
