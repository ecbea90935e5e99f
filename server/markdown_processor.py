#!/usr/bin/env python3
"""
Markdown Processor
Runs math notation preprocessing and hands the result to Python-Markdown
Caches rendered output so unchanged documents are not processed twice
"""

import hashlib
import logging
from typing import Dict, List, Optional

import markdown

from math_notation import MathNotationConverter, find_block_segments, trim_indent

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = [
    'markdown.extensions.tables',
    'markdown.extensions.fenced_code',
    'markdown.extensions.sane_lists',
]


class MarkdownProcessor:
    def __init__(self, converter: Optional[MathNotationConverter] = None,
                 extensions: Optional[List[str]] = None,
                 resolve_block_math: bool = False, cache_size: int = 10):
        self.converter = converter or MathNotationConverter()
        self.extensions = list(DEFAULT_EXTENSIONS if extensions is None else extensions)
        self.resolve_block_math = resolve_block_math
        self.cache_size = cache_size

        # hash -> html
        self._content_cache: Dict[str, str] = {}
        self.cache_hits = 0

    def prepare(self, markdown_text: str, enable_latex: bool = True) -> str:
        """
        Markdown text exactly as it is handed to the renderer
        """
        if not enable_latex:
            return trim_indent(markdown_text)

        processed = self.converter.preprocess_document(markdown_text)
        if self.resolve_block_math:
            blocks = find_block_segments(markdown_text)
            processed = self.converter.resolve_block_placeholders(processed, blocks)
            logger.debug(f"Resolved {len(blocks)} block math placeholders")
        return trim_indent(processed)

    def convert(self, markdown_text: str, enable_latex: bool = True, force: bool = False) -> str:
        """
        Convert markdown to HTML
        Uses content hash for caching to avoid redundant processing
        """
        content_hash = self._hash_content(markdown_text, enable_latex)

        if not force and content_hash in self._content_cache:
            self.cache_hits += 1
            logger.debug(f"Cache hit for {content_hash}")
            return self._content_cache[content_hash]

        prepared = self.prepare(markdown_text, enable_latex)
        html = self.markdown_to_html(prepared)

        if self.cache_size <= 0:
            return html
        self._content_cache[content_hash] = html

        # Keep only the most recent entries
        if len(self._content_cache) > self.cache_size:
            oldest_keys = list(self._content_cache.keys())[:-self.cache_size]
            for key in oldest_keys:
                del self._content_cache[key]

        return html

    def markdown_to_html(self, text: str) -> str:
        md = markdown.Markdown(extensions=self.extensions)
        try:
            return md.convert(text)
        except Exception as e:
            logger.error(f"Markdown rendering failed: {e}", exc_info=True)
            raise

    def _hash_content(self, text: str, enable_latex: bool) -> str:
        """Generate hash of content and settings for cache key"""
        content = f"{text}|{enable_latex}|{self.resolve_block_math}"
        return hashlib.md5(content.encode()).hexdigest()

    def clear_cache(self):
        """Clear the conversion cache"""
        self._content_cache.clear()
        self.cache_hits = 0
