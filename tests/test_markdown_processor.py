from markdown_processor import MarkdownProcessor
from math_notation import MathNotationConverter


def test_prepare_converts_inline_math():
    processor = MarkdownProcessor()
    assert processor.prepare("Energy: $E = mc^2$") == "Energy: E = mc²"


def test_prepare_without_latex_only_trims():
    processor = MarkdownProcessor()
    assert processor.prepare("\n    $x^2$\n    ", enable_latex=False) == "$x^2$"


def test_prepare_keeps_block_placeholders_by_default():
    processor = MarkdownProcessor()
    result = processor.prepare("Sum:\n\n$$\\sum x_1$$")
    assert "[BLOCKMATH_0]" in result
    assert "∑" not in result


def test_prepare_can_resolve_block_math():
    processor = MarkdownProcessor(resolve_block_math=True)
    result = processor.prepare("Sum:\n\n$$\\sum x_1$$")
    assert result == "Sum:\n\n\n\n∑ x₁\n"


def test_prepare_uses_given_converter():
    processor = MarkdownProcessor(converter=MathNotationConverter(symbols={r"\hbar": "ℏ"}))
    assert processor.prepare(r"$\hbar$") == "ℏ"


def test_convert_renders_html():
    processor = MarkdownProcessor()
    html = processor.convert("# Title\n\nEinstein: $E = mc^2$")
    assert "<h1>Title</h1>" in html
    assert "<p>Einstein: E = mc²</p>" in html


def test_convert_keeps_placeholder_paragraph():
    html = MarkdownProcessor().convert("$$x+y$$")
    assert "<p>[BLOCKMATH_0]</p>" in html
    assert "x+y" not in html


def test_convert_renders_tables():
    text = "| a | b |\n|---|---|\n| $\\alpha$ | $\\beta$ |"
    html = MarkdownProcessor().convert(text)
    assert "<table>" in html
    assert "<td>α</td>" in html


def test_convert_uses_cache():
    processor = MarkdownProcessor()
    first = processor.convert("$x^2$")
    second = processor.convert("$x^2$")
    assert first == second
    assert processor.cache_hits == 1

    processor.convert("$x^2$", force=True)
    assert processor.cache_hits == 1


def test_cache_key_includes_settings():
    processor = MarkdownProcessor()
    with_latex = processor.convert("$x^2$")
    without_latex = processor.convert("$x^2$", enable_latex=False)
    assert "x²" in with_latex
    assert "$x^2$" in without_latex
    assert processor.cache_hits == 0


def test_cache_keeps_most_recent_entries():
    processor = MarkdownProcessor(cache_size=2)
    for text in ("$a$", "$b$", "$c$"):
        processor.convert(text)
    assert len(processor._content_cache) == 2

    processor.convert("$c$")
    assert processor.cache_hits == 1
    processor.convert("$a$")
    assert processor.cache_hits == 1


def test_clear_cache():
    processor = MarkdownProcessor()
    processor.convert("$a$")
    processor.convert("$a$")
    processor.clear_cache()
    assert processor.cache_hits == 0
    assert processor._content_cache == {}


def test_zero_cache_size_disables_caching():
    processor = MarkdownProcessor(cache_size=0)
    processor.convert("$a$")
    processor.convert("$a$")
    assert processor.cache_hits == 0


def test_cache_holds_rendered_html():
    processor = MarkdownProcessor()
    html = processor.convert("$a$")
    assert list(processor._content_cache.values()) == [html]
