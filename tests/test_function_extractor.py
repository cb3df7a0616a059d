"""Tests for the function extractor."""

from src.application.services.function_extractor import extract_functions
from src.domain.entities.function_fragment import FunctionFragment, function_name


class TestNoMatches:
    def test_empty_input_yields_nothing(self):
        assert extract_functions("") == []

    def test_text_without_function_keyword_yields_nothing(self):
        assert extract_functions("<html><body><p>const x = () => 1;</p></body></html>") == []

    def test_unterminated_body_is_skipped(self):
        assert extract_functions("function broken() { if (x) {") == []

    def test_header_without_body_is_skipped(self):
        assert extract_functions("function declared(a, b);") == []

    def test_keyword_inside_identifier_is_not_a_header(self):
        assert extract_functions("var myfunction = 1; nofunction x() {}") == []


class TestBoundaries:
    def test_single_function(self):
        fragments = extract_functions("<script>function foo(){return 1;}</script>")
        assert fragments == [FunctionFragment(text="function foo(){return 1;}", name="foo")]

    def test_nested_blocks_do_not_end_fragment_early(self):
        source = "function a(x){ if (x) { return {k: 1}; } return 2; }\nfunction b(){}"
        fragments = extract_functions(source)

        assert [f.name for f in fragments] == ["a", "b"]
        assert fragments[0].text == "function a(x){ if (x) { return {k: 1}; } return 2; }\n"
        assert fragments[1].text == "function b(){}"

    def test_braces_in_strings_and_comments_are_ignored(self):
        source = "function s(){ var t = \"}\"; // }\n return '{' + `${t}}`; /* } */ }"
        fragments = extract_functions(source)

        assert len(fragments) == 1
        assert fragments[0].text == source

    def test_object_default_parameter(self):
        source = "function f(a = {}) { return a; }"
        assert extract_functions(source)[0].text == source

    def test_nested_function_stays_inside_parent(self):
        source = "function outer(){ function inner(){ return 1; } return inner(); }"
        fragments = extract_functions(source)

        assert [f.name for f in fragments] == ["outer"]
        assert fragments[0].text == source

    def test_document_order_is_preserved(self):
        source = (
            "<script>function zeta(){}</script><p>text</p>"
            "<script>async function alpha(x) { await x; }\n\nfunction mid () {}</script>"
        )
        assert [f.name for f in extract_functions(source)] == ["zeta", "alpha", "mid"]


class TestFunctionName:
    def test_first_identifier_after_keyword(self):
        assert function_name("function   handleClick(evt) {}") == "handleClick"

    def test_no_name(self):
        assert function_name("function (a) {}") is None
        assert FunctionFragment.from_text("function (a) {}") is None


class TestRegexLiterals:
    def test_quote_inside_regex(self):
        source = r"""function esc(s){ return s.replace(/'/g, "\\'"); }"""
        assert extract_functions(source) == [FunctionFragment(text=source, name="esc")]

    def test_double_slash_inside_regex(self):
        source = r"""function isUrl(u){ return /https?:\/\//.test(u); }"""
        assert extract_functions(source) == [FunctionFragment(text=source, name="isUrl")]

    def test_escaped_brace_inside_regex(self):
        strip = r"""function strip(s){ return s.replace(/\{/g, ''); }"""
        fragments = extract_functions(strip + "\nfunction after(){}")

        assert [f.name for f in fragments] == ["strip", "after"]
        assert fragments[0].text == strip + "\n"

    def test_character_class_with_slash_and_brace(self):
        source = "function parts(p){ return p.split(/[/}]/); }"
        assert extract_functions(source)[0].text == source

    def test_division_is_not_a_regex(self):
        source = "function ratio(a, b){ var r = a / b; if (r > 1) { r = 1 / r; } return r; }"
        assert extract_functions(source)[0].text == source


class TestUnbalancedFallback:
    def test_unclosed_body_ends_at_first_close_brace(self):
        fragments = extract_functions("function partial() { if (a) { b(); }")
        assert fragments == [
            FunctionFragment(text="function partial() { if (a) { b(); }", name="partial")
        ]
