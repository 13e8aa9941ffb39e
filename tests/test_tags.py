"""Tests for combo.tags — HTML markup for combined assets."""

from combo.config import MinifyConfig
from combo.tags import combine


class TestCombined:
    def test_js(self) -> None:
        config = MinifyConfig(www_root="/var/www", js_root="/js/")
        result = combine(["a.js", "b.js"], "js", config)
        assert result == '<script src="/js/?files=a.js,b.js"></script>'

    def test_css(self) -> None:
        config = MinifyConfig(www_root="/var/www", css_root="/css/")
        result = combine(["file1.css", "file2.css"], "css", config)
        assert result == '<link rel="stylesheet" href="/css/?files=file1.css,file2.css" />'

    def test_query_matches_what_handlers_read(self) -> None:
        config = MinifyConfig(www_root="/var/www")
        result = combine(["/a.css", "/b.css"], "css", config)
        assert "?files=/a.css,/b.css" in result

    def test_unknown_type(self) -> None:
        assert combine(["a.txt"], "txt", MinifyConfig(www_root="/var/www")) == ""


class TestDisabled:
    def test_js(self) -> None:
        config = MinifyConfig(www_root="/var/www", disable_tag_combining=True)
        result = combine(["a.js", "b.js"], "js", config)
        assert result == '<script src="a.js"></script><script src="b.js"></script>'

    def test_css(self) -> None:
        config = MinifyConfig(www_root="/var/www", disable_tag_combining=True)
        result = combine(["file1.css", "file2.css"], "css", config)
        assert result == (
            '<link rel="stylesheet" href="file1.css" />'
            '<link rel="stylesheet" href="file2.css" />'
        )

    def test_empty_list(self) -> None:
        config = MinifyConfig(www_root="/var/www", disable_tag_combining=True)
        assert combine([], "js", config) == ""

    def test_unknown_type(self) -> None:
        config = MinifyConfig(www_root="/var/www", disable_tag_combining=True)
        assert combine(["a.js"], "html", config) == ""
