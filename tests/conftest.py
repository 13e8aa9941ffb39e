"""Shared fixtures for combo tests."""

from pathlib import Path

import pytest

from combo.config import MinifyConfig


@pytest.fixture
def www(tmp_path: Path) -> Path:
    """A small web root with stylesheets and scripts."""
    root = tmp_path / "www"
    root.mkdir()
    (root / "style.css").write_text("body { color: red; }")
    (root / "extra.css").write_text("h1 { margin: 0 }")
    (root / "script.js").write_text("function test() { console.log('test'); }")
    (root / "nav.js").write_text("var nav = 1;")

    sub = root / "css"
    sub.mkdir()
    (sub / "main.css").write_text("p { padding: 0 }")

    # Outside the web root; must never be served
    (tmp_path / "secret.css").write_text(".secret { color: black }")
    return root


@pytest.fixture
def config(www: Path) -> MinifyConfig:
    return MinifyConfig(www_root=str(www), js_root="/js/", css_root="/css/")
