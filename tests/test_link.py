import re

import pytest

from terrier.link import CodeLinkAnalyzer


def _plain(text):
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


RUST_SOURCE = "fn helper(x: i32) {\n}\n"


@pytest.fixture
def project(tmp_path):
    (tmp_path / "a.rs").write_text(RUST_SOURCE)
    (tmp_path / "b.rs").write_text("use a;\n" + RUST_SOURCE)
    (tmp_path / "notes.txt").write_text("fn helper(x: i32) {")
    modules = tmp_path / "node_modules"
    modules.mkdir()
    (modules / "c.js").write_text("function hidden() {}")
    hidden = tmp_path / ".cache"
    hidden.mkdir()
    (hidden / "d.py").write_text("def secret_fn(): pass")
    nested = tmp_path / "pkg"
    nested.mkdir()
    (nested / "e.py").write_text("def nested(y):\n    pass\n")
    return tmp_path


def _analyse(path):
    analyzer = CodeLinkAnalyzer()
    analyzer.file_content_extractor(path)
    analyzer.function_extractor()
    analyzer.overlaps()
    return analyzer


def test_file_content_extractor_skips_excluded(project):
    analyzer = CodeLinkAnalyzer()
    analyzer.file_content_extractor(project)
    assert set(analyzer.file_contents) == {"a.rs", "b.rs", "e.py"}
    assert analyzer.file_contents["a.rs"] == ("rs", RUST_SOURCE)


def test_function_extractor_keeps_full_signature(project):
    analyzer = CodeLinkAnalyzer()
    analyzer.file_content_extractor(project)
    analyzer.function_extractor()
    assert analyzer.extracted_functions["a.rs"] == ["fn helper(x: i32)"]
    assert analyzer.extracted_functions["e.py"] == ["def nested(y)"]


def test_link_rows_references(project):
    rows = _analyse(project).link_rows()
    sources = [row[0] for row in rows]
    assert sources == sorted(sources)
    by_source = {row[0]: row for row in rows}
    assert by_source["a.rs"][1] == "fn helper(x: i32)"
    assert sorted(by_source["a.rs"][2].split(", ")) == ["a.rs", "b.rs"]
    # A Python signature followed by ':' never counts as a reference.
    assert "e.py" not in by_source


def test_key_with_path_separator_is_truncated(tmp_path):
    (tmp_path / "m.rs").write_text("fn f(x: std::io::Error) {\n}\n")
    rows = _analyse(tmp_path).link_rows()
    assert rows == [("m.rs", "fn f(x: std", "m.rs")]


def test_link_builder_renders_header_and_rows(project):
    output = _plain(_analyse(project).link_builder())
    assert output.index("Source File") < output.index("a.rs")
    assert "Function Name" in output and "References" in output


def test_unsupported_type_warns_and_skips(capsys):
    analyzer = CodeLinkAnalyzer()
    analyzer.file_contents["x.go"] = ("go", "func main() {}")
    analyzer.function_extractor()
    assert analyzer.extracted_functions == {}
    assert "x.go" in capsys.readouterr().err


def test_missing_directory_raises(tmp_path):
    analyzer = CodeLinkAnalyzer()
    with pytest.raises(FileNotFoundError):
        analyzer.file_content_extractor(tmp_path / "absent")