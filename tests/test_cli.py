import json

import pytest
from aexpr_cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # keep a stray .aexpr.toml in the working directory from leaking in
    monkeypatch.chdir(tmp_path)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_lint_reports_warning(tmp_path):
    path = write(tmp_path, "expr.jsx", "random(0,1)")

    result = runner.invoke(app, ["lint", str(path)])

    assert result.exit_code == 0
    assert f"WARNING: {path}:1:1 [no-deprecated-functions]" in result.output
    assert "Total issues found: 1" in result.output


def test_lint_exits_nonzero_on_errors(tmp_path):
    path = write(tmp_path, "expr.jsx", "let speed = 5;\nspeeed * 2")

    result = runner.invoke(app, ["lint", str(path)])

    assert result.exit_code == 1
    assert "'speeed' is not defined" in result.output


def test_lint_severity_filter(tmp_path):
    path = write(tmp_path, "expr.jsx", "var x = 5;")

    result = runner.invoke(app, ["lint", str(path), "--severity", "WARNING"])

    assert result.exit_code == 0
    assert "INFO:" not in result.output
    assert "Total issues found: 2 (0 reported)" in result.output


def test_lint_json_output(tmp_path):
    path = write(tmp_path, "expr.jsx", "random(0,1)")

    result = runner.invoke(app, ["lint", str(path), "--output", "json"])

    report = json.loads(result.output)
    assert report["total"] == 1
    assert report["warnings"] == 1
    issue = report["issues"][0]
    assert issue["severity"] == "WARNING"
    assert issue["rule_id"] == "no-deprecated-functions"
    assert issue["suggestions"] == ["Math.random"]
    assert issue["auto_fixable"] is True
    assert (issue["end_line"], issue["end_column"]) == (1, 7)


def test_lint_fix_rewrites_file(tmp_path):
    path = write(tmp_path, "expr.jsx", "var my_var = 1;\nmy_var")

    result = runner.invoke(app, ["lint", str(path), "--fix"])

    assert result.exit_code == 0
    assert f"Fixed {path}" in result.output
    assert path.read_text(encoding="utf-8") == "let my_var = 1;\nmy_var"


def test_lint_fix_keeps_undefined_names(tmp_path):
    path = write(tmp_path, "expr.jsx", "var a = 1, b = 2;\nb")

    result = runner.invoke(app, ["lint", str(path), "--fix"])

    assert result.exit_code == 1
    assert path.read_text(encoding="utf-8") == "let a = 1, b = 2;\nb"
    assert "'b' is not defined" in result.output


def test_lint_uses_config(tmp_path):
    path = write(tmp_path, "expr.jsx", "rotation = time * 45;")
    config = write(tmp_path, "custom.toml", "[tool.aexpr.lint.rules]\nno-magic-numbers = true\n")

    result = runner.invoke(app, ["lint", str(path), "--config", str(config)])

    assert "[no-magic-numbers]" in result.output


def test_lint_missing_file(tmp_path):
    result = runner.invoke(app, ["lint", str(tmp_path / "nope.jsx")])
    assert result.exit_code == 2


def test_format_rewrites_file(tmp_path):
    path = write(tmp_path, "expr.jsx", "x=1")

    result = runner.invoke(app, ["format", str(path)])

    assert result.exit_code == 0
    assert f"Reformatted {path}" in result.output
    assert path.read_text(encoding="utf-8") == "x = 1;\n"


def test_format_check_leaves_file(tmp_path):
    path = write(tmp_path, "expr.jsx", "x=1")

    result = runner.invoke(app, ["format", str(path), "--check"])

    assert result.exit_code == 1
    assert f"Would reformat {path}" in result.output
    assert path.read_text(encoding="utf-8") == "x=1"


def test_format_check_clean_file(tmp_path):
    path = write(tmp_path, "expr.jsx", "x = 1;\n")

    result = runner.invoke(app, ["format", str(path), "--check"])

    assert result.exit_code == 0
    assert "0 of 1 files would be reformatted" in result.output


def test_format_invalid_config(tmp_path):
    path = write(tmp_path, "expr.jsx", "x=1")
    write(tmp_path, ".aexpr.toml", '[tool.aexpr.format]\nindent_style = "mixed"\n')

    result = runner.invoke(app, ["format", str(path)])

    assert result.exit_code == 2
    assert path.read_text(encoding="utf-8") == "x=1"


def test_rules_listing(tmp_path):
    result = runner.invoke(app, ["rules"])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 10
    assert lines[0].startswith("[on ] no-undefined-variables")
    assert any(line.startswith("[off] no-magic-numbers") for line in lines)


def test_rules_listing_honours_config(tmp_path):
    write(tmp_path, ".aexpr.toml", "[tool.aexpr.lint.rules]\nno-magic-numbers = true\n")

    result = runner.invoke(app, ["rules"])

    assert any(line.startswith("[on ] no-magic-numbers") for line in result.output.splitlines())
