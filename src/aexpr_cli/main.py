import logging
from pathlib import Path

import typer
from aexpr_formatter.engine import FormatterEngine
from aexpr_linter.autofix import AutoFixEngine
from aexpr_linter.engine import LinterEngine

from .config import DEFAULT_CONFIG_FILE, ProjectConfig
from .converters import build_report, diagnostic_to_lint_issue

app = typer.Typer(help="AE Expression Tools - Lint and format After Effects expressions")

SEVERITY_RANK = {"ERROR": 3, "WARNING": 2, "INFO": 1}


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def lint(
    files: list[Path] = typer.Argument(..., help="Expression files to lint"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    severity: str = typer.Option("INFO", help="Minimum severity to show"),
    output: str = typer.Option("text", help="Output format: text or json"),
    fix: bool = typer.Option(False, help="Apply quick fixes in place"),
):
    """Run linter on expression files"""
    config = ProjectConfig(config_file)
    engine = LinterEngine(config.linting_options(), profile=config.profile())
    autofix = AutoFixEngine(engine.registry)
    issues = []
    fixed_files = []

    for file_path in files:
        try:
            source = file_path.read_text(encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: cannot read {file_path}: {e}", err=True)
            raise typer.Exit(code=2)

        diagnostics = engine.lint(source)
        if fix:
            fixed = autofix.apply_fixes(source, diagnostics)
            if fixed != source:
                file_path.write_text(fixed, encoding="utf-8")
                fixed_files.append(str(file_path))
                diagnostics = engine.lint(fixed)

        issues.extend(
            diagnostic_to_lint_issue(d, str(file_path), autofix.can_fix(d.rule_id))
            for d in diagnostics
        )

    min_rank = SEVERITY_RANK.get(severity.upper(), 1)
    reported = [
        i
        for i in sorted(issues, key=lambda x: (x.file_path, x.line_number, x.column))
        if SEVERITY_RANK[i.severity.value] >= min_rank
    ]

    if output == "json":
        report = build_report(reported)
        if fix:
            report.fixed_files = fixed_files
        typer.echo(report.model_dump_json(indent=2))
    else:
        for path in fixed_files:
            typer.echo(f"Fixed {path}")
        for issue in reported:
            typer.echo(
                f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                f"[{issue.rule_id}] - {issue.message}"
            )
        typer.echo(f"\nTotal issues found: {len(issues)} ({len(reported)} reported)")

    if any(i.severity.value == "ERROR" for i in issues):
        raise typer.Exit(code=1)


@app.command("format")
def format_files(
    files: list[Path] = typer.Argument(..., help="Expression files to format"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    check: bool = typer.Option(False, help="Only report files that would change"),
):
    """Format expression files in place"""
    config = ProjectConfig(config_file)
    try:
        options = config.formatting_options()
    except ValueError as e:
        typer.echo(f"Error: invalid format config: {e}", err=True)
        raise typer.Exit(code=2)

    engine = FormatterEngine(options)
    results = engine.format_files(files, write=not check)

    for file_path, result in zip(files, results.results):
        if result.errors:
            typer.echo(f"Error: {file_path}: {'; '.join(result.errors)}", err=True)
        elif result.modified:
            typer.echo(f"{'Would reformat' if check else 'Reformatted'} {file_path}")

    typer.echo(
        f"\n{results.modified_files} of {results.total_files} files "
        f"{'would be ' if check else ''}reformatted, {results.error_files} errors"
    )
    if results.error_files or (check and results.modified_files):
        raise typer.Exit(code=1)


@app.command()
def rules(
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
):
    """List the available lint rules"""
    config = ProjectConfig(config_file)
    engine = LinterEngine(config.linting_options(), profile=config.profile())
    for rule in engine.get_rules():
        state = "on " if rule.enabled else "off"
        typer.echo(f"[{state}] {rule.id:<24} {rule.severity.value:<8} {rule.category.value:<14} {rule.description}")


if __name__ == "__main__":
    app()
