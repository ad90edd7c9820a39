from aexpr_linter.autofix import AutoFixEngine
from aexpr_linter.engine import lint_expression
from aexpr_linter.models import Diagnostic, QuickFix, Severity
from aexpr_linter.registry import RuleRegistry


def _diagnostic(rule_id, line, column, end_column, suggestions):
    return Diagnostic(
        line=line,
        column=column,
        end_line=line,
        end_column=end_column,
        message="",
        severity=Severity.INFO,
        rule_id=rule_id,
        source="",
        suggestions=suggestions,
    )


def test_quick_fixes_for_deprecated_call():
    [diagnostic] = lint_expression("random(0,1)")
    fixes = AutoFixEngine().quick_fixes(diagnostic)

    assert fixes == [QuickFix("Replace with 'Math.random'", 1, 1, 1, 7, "Math.random")]


def test_quick_fixes_offer_spelling_guesses():
    [diagnostic] = lint_expression("let speed = 5;\nspeeed * 2")
    fixes = AutoFixEngine().quick_fixes(diagnostic)

    assert [f.new_text for f in fixes] == ["speed"]
    assert AutoFixEngine().can_fix("no-undefined-variables") is False


def test_non_fixable_rule_has_no_quick_fix():
    fixer = AutoFixEngine()
    diagnostic = _diagnostic("no-infinite-loops", 1, 1, 6, ("Add a break condition",))

    assert fixer.can_fix("no-infinite-loops") is False
    assert fixer.quick_fixes(diagnostic) == []


def test_unknown_rule_has_no_quick_fix():
    fixer = AutoFixEngine()
    assert fixer.can_fix("no-such-rule") is False
    assert fixer.quick_fixes(_diagnostic("no-such-rule", 1, 1, 2, ("x",))) == []


def test_fix_flags_come_from_the_rules():
    registry = RuleRegistry()
    fixer = AutoFixEngine(registry)

    for rule_id in ("no-deprecated-functions", "prefer-modern-syntax", "prefer-const"):
        assert fixer.can_fix(rule_id) is registry.get_rule(rule_id).auto_fixable is True
    for rule_id in ("no-undefined-variables", "consistent-naming"):
        rule = registry.get_rule(rule_id)
        assert (rule.quick_fixable, rule.auto_fixable) == (True, False)


def test_arrow_function_advice_is_not_a_replacement():
    diagnostic = _diagnostic("prefer-modern-syntax", 1, 9, 17, ("() => {}",))
    assert AutoFixEngine().quick_fixes(diagnostic) == []


def test_apply_fix_replaces_span():
    fix = QuickFix("Replace with 'thisComp'", 2, 3, 2, 7, "thisComp")
    assert AutoFixEngine().apply_fix("x = 1;\ny=comp.width", fix) == "x = 1;\ny=thisComp.width"


def test_apply_fix_out_of_range_line_is_ignored():
    fix = QuickFix("Replace with 'a'", 5, 1, 5, 2, "a")
    assert AutoFixEngine().apply_fix("x", fix) == "x"


def test_apply_fixes_only_rewrites_keywords():
    source = "var my_var = 1;\nmy_var"
    fixed = AutoFixEngine().apply_fixes(source, lint_expression(source))

    assert fixed == "let my_var = 1;\nmy_var"


def test_apply_fixes_leaves_second_declarator_alone():
    # `b` is reported undefined; its spelling guess `a` must not be applied
    source = "var a = 1, b = 2;\nb"
    fixed = AutoFixEngine().apply_fixes(source, lint_expression(source))

    assert fixed == "let a = 1, b = 2;\nb"


def test_apply_fixes_replaces_deprecated_names():
    source = "x = comp.width + layer.height"
    fixed = AutoFixEngine().apply_fixes(source, lint_expression(source))

    assert fixed == "x = thisComp.width + thisLayer.height"


def test_overlapping_fixes_keep_the_rightmost():
    diagnostics = [
        _diagnostic("no-deprecated-functions", 1, 1, 6, ("first",)),
        _diagnostic("no-deprecated-functions", 1, 3, 8, ("second",)),
    ]
    assert AutoFixEngine().apply_fixes("abcdefghij", diagnostics) == "absecondhij"


def test_fixes_without_suggestions_are_skipped():
    diagnostics = [_diagnostic("no-deprecated-functions", 1, 1, 4, None)]
    assert AutoFixEngine().apply_fixes("foo", diagnostics) == "foo"
