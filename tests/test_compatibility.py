# tests/test_compatibility.py
"""
Tests for the pre-conversion compatibility checker.
"""
from bf_i18n.compatibility import CompatibilityChecker, check_compatibility
from bf_i18n.modes import Mode


class TestRailsToLaravel:

    def test_simple_string_is_compatible(self):
        report = check_compatibility({"greeting": "Hello, %{name}!"}, "rails", "laravel")
        assert report.compatible is True
        assert report.warnings == []
        assert report.errors == []

    def test_two_and_few_forms_warn(self):
        translations = {
            "items": {"one": "One", "two": "Two", "few": "Few", "other": "Many"},
        }
        report = check_compatibility(translations, "rails", "laravel")

        assert report.compatible is True
        types = [w.type for w in report.warnings]
        assert "unsupported_plural_form" in types
        assert report.warnings[0].key == "items"

    def test_zero_one_other_plural_is_clean(self):
        report = check_compatibility({"items": {"zero": "Z", "one": "O", "other": "M"}}, "rails", "laravel")
        assert report.warnings == []

    def test_nested_keys_are_reported_with_full_path(self):
        translations = {"shop": {"cart": {"items": {"one": "1", "few": "f", "other": "n"}}}}
        report = check_compatibility(translations, Mode.RAILS, Mode.LARAVEL)
        assert report.warnings[0].key == "shop.cart.items"

    def test_pipe_strings_are_not_checked_from_rails(self):
        report = check_compatibility({"x": "{0 broken|many"}, "rails", "laravel")
        assert report.compatible is True
        assert report.errors == []

    def test_non_string_leaves_are_ignored(self):
        report = check_compatibility({"n": 3, "flag": True, "none": None, "list": ["a"]}, "rails", "laravel")
        assert report.compatible is True
        assert report.warnings == []


class TestLaravelToRails:

    def test_range_syntax_warns(self):
        report = check_compatibility({"apples": "[1,19] Some|[20,*] Many"}, "laravel", "rails")
        assert report.compatible is True
        assert [w.type for w in report.warnings] == ["unsupported_range_plural"]

    def test_exact_markers_above_two_warn_individually(self):
        report = check_compatibility({"n": "{0} none|{3} three|{4} four"}, "laravel", "rails")
        types = [w.type for w in report.warnings]
        assert types.count("unsupported_plural_form") == 2
        assert report.compatible is True

    def test_exact_markers_up_to_two_do_not_warn(self):
        report = check_compatibility({"n": "{0} none|{1} one|{2} two"}, "laravel", "rails")
        assert report.warnings == []

    def test_simple_pair_is_clean(self):
        report = check_compatibility({"apple": "apple|apples"}, "laravel", "rails")
        assert report.compatible is True
        assert report.warnings == []

    def test_malformed_pipe_string_is_an_error(self):
        report = check_compatibility({"broken": "{0 none|many"}, "laravel", "rails")

        assert report.compatible is False
        assert len(report.errors) == 1
        error = report.errors[0]
        assert error.key == "broken"
        assert error.type == "interpolation_syntax"
        assert error.suggestion

    def test_strings_inside_lists_are_checked(self):
        report = check_compatibility({"a": ["ok|fine", {"b": ["{0}|[x"]}]}, "laravel", "rails")

        assert report.compatible is False
        assert [e.key for e in report.errors] == ["a.1.b.0"]

    def test_strings_without_pipe_are_not_parsed(self):
        report = check_compatibility({"text": "Array [1,2] here"}, "laravel", "rails")
        assert report.warnings == []
        assert report.errors == []


class TestChecker:

    def test_report_to_dict(self):
        report = check_compatibility({"broken": "[oops|x"}, "laravel", "rails")
        data = report.to_dict()
        assert data["compatible"] is False
        assert data["errors"][0]["key"] == "broken"

    def test_checker_can_be_reused(self):
        checker = CompatibilityChecker("laravel", "rails")
        first = checker.check({"broken": "[oops|x"})
        second = checker.check({"ok": "a|b"})
        assert first.compatible is False
        assert second.compatible is True
