# tests/test_converter.py
"""
Tests for translation tree conversion between modes.
"""
from bf_i18n.converter import convert_translations, laravel_plural_to_rails


class TestRailsToLaravel:

    def test_interpolation_is_rewritten(self):
        result = convert_translations({"en": {"greeting": "Hello, %{name}!"}}, "rails", "laravel")
        assert result["en"]["greeting"] == "Hello, :name!"

    def test_plural_object_becomes_pipe_string(self, rails_translations):
        result = convert_translations(rails_translations, "rails", "laravel")
        assert result["en"]["items"] == "{0} No items|{1} One item|[2,*] :count items"
        assert result["ja"]["items"] == "[2,*] :count個のアイテム"

    def test_nested_namespaces_are_walked(self, rails_translations):
        result = convert_translations(rails_translations, "rails", "laravel")
        assert result["en"]["nested"] == {"deep": {"key": "Deep value"}}

    def test_other_leaves_pass_through(self):
        tree = {"en": {"n": 3, "flag": False, "none": None, "list": ["%{a}", 1]}}
        result = convert_translations(tree, "rails", "laravel")
        assert result["en"] == {"n": 3, "flag": False, "none": None, "list": ["%{a}", 1]}

    def test_input_is_not_modified(self, rails_translations):
        convert_translations(rails_translations, "rails", "laravel")
        assert rails_translations["en"]["greeting"] == "Hello, %{name}!"
        assert isinstance(rails_translations["en"]["items"], dict)


class TestLaravelToRails:

    def test_interpolation_is_rewritten(self, laravel_translations):
        result = convert_translations(laravel_translations, "laravel", "rails")
        assert result["en"]["greeting"] == "Hello, %{name}!"

    def test_pipe_strings_keep_their_shape(self, laravel_translations):
        result = convert_translations(laravel_translations, "laravel", "rails")
        assert result["en"]["apples"] == "{0} No apples|{1} One apple|[2,*] %{count} apples"
        assert result["en"]["simple"] == "item|items"

    def test_plural_shaped_objects_have_values_rewritten(self):
        result = convert_translations({"en": {"x": {"one": ":n thing", "other": 5}}}, "laravel", "rails")
        assert result["en"]["x"] == {"one": "%{n} thing", "other": 5}


class TestSameMode:

    def test_returns_the_same_object(self, rails_translations):
        assert convert_translations(rails_translations, "rails", "rails") is rails_translations


class TestCustomMode:

    def test_unknown_mode_behaves_like_rails(self):
        result = convert_translations({"en": {"g": "Hi %{name}"}}, "custom", "laravel")
        assert result["en"]["g"] == "Hi :name"


class TestLaravelPluralToRails:

    def test_structured(self):
        assert laravel_plural_to_rails("{0} None|{1} One|[2,*] Many") == {
            "zero": "None",
            "one": "One",
            "other": "Many",
        }

    def test_simple_pair(self):
        assert laravel_plural_to_rails("item|items") == {"one": "item", "other": "items"}

    def test_single_segment_yields_none(self):
        assert laravel_plural_to_rails("just text") is None
