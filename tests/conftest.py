"""Pytest configuration and shared fixtures."""
import pytest


@pytest.fixture
def rails_translations():
    """A small Rails-style tree with nesting, plurals and placeholders."""
    return {
        "en": {
            "greeting": "Hello, %{name}!",
            "nested": {"deep": {"key": "Deep value"}},
            "items": {
                "zero": "No items",
                "one": "One item",
                "other": "%{count} items",
            },
            "empty": "",
        },
        "ja": {
            "greeting": "こんにちは、%{name}さん",
            "items": {"other": "%{count}個のアイテム"},
        },
    }


@pytest.fixture
def laravel_translations():
    return {
        "en": {
            "greeting": "Hello, :name!",
            "apples": "{0} No apples|{1} One apple|[2,*] :count apples",
            "simple": "item|items",
        },
    }
