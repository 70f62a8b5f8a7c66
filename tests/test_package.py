import importlib
import pkgutil

import pytest

import bandit_search

MODULES = sorted(
    info.name
    for info in pkgutil.walk_packages(bandit_search.__path__, prefix="bandit_search.")
)


def test_modules_found():
    assert "bandit_search.arms.scripted" in MODULES
    assert "bandit_search.utils" in MODULES


@pytest.mark.parametrize("name", MODULES)
def test_every_module_has_a_docstring(name):
    module = importlib.import_module(name)
    assert module.__doc__ and module.__doc__.strip()
