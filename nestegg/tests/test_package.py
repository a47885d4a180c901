from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize("name", ["nestegg", "nestegg.core", "nestegg.schemas"])
def test_subpackages_are_regular_packages(name):
    """Namespace packages have no __file__ and are skipped by plain setuptools discovery."""
    module = importlib.import_module(name)
    assert module.__file__ is not None, f"{name} should ship an __init__.py"
