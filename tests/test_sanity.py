"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "carddeck",
        "carddeck.cards",
        "carddeck.ordering",
        "carddeck.rng",
        "carddeck.transforms",
        "carddeck.deck",
        "carddeck.config",
        "carddeck.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all modules can be imported."""

    assert importlib.import_module(module_name)
