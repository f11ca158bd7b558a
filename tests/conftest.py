"""Shared fixtures for the TermTip test suite."""

import pytest

from termtip.core.dictionary import TermDictionary


@pytest.fixture
def dress_terms():
    """Dictionary with overlapping phrases for longest-match tests"""
    return TermDictionary.build([
        ("black dress", "D1"),
        ("little black dress", "D2"),
        ("trench", "D3"),
        ("uniqlo", "Japanese fast-fashion retailer"),
    ])


@pytest.fixture
def empty_terms():
    return TermDictionary.build([])


@pytest.fixture
def brand_glossary_file(tmp_path):
    """YAML glossary file with a couple of brand terms"""
    path = tmp_path / "brands.yaml"
    path.write_text(
        'uniqlo: "Japanese fast-fashion retailer"\n'
        'little black dress: "A simple black cocktail dress."\n'
        'trench coat: "Belted raincoat in a military style."\n',
        encoding="utf-8",
    )
    return path
