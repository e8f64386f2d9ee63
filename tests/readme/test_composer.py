"""Tests for README composition."""

from __future__ import annotations

from devkit.models import BadgeInstance, ReadmeFields
from devkit.readme.composer import ReadmeComposer, compose, feature_items
from devkit.readme.constants import PLACEHOLDER_README


def test_compose_empty_fields_returns_placeholder() -> None:
    assert compose(ReadmeFields()) == PLACEHOLDER_README


def test_compose_keeps_features_heading_for_blank_lines() -> None:
    readme = compose(ReadmeFields(features="\n  \n"))
    assert readme == "## Features\n\n\n"
    assert readme != PLACEHOLDER_README


def test_compose_full_document_in_fixed_order() -> None:
    fields = ReadmeFields(
        name="demo",
        description="A demo project.",
        features="Fast\n\n  Small  \n",
        installation="npm install",
        usage="npm start",
        contributing="PRs welcome.",
        licenses=["MIT"],
        author="Jo Doe",
        badges=[
            BadgeInstance(id="a1", type="npm-version", identifier="demo"),
            BadgeInstance(id="b2", type="github-stars", identifier="jo/demo"),
        ],
    )

    assert compose(fields) == (
        "# demo\n\n"
        "![npm](https://img.shields.io/npm/v/demo) "
        "![GitHub stars](https://img.shields.io/github/stars/jo/demo) \n\n"
        "## Description\n\nA demo project.\n\n"
        "## Features\n\n- Fast\n- Small\n\n"
        "## Installation\n\n```bash\nnpm install\n```\n\n"
        "## Usage\n\n```bash\nnpm start\n```\n\n"
        "## Contributing\n\nPRs welcome.\n\n"
        "## License\n\nThis project is licensed under the MIT License.\n\n"
        "## Author\n\nJo Doe\n"
    )


def test_compose_lists_multiple_licenses_in_selection_order() -> None:
    readme = compose(ReadmeFields(licenses=["ISC", "MIT"]))
    assert readme == (
        "## License\n\n"
        "This project is licensed under multiple licenses:\n\n"
        "- ISC\n"
        "- MIT\n\n"
    )


def test_compose_skips_empty_sections() -> None:
    readme = compose(ReadmeFields(name="solo", author="me"))
    assert readme == "# solo\n\n## Author\n\nme\n"
    assert "## Installation" not in readme


def test_compose_skips_badges_with_unknown_type() -> None:
    fields = ReadmeFields(
        name="x",
        badges=[
            BadgeInstance(id="1", type="retired", identifier="x"),
            BadgeInstance(id="2", type="custom", identifier="x", label="chat", message="on discord"),
        ],
    )
    assert compose(fields) == (
        "# x\n\n![chat](https://img.shields.io/badge/chat-on%20discord-blue) \n\n"
    )


def test_compose_is_deterministic_and_never_empty() -> None:
    composer = ReadmeComposer()
    fields = ReadmeFields(name="a", features="one\ntwo")
    assert composer.compose(fields) == composer.compose(fields)
    assert composer.compose(ReadmeFields()) != ""


def test_feature_items_drop_blank_lines() -> None:
    assert feature_items("a\n\n b \n\t\nc") == ["a", "b", "c"]
    assert feature_items("") == []
