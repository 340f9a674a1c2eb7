"""Shared fixtures for pipeline tests."""

import pytest


def make_paragraph(n_words: int, tag: str = "w") -> str:
    """Paragraph of ``n_words`` distinct words."""
    return " ".join(f"{tag}{i}" for i in range(n_words))


@pytest.fixture
def raw_article() -> str:
    return (
        "{{Infobox country|name=France}}\n"
        "'''France''' is a country in [[Western Europe|western Europe]]."
        "<ref name=\"cia\">CIA World Factbook,\n2020</ref> Its capital is [[Paris]].\n"
        "\n\n\n"
        "<!-- TODO: expand history -->\n"
        "== History ==\n"
        "The area was settled by the [[Gauls]]   in the Iron Age.\n"
        "\n"
        "[[File:Map of France [1789].png]]\n"
        "\n"
        "France has a   long coastline along the [[Atlantic Ocean|Atlantic]].   \n"
    )
