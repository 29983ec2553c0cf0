"""Shared HTML fixtures for the parser and scraper tests."""

from __future__ import annotations

import pytest

from milanuncios.scraper import parse_document


def ad_card(
    path: str = "cbr600-honda-123.htm",
    title: str = "CBR600 - Honda",
    price: str = "2.500",
    year: str = "2012",
    kms: str = "25.000 kms",
    location: str = "Madrid (Centro)",
    age: str = "2 horas",
) -> str:
    return f"""
<div class="aditem">
  <div class="aditem-header"><div class="x4">{location}</div><div class="x6">{age}</div></div>
  <a href="{path}" class="aditem-detail-title">{title}</a>
  <div class="aditem-price">{price}<span>€</span></div>
  <div class="ano tag-mobile">{year}</div>
  <div class="kms tag-mobile">{kms}</div>
</div>
"""


def page(cards: str = "", links: int = 0, summary: str | None = None) -> str:
    paginator = "".join(
        f'<a class="adlist-paginator-pagelink" href="?pagina={i}">{i}</a>'
        for i in range(1, links + 1)
    )
    if summary is not None:
        paginator = f'<div class="adlist-paginator-summary">{summary}</div>' + paginator
    return f"<html><body><div id='cuerpo'>{cards}</div><div class='adlist-paginator'>{paginator}</div></body></html>"


@pytest.fixture
def listing_page():
    cards = "".join([
        ad_card(),
        ad_card(path="mt07-yamaha-9.htm", title="MT-07 - Yamaha", price="4.000",
                year="2015", kms="12.000 kms", location="Sevilla (Andalucía)", age="3 días"),
        ad_card(path="z750-kawasaki-7.htm", title="Z750 - Kawasaki", price="3.100",
                year="2011", kms="30.000 kms", location="Barcelona", age="1 hora"),
    ])
    return parse_document(page(cards, links=5, summary="1-20 de 83"))
