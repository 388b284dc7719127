"""Centralised selectors for the Google Travel hotel pages.

These mirror the live markup and will drift; keep every selector here so a
markup change is a one-file edit.
"""
from __future__ import annotations


class EntitySelectors:
    # Link from a search-results page to a single hotel's detail page.
    entity_link = 'a[data-href^="/entity/C"][href^="/travel/search?"]'


class AboutSelectors:
    tab = 'div[aria-label="About"]'
    section = "section.mEKuwe"
    description = ".GtAk2e"
    check_in_time = ".b9tWsd:nth-child(1) .IIl29e"
    check_out_time = ".b9tWsd:nth-child(2) .IIl29e"
    address = '.XGa8fd[aria-label*="hotel address"]'
    phone = '.XGa8fd[aria-label*="call this hotel"]'
    website = 'a[aria-label="Website"]'


class PhotoSelectors:
    tab = '[aria-label="Photos"][id="photos"]'
    feature_container = "[data-hotel-feature-id]"
    image = 'img[alt^="Photo "]'


class PriceSelectors:
    tab = '[aria-label="Prices"][id="prices"]'
    provider_section = "div.M0XvTb"
    provider = "div.ADs2Tc"
    provider_name = ".NiGhzc, .FjC1We"
    provider_logo = "img"
    room = "div.ZZv4Fb, div.iVxSde"
    room_type = ".Ulr1ge, .ogfYpf"
    base_price = ".Rr0d2e, .MW1oTb"
    total_price = ".UeIHqb, .kixHKb"
    room_link = "a[href]"
    cancellation = ".wVWMMc, .Ntlk3e"
    feature = ".Jpu1ec li, .ZNLhRe"


class SuggestionSelectors:
    search_input = 'input[aria-label="Search for places, hotels and more"]'
    check_in_input = 'input[aria-label="Check-in"]'
    check_out_input = 'input[aria-label="Check-out"]'
    travelers_button = 'div[aria-label^="Number of travelers"], button[aria-label^="Number of travelers"]'
    adults_count = 'span[jsname="NnAfwf"]'
    adults_increment = 'button[aria-label="Add adult"]'
    adults_decrement = 'button[aria-label="Remove adult"]'
    travelers_done = 'button[aria-label="Done"]'
    results_container = 'div[jsname="mutHjb"]'
    card = "div.uaTTDe"
    name = "h2.BgYkof, h2.CF94Hd, h2.ogfYpf"
    price = "span.qQOQpe, span.prxS3d"
    rating = "span.KFi5wf"
    review_count = "span.jdzyld"
    deal = "span.Ki7Jrc, div.DAkZtf"
    link = "a.PVOOXe, a[href]"
    image = "img"
    location = "span.fG4Zrb, span.zNtZfb"
    amenity = "li.XX3dkb span.LtjZ2d, li.XX3dkb"
    description = "div.lXJaOd, span.gBNs3b"
