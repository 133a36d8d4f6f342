from lowprice.normalize import parse_price, strip_markup, to_listing

from helpers import raw_item


def test_strip_markup_removes_bold_tags():
    assert strip_markup("<b>소니</b> WH-1000XM5 <b>헤드폰</b>") == "소니 WH-1000XM5 헤드폰"


def test_strip_markup_handles_missing_title():
    assert strip_markup(None) == ""
    assert strip_markup("") == ""


def test_strip_markup_removes_any_angle_span():
    for raw in ("소니 <3M> WH-1000XM5", "소니 < b > WH-1000XM5", "소니 <#x> WH-1000XM5"):
        title = strip_markup(raw)
        assert "<" not in title and ">" not in title, title
        assert title.startswith("소니 ") and title.endswith(" WH-1000XM5"), title


def test_strip_markup_escaped_tags_do_not_come_back():
    assert strip_markup("&lt;b&gt;소니&lt;/b&gt; WH") == "소니 WH"


def test_strip_markup_keeps_lone_angle_bracket():
    assert strip_markup("무게 < 200g 헤드폰") == "무게 < 200g 헤드폰"


def test_parse_price_drops_non_digits():
    assert parse_price("1,234,000원") == 1234000
    assert parse_price(" 159000 ") == 159000
    assert parse_price(45000) == 45000


def test_parse_price_unparsable_is_zero():
    assert parse_price("") == 0
    assert parse_price("가격문의") == 0
    assert parse_price(None) == 0


def test_to_listing_prefers_lprice():
    listing = to_listing("소니", raw_item("<b>소니</b> WH-CH520", brand="소니", lprice="59000", price="79000"))
    assert listing.brand == "소니"
    assert listing.api_brand == "소니"
    assert listing.title == "소니 WH-CH520"
    assert listing.price == 59000


def test_to_listing_falls_back_to_price():
    listing = to_listing("보스", raw_item("Bose QC45", brand="Bose", lprice="", price="349,000"))
    assert listing.price == 349000


def test_to_listing_tolerates_missing_fields():
    listing = to_listing("슈어", {"title": "Shure SE215"})
    assert listing.api_brand == ""
    assert listing.price == 0
    assert listing.image == ""
    assert listing.link == ""
    assert (listing.category1, listing.category2, listing.category3, listing.category4) == ("", "", "", "")


def test_listing_to_dict_uses_wire_names():
    listing = to_listing("소니", raw_item("소니 WF-1000XM5", brand="SONY", lprice="329000", category3="이어폰"))
    data = listing.to_dict()
    assert data["apiBrand"] == "SONY"
    assert data["price"] == 329000
    assert set(data) == {
        "brand", "apiBrand", "title", "price", "image", "link",
        "category1", "category2", "category3", "category4",
    }
