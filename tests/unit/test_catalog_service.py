from storefront.catalog import service as catalog


def test_normalize_product_key():
    assert catalog.normalize_product_key("  Zafari Jalapeño Lime ") == "zafari jalapeno lime"
    assert catalog.normalize_product_key("Salt & Pepper!!") == "salt and pepper"
    assert catalog.normalize_product_key(None) == ""

def test_strength_lookup():
    assert catalog.strength_for_product_name("Pablo Blue Mint") == "50mg"
    assert catalog.strength_for_product_name("ICEBERG  Emerald") == "Ultra 50mg"
    assert catalog.strength_for_product_name("Zafari Mango") == ""

def test_modern_image_sources_keeps_query_string():
    assert catalog.modern_image_sources("./assets/a.jpg?v=2") == {
        "avif": "./assets/a.avif?v=2",
        "webp": "./assets/a.webp?v=2",
        "fallback": "./assets/a.jpg?v=2",
    }
    assert catalog.modern_image_sources("./assets/a.JPEG")["webp"] == "./assets/a.webp"
    assert catalog.modern_image_sources("./assets/a.png") is None

def test_catalog_listing_filters_by_brand():
    assert set(catalog.list_brands()) == {"pablo", "zafari", "zyn", "iceberg", "velo", "maggie"}
    listing = catalog.catalog_listing("zyn")
    assert list(listing) == ["zyn"]
    assert listing["zyn"][0]["strength"] == "Strong 11mg"
    assert catalog.catalog_listing("unknown") == {}
    assert len(catalog.catalog_listing("all")) == 6

def test_render_product_card():
    html = catalog.render_product_card({"name": "Velo Strawberry Ice", "image": "./assets/velo-strawberryice.jpg"})
    assert "Velo Strawberry Ice" in html
    assert "₦9,500" in html
    assert "Medium 10mg" in html
    assert 'type="image/avif"' in html
    assert "Add to cart" in html

def test_render_product_card_hides_unknown_strength_and_escapes():
    html = catalog.render_product_card({"name": "<b>Mystery</b>", "image": "./x.png"})
    assert "&lt;b&gt;Mystery&lt;/b&gt;" in html
    assert "<picture>" not in html
    assert "hidden" in html

def test_render_brand_page_keeps_existing_markup():
    assert catalog.render_brand_page("pablo", "<article>server</article>") == "<article>server</article>"
    rendered = catalog.render_brand_page("maggie")
    assert rendered.count("<article") == 1
    assert catalog.render_brand_page("unknown") == ""
