"""
Catalogue statique: marque -> produits, et table des dosages.
"""

PRODUCT_CATALOG = {
    "pablo": [
        {"name": "Pablo Blue Mint", "image": "./assets/pablo-bluemint.jpg"},
        {"name": "Pablo Bubblegum", "image": "./assets/pablo-bubblegum.jpg"},
        {"name": "Pablo Dark Cherry", "image": "./assets/pablo-darkcherry.jpg"},
        {"name": "Pablo Frosted Mint", "image": "./assets/pablo-frostedmint.jpg"},
        {"name": "Pablo Green Mint", "image": "./assets/pablo-greenmint.jpg"},
        {"name": "Pablo Liquorice", "image": "./assets/pablo-liquorice.jpg"},
        {"name": "Pablo Orange Exclusive", "image": "./assets/pablo-orangeexclusive.jpg"},
        {"name": "Pablo Passionfruit", "image": "./assets/pablo-passionfruit.jpg"},
    ],
    "zafari": [
        {"name": "Zafari Cool Mint", "image": "./assets/zafari-coolmint.jpg"},
        {"name": "Zafari Grapefruit", "image": "./assets/zafari-grapefruit.jpg"},
        {"name": "Zafari Jalapeño Lime", "image": "./assets/zafari-jalapenolime.jpg"},
        {"name": "Zafari Mango", "image": "./assets/zafari-mango.jpg"},
        {"name": "Zafari Mint", "image": "./assets/zafari-mint.jpg"},
        {"name": "Zafari Passionfruit", "image": "./assets/zafari-passionfruit.jpg"},
    ],
    "zyn": [
        {"name": "Zyn Cool Blueberry", "image": "./assets/zyn-coolblueberry.jpg"},
        {"name": "Zyn Cool Watermelon", "image": "./assets/zyn-coolwatermelon.jpg"},
        {"name": "Zyn Fresh Mint", "image": "./assets/zyn-freshmint.jpg"},
    ],
    "iceberg": [
        {"name": "Iceberg Cherry", "image": "./assets/iceberg-cherry.jpg"},
        {"name": "Iceberg Cola", "image": "./assets/iceberg-cola.jpg"},
        {"name": "Iceberg Emerald", "image": "./assets/iceberg-emerald.jpg"},
        {"name": "Iceberg Kiwi Strawberry", "image": "./assets/iceberg-kiwistrawberry.jpg"},
        {"name": "Iceberg Mango Banana", "image": "./assets/iceberg-mango-banana.jpg"},
        {"name": "Iceberg Watermelon", "image": "./assets/iceberg-watermelon.jpg"},
    ],
    "velo": [
        {"name": "Velo Bright Spearmint", "image": "./assets/velo-brightspearmint.jpg"},
        {"name": "Velo Crispy Peppermint", "image": "./assets/velo-crispypeppermint.jpg"},
        {"name": "Velo Strawberry Ice", "image": "./assets/velo-strawberryice.jpg"},
    ],
    "maggie": [
        {"name": "Maggie Cherry Tonic", "image": "./assets/maggie-cherrytonic.jpg"},
    ],
}

# Clés normalisées (voir catalog.service.normalize_product_key)
PRODUCT_STRENGTHS = {
    # ICEBERG
    "iceberg kiwi strawberry": "Medium 20mg",
    "iceberg cherry": "20mg",
    "iceberg cola": "Medium 20mg",
    "iceberg watermelon": "Medium 20mg",
    "iceberg mango banana": "Medium 20mg",
    "iceberg emerald": "Ultra 50mg",
    # MAGGIE
    "maggie cherry tonic": "60mg",
    # PABLO
    "pablo orange exclusive": "50mg",
    "pablo bubblegum": "50mg",
    "pablo blue mint": "50mg",
    "pablo green mint": "50mg",
    "pablo frosted mint": "50mg",
    "pablo dark cherry": "50mg",
    "pablo passion fruit": "50mg",
    "pablo passionfruit": "50mg",
    "pablo liquorice": "50mg",
    # KILLA (hors catalogue pour l'instant)
    "killa orange": "13.2mg",
    # ZYN
    "zyn cool blueberry": "Strong 11mg",
    "zyn cool watermelon": "Strong 11mg",
    "zyn fresh mint": "Strong 11mg",
    # VELO
    "velo bright spearmint": "Low 6mg",
    "velo strawberry ice": "Medium 10mg",
    "velo crispy peppermint": "Medium 10mg",
}

# Prix affiché sur les cartes générées
DISPLAY_PRICE_TEXT = "₦9,500"
