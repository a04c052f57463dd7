"""
Catalogue & rendu des cartes produit.
- Lookup des dosages par nom normalisé.
- Sources AVIF/WebP pour les images .jpg/.jpeg.
- Rendu HTML via Jinja2 (templates/product_card.html).
"""
import re
import unicodedata
from typing import Any, Dict, List, Optional

from storefront.catalog.data import DISPLAY_PRICE_TEXT, PRODUCT_CATALOG, PRODUCT_STRENGTHS
from storefront.utils.templates import templates

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_SPACES = re.compile(r"\s+")
_JPEG_PATH = re.compile(r"^(.*)\.(jpe?g)$", re.IGNORECASE)

# module storefront.catalog.service
def normalize_product_key(value: Any) -> str:
    """
    "  Zafari Jalapeño Lime " -> "zafari jalapeno lime"
    - minuscules, diacritiques retirés, & -> and, ponctuation -> espace
    """
    text = str(value or "").strip().lower()
    text = unicodedata.normalize("NFKD", text)
    text = _COMBINING_MARKS.sub("", text)
    text = text.replace("&", " and ")
    text = _NON_ALNUM.sub(" ", text).strip()
    return _SPACES.sub(" ", text)

def strength_for_product_name(name: Any) -> str:
    return PRODUCT_STRENGTHS.get(normalize_product_key(name), "")

def modern_image_sources(src: Any) -> Optional[Dict[str, str]]:
    """
    Construit les variantes AVIF/WebP d'une URL .jpg/.jpeg (query string conservée).
    Retourne None pour les autres formats.
    """
    raw = str(src or "")
    path_part, _, query = raw.partition("?")
    m = _JPEG_PATH.match(path_part)
    if not m:
        return None
    suffix = f"?{query}" if query else ""
    return {
        "avif": f"{m.group(1)}.avif{suffix}",
        "webp": f"{m.group(1)}.webp{suffix}",
        "fallback": raw,
    }

def list_brands() -> List[str]:
    return list(PRODUCT_CATALOG.keys())

def products_for_brand(brand: str) -> List[Dict[str, Any]]:
    """Produits d'une marque enrichis du dosage ([] si marque inconnue)."""
    return [
        {**p, "brand": brand, "strength": strength_for_product_name(p["name"])}
        for p in PRODUCT_CATALOG.get(brand or "", [])
    ]

def catalog_listing(brand: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Catalogue complet, ou filtré sur une marque (onglets).
    - brand "all" ou vide: toutes les marques
    """
    if brand and brand != "all":
        return {brand: products_for_brand(brand)} if brand in PRODUCT_CATALOG else {}
    return {b: products_for_brand(b) for b in PRODUCT_CATALOG}

def render_product_card(product: Dict[str, Any]) -> str:
    name = str(product.get("name") or "Product")
    image = str(product.get("image") or "")
    return templates.get_template("product_card.html").render(
        name=name,
        image=image,
        sources=modern_image_sources(image),
        strength=strength_for_product_name(name),
        price_text=DISPLAY_PRICE_TEXT,
    )

def render_brand_page(brand: str, existing_markup: str = "") -> str:
    """
    Grille d'une page marque.
    - Si la page contient déjà des cartes (rendu serveur), on ne les écrase pas.
    """
    if (existing_markup or "").strip():
        return existing_markup
    return "".join(render_product_card(p) for p in PRODUCT_CATALOG.get(brand or "", []))
