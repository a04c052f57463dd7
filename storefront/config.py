# storefront.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

PACKAGE_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = BASE_DIR / "public"
TEMPLATES_DIR = PACKAGE_DIR / "templates"

"""
Configuration centrale de la boutique.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose les chemins utiles (PUBLIC_DIR, TEMPLATES_DIR)
- Normalise et expose les secrets (Paystack, SendGrid) et les adresses de notification
- Sécurité cookies/session, CORS

Les handlers de paiement relisent ces valeurs à chaque requête
(import local) pour qu'une clé absente soit détectée par requête.
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Paystack: clé secrète (bearer + clé HMAC du webhook) et URL de l'API
PAYSTACK_SECRET_KEY = _clean_env(os.getenv("PAYSTACK_SECRET_KEY") or "")
PAYSTACK_BASE = _clean_env(os.getenv("PAYSTACK_BASE") or "https://api.paystack.co").rstrip("/")
PAYSTACK_CURRENCY = "NGN"
PAYSTACK_CHANNELS = ["card"]

# SendGrid: e-mails de notification (optionnels)
SENDGRID_API_KEY = _clean_env(os.getenv("SENDGRID_API_KEY") or "")
SENDGRID_BASE = _clean_env(os.getenv("SENDGRID_BASE") or "https://api.sendgrid.com").rstrip("/")
ORDER_NOTIFY_FROM = _clean_env(os.getenv("ORDER_NOTIFY_FROM") or "")
ORDER_NOTIFY_TO = _clean_env(os.getenv("ORDER_NOTIFY_TO") or "")

# Timeout des appels sortants (secondes)
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "25"))

# Cookies / session
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")
SESSION_SECRET_KEY = _clean_env(os.getenv("SESSION_SECRET_KEY") or "replace_me_with_a_long_random_secret")

# CORS: vide = pas de CORSMiddleware (les fonctions de paiement posent leurs propres en-têtes)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# Origine publique du site (callback Paystack si l'origine de la requête n'est pas fiable)
BASE_URL = _clean_env(os.getenv("BASE_URL") or "")

# Tag "source" envoyé dans les métadonnées de commande
ORDER_SOURCE = "snuz.ng"
