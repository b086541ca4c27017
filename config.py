import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def setting(key, default=None):
    """env.yaml value, else environment variable, else default"""
    if key in data:
        return data[key]
    return os.environ.get(key, default)


def flag(key, default):
    value = setting(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ApplicationConfig:
    DB_URI = setting("DB_URI", "sqlite+aiosqlite:///./payments.db")
    DB_AUTO_CREATE = flag("DB_AUTO_CREATE", True)
    API_PREFIX = setting("API_PREFIX", "/api")
    API_PORT = int(setting("API_PORT", 8000))
    API_HOST = setting("API_HOST", "0.0.0.0")
    API_RELOAD = flag("API_RELOAD", False)
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = flag("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = setting("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = flag("ENABLE_LOGGING_MIDDLEWARE", True)

    # PayHere merchant account
    PAYHERE_MERCHANT_ID = str(setting("PAYHERE_MERCHANT_ID", "1223226"))
    PAYHERE_SECRET = str(setting("PAYHERE_SECRET", "MTY0NzkyNzA1ODE2OTAxMTY0NDM0ODQ1Nzc0NDgzMTE0ODUwNDU3"))
    PAYHERE_SANDBOX = flag("PAYHERE_SANDBOX", True)
    PAYHERE_CURRENCY = setting("PAYHERE_CURRENCY", "LKR")

    # PayHere redirect targets ({company_id} is substituted per order)
    PAYHERE_RETURN_URL = setting(
        "PAYHERE_RETURN_URL", "http://localhost:3000/company/{company_id}/subscription/return"
    )
    PAYHERE_CANCEL_URL = setting(
        "PAYHERE_CANCEL_URL", "http://localhost:3000/company/{company_id}/subscription/cancel"
    )
    PAYHERE_NOTIFY_URL = setting("PAYHERE_NOTIFY_URL", "http://localhost:8000/api/payhere/notify")

    # Checkout contact fallbacks (PayHere rejects empty city/country)
    PAYHERE_DEFAULT_CITY = setting("PAYHERE_DEFAULT_CITY", "city")
    PAYHERE_DEFAULT_COUNTRY = setting("PAYHERE_DEFAULT_COUNTRY", "sri lanka")
