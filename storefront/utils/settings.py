# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/1")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
CELERY_TASK_ALWAYS_EAGER = os.getenv("CELERY_TASK_ALWAYS_EAGER", "false").lower() in ("1", "true", "yes")

# memory | redis
CART_STORAGE_BACKEND = os.getenv("CART_STORAGE_BACKEND", "memory")
CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "rl-apna-store-cart")

# symulowane opoznienie sklepu, w milisekundach [min, max)
STORE_LATENCY_MIN_MS = int(os.getenv("STORE_LATENCY_MIN_MS", 200))
STORE_LATENCY_MAX_MS = int(os.getenv("STORE_LATENCY_MAX_MS", 500))

FEATURED_LIMIT = int(os.getenv("FEATURED_LIMIT", 8))
RECENT_ORDERS_LIMIT = int(os.getenv("RECENT_ORDERS_LIMIT", 10))
# dashboard admina pokazuje 5 ostatnich zamowien
DASHBOARD_RECENT_ORDERS = int(os.getenv("DASHBOARD_RECENT_ORDERS", 5))
