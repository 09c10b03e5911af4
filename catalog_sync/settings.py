# Settings for the catalog_sync project
#
# Values come from a .env file next to this package, then from the process
# environment.

import os
from dotenv import load_dotenv

base_dir = os.path.dirname(__file__)
env_path = os.path.join(base_dir, ".env")
# Load environment variables
load_dotenv(env_path, encoding="utf-8")

# Supabase / PostgreSQL
SUPABASE_URL = os.getenv('SUPABASE_URL')
SUPABASE_KEY = os.getenv('SUPABASE_KEY')
DATABASE_URL = os.getenv('DATABASE_URL')
PRODUCTS_TABLE = os.getenv('PRODUCTS_TABLE', 'products')

# Shopify
SHOPIFY_SHOP = os.getenv('SHOPIFY_SHOP')
SHOPIFY_PASSWORD = os.getenv('SHOPIFY_PASSWORD')
SHOPIFY_API_VERSION = os.getenv('SHOPIFY_API_VERSION', '2023-10')

# VTEX
VTEX_ACCOUNT_NAME = os.getenv('VTEX_ACCOUNT_NAME')
VTEX_APP_KEY = os.getenv('VTEX_APP_KEY')
VTEX_APP_TOKEN = os.getenv('VTEX_APP_TOKEN')

# Timeout for platform API requests, in seconds
HTTP_TIMEOUT = float(os.getenv('HTTP_TIMEOUT', '30'))

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = os.getenv('LOG_DIR', 'logs')

# Sentry Configuration
SENTRY_DSN = os.getenv('SENTRY_DSN')
SENTRY_ENVIRONMENT = os.getenv('SENTRY_ENVIRONMENT', 'development')
SENTRY_TRACES_SAMPLE_RATE = float(os.getenv('SENTRY_TRACES_SAMPLE_RATE', '1.0'))
SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv('SENTRY_PROFILES_SAMPLE_RATE', '1.0'))
