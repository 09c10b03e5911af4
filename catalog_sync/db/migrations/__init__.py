"""
Database migrations configuration and utilities.
"""
from pathlib import Path

# Migrations directory, read by yoyo
MIGRATIONS_DIR = Path(__file__).parent / 'versions'
