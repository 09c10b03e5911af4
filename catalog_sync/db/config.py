"""
Database configuration and connection management.
"""
from supabase import AsyncClient, acreate_client

from catalog_sync import settings


async def get_supabase_client() -> AsyncClient:
    """
    Get a configured Supabase async client.

    The client wraps a pooled HTTP connection and is meant to be created once
    per process and shared by every repository.
    
    Returns:
        AsyncClient: A configured Supabase async client instance
    
    Raises:
        ValueError: If required environment variables are not set
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise ValueError(
            "Missing required environment variables. "
            "Please ensure SUPABASE_URL and SUPABASE_KEY are set in your .env file."
        )
    
    return await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
