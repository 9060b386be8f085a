"""
Conexión a base de datos PostgreSQL

All database access goes through psycopg2 connections opened here.
Every connection is retried on transient failures. Repositories use the
dict variant so rows map directly onto domain models.

Author: TM3
Updated: 2025-10-17
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


def _get_database_url() -> str:
    # Use settings.DATABASE_URL which loads from .env file
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return database_url


# ============================================================================
# Database Connection with Retry Logic (SSL Failure Recovery)
# ============================================================================

def _connect_with_retry(max_retries: int, retry_delay: float, cursor_factory=None):
    database_url = _get_database_url()
    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            if cursor_factory is not None:
                conn = psycopg2.connect(database_url, cursor_factory=cursor_factory)
            else:
                conn = psycopg2.connect(database_url)

            # Test connection with a simple query
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            error_msg = str(e)

            if "SSL connection has been closed unexpectedly" in error_msg:
                logger.warning(f"SSL connection error on attempt {attempt}/{max_retries}: {error_msg}")
            else:
                logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {error_msg}")

            if attempt < max_retries:
                # Exponential backoff
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

        except Exception as e:
            # For non-connection errors, fail immediately
            logger.error(f"Unexpected error during connection: {e}")
            raise

    raise last_error if last_error else RuntimeError("Connection failed after all retries")


def get_db_connection_with_retry(max_retries=3, retry_delay=1.0):
    """
    Get a psycopg2 connection with automatic retry on SSL/connection failures

    Retries psycopg2.OperationalError up to max_retries times with
    exponential backoff. Any other error fails immediately.

    Args:
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)

    Returns:
        psycopg2 connection object

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    return _connect_with_retry(max_retries, retry_delay)


def get_db_connection_dict_with_retry(max_retries=3, retry_delay=1.0):
    """
    Same as get_db_connection_with_retry but the connection returns dicts.
    """
    return _connect_with_retry(max_retries, retry_delay, cursor_factory=RealDictCursor)
