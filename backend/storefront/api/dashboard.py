"""
Dashboard API Endpoints
Landing-page summary and product search for the signed-in user

Author: TM3
Date: 2025-10-17
"""
import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.core.auth import CurrentUser, get_current_user
from storefront.domain.search import SearchQuery
from storefront.repositories.product_repository import ProductRepository
from storefront.services.dashboard_service import DashboardService
from storefront.services.product_search_service import search_products

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def get_dashboard(user: CurrentUser = Depends(get_current_user)):
    """
    Get the dashboard summary for the current user

    Returns:
    - Up to 8 featured products
    - Wishlist count
    - Order count and total spent (delivered/completed orders)
    - The 5 most recent orders with their items
    """
    try:
        summary = await DashboardService().get_summary(user)

        return {
            "status": "success",
            "data": summary.to_dict()
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Dashboard failed for user {user.id}")
        raise HTTPException(status_code=500, detail=f"Error loading dashboard: {str(e)}")


@router.get("/search")
async def search(
    q: Optional[str] = Query(None, description="Search in title, summary or category"),
    category: Optional[str] = Query(None, description="Filter by category (case-insensitive)"),
    min_price: Optional[str] = Query(None, description="Inclusive lower price bound (default 0)"),
    max_price: Optional[str] = Query(None, description="Inclusive upper price bound (default 999999)"),
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    user: CurrentUser = Depends(get_current_user)
):
    """
    Search the catalog with filters, 12 products per page

    Numeric parameters are taken as text; malformed values fall back to
    their defaults instead of failing the request.
    """
    query = SearchQuery.from_params(
        q=q,
        category=category,
        min_price=min_price,
        max_price=max_price,
        page=page
    )

    try:
        repo = ProductRepository()
        catalog = await asyncio.to_thread(repo.find_all)

        result = search_products(catalog, query)

        return {
            "status": "success",
            "data": result.to_dict()
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Product search failed for user {user.id}")
        raise HTTPException(status_code=500, detail=f"Error searching products: {str(e)}")
