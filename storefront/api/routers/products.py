from fastapi import APIRouter
from fastapi.responses import JSONResponse

from storefront.api import api_logger as logger
from storefront.api.responses import error_response, server_error_response
from storefront.data.db.product_ops import (
    get_all_products,
    get_product_detail,
    search_products,
    filter_products_by_category,
    get_categories,
)
from storefront.utils.errors import StorefrontError
from storefront.utils.validation import parse_product_id

router = APIRouter(tags=["Products"])


@router.get("/getProducts")
async def list_products_endpoint():
    """List every product ordered by id."""
    try:
        products = await get_all_products()
        return JSONResponse(content=[p.to_dict() for p in products])
    except Exception:
        logger.exception("Failed to list products")
        return server_error_response()


@router.get("/getProductDetails/{product_id}")
async def get_product_detail_endpoint(product_id: str):
    """Get a product joined with its details."""
    parsed_id = parse_product_id(product_id)
    try:
        detail = await get_product_detail(parsed_id) if parsed_id is not None else None
    except Exception:
        logger.exception(f"Failed to get product detail {product_id}")
        return server_error_response()

    if not detail:
        return error_response(StorefrontError("Product not found"), status_code=400)
    return JSONResponse(content=detail)


@router.get("/searchProducts/{term:path}")
async def search_products_endpoint(term: str):
    """Ids of products whose name, description or category contains the term."""
    try:
        products = await search_products(term)
    except Exception:
        logger.exception(f"Failed to search products for '{term}'")
        return server_error_response()

    if not products:
        return error_response(StorefrontError("No products found."), status_code=400)
    return JSONResponse(content=products)


@router.get("/filterProducts/{category:path}")
async def filter_products_endpoint(category: str):
    """Ids of products in exactly this category."""
    try:
        return JSONResponse(content=await filter_products_by_category(category))
    except Exception:
        logger.exception(f"Failed to filter products by '{category}'")
        return server_error_response()


@router.get("/getCategories")
async def list_categories_endpoint():
    try:
        return JSONResponse(content=await get_categories())
    except Exception:
        logger.exception("Failed to list categories")
        return server_error_response()
