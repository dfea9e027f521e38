# farmstand/api/routers/products.py
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from farmstand.api.deps import get_product_service
from farmstand.api.wrap import catch_async
from farmstand.core.exceptions import AppError
from farmstand.models.product import CATEGORIES
from farmstand.services.products import ProductService
from farmstand.templating import templates

router = APIRouter(prefix="/products", tags=["products"])


async def _read_fields(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as exc:
            # Unparseable body is a client error, same as framework request parsing
            raise AppError("Unprocessable Entity", 422) from exc
        return dict(body) if isinstance(body, dict) else {}
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=302)


@router.get("", response_class=HTMLResponse, summary="List products")
@catch_async
async def list_products(
    request: Request,
    category: str | None = Query(None, description="Filter by category"),
    svc: ProductService = Depends(get_product_service),
):
    listing = await svc.list_products(category)
    return templates.TemplateResponse(
        request,
        "products/index.html",
        {
            "products": listing.products,
            "category": listing.category_label,
            "categories": CATEGORIES,
        },
    )


@router.get("/new", response_class=HTMLResponse, summary="New product form")
async def new_product(request: Request):
    return templates.TemplateResponse(request, "products/new.html", {"categories": CATEGORIES})


@router.post("", summary="Create product")
@catch_async
async def create_product(
    request: Request,
    svc: ProductService = Depends(get_product_service),
):
    product = await svc.create_product(await _read_fields(request))
    return _redirect(f"/products/{product.id}")


@router.get("/{product_id}", response_class=HTMLResponse, summary="Show product")
@catch_async
async def show_product(
    request: Request,
    product_id: str,
    svc: ProductService = Depends(get_product_service),
):
    product = await svc.get_product(product_id)
    return templates.TemplateResponse(request, "products/show.html", {"product": product})


@router.get("/{product_id}/edit", response_class=HTMLResponse, summary="Edit product form")
@catch_async
async def edit_product(
    request: Request,
    product_id: str,
    svc: ProductService = Depends(get_product_service),
):
    product = await svc.get_product(product_id)
    return templates.TemplateResponse(
        request,
        "products/edit.html",
        {"product": product, "categories": CATEGORIES},
    )


@router.put("/{product_id}", summary="Update product")
@catch_async
async def update_product(
    request: Request,
    product_id: str,
    svc: ProductService = Depends(get_product_service),
):
    product = await svc.update_product(product_id, await _read_fields(request))
    return _redirect(f"/products/{product.id}")


@router.delete("/{product_id}", summary="Delete product")
@catch_async
async def delete_product(
    product_id: str,
    svc: ProductService = Depends(get_product_service),
):
    await svc.delete_product(product_id)
    return _redirect("/products")
