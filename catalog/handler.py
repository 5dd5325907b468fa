"""
HTTP handlers for the ``/products`` routes.

Each handler parses its own path, query and body input so that every
malformed value maps to a specific catalog error (``InvalidId``,
``InvalidPrice``, ``InvalidData``, ``InvalidDate``) instead of the
framework's generic 422.  Write routes depend on ``require_token``,
which runs before any input is parsed.

Successful results are wrapped as ``{"data": ...}``; errors raised
here or below are rendered by the exception handlers in ``main``.
"""

import json
from typing import Optional, Type, TypeVar

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, ValidationError

from .core import ProductIn, ProductPatch, parse_id, parse_price, validate_expiration
from .errors import InvalidData
from .responses import success
from .security import require_token
from .service import ProductService

router = APIRouter()

M = TypeVar("M", bound=BaseModel)


def get_service(request: Request) -> ProductService:
    return request.app.state.service


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


async def _read_body(request: Request, model: Type[M]) -> M:
    try:
        payload = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError:
        raise InvalidData()
    try:
        return model.model_validate(payload)
    except ValidationError:
        raise InvalidData()


def _check_expiration(request: Request, expiration: str) -> None:
    validate_expiration(expiration, now=request.app.state.clock())


# ---------------------------
# Read endpoints
# ---------------------------
@router.get("/all")
async def get_all(service: ProductService = Depends(get_service)):
    return success(service.get_all())


@router.get("/search")
async def get_by_price_gt(
    price_gt: Optional[str] = Query(default=None, alias="priceGt"),
    service: ProductService = Depends(get_service),
):
    price = parse_price(price_gt)
    return success(service.get_by_price_gt(price))


@router.get("/{product_id}")
async def get_by_id(product_id: str, service: ProductService = Depends(get_service)):
    return success(service.get_by_id(parse_id(product_id)))


# ---------------------------
# Write endpoints (token required)
# ---------------------------
@router.post("/new", dependencies=[Depends(require_token)])
async def create(request: Request, service: ProductService = Depends(get_service)):
    product_in = await _read_body(request, ProductIn)
    _check_expiration(request, product_in.expiration)
    return success(service.create(product_in), status_code=201)


@router.put("/{product_id}", dependencies=[Depends(require_token)])
async def full_update(product_id: str, request: Request, service: ProductService = Depends(get_service)):
    pid = parse_id(product_id)
    product_in = await _read_body(request, ProductIn)
    _check_expiration(request, product_in.expiration)
    return success(service.update(pid, product_in))


@router.patch("/{product_id}", dependencies=[Depends(require_token)])
async def partial_update(product_id: str, request: Request, service: ProductService = Depends(get_service)):
    pid = parse_id(product_id)
    changes = (await _read_body(request, ProductPatch)).changes()
    if "expiration" in changes:
        _check_expiration(request, changes["expiration"])
    return success(service.patch(pid, changes))


@router.delete("/{product_id}", dependencies=[Depends(require_token)])
async def delete(product_id: str, service: ProductService = Depends(get_service)):
    service.delete(parse_id(product_id))
    return success(None, status_code=204)
