"""
Customer API — Customer Route Handlers
=======================================

What:  The five /customers endpoints (list, get, create, replace, delete).
How:   Each handler decodes the request through a pydantic schema, calls
       CustomerService, and encodes the result with the right status code.
Who:   Called by API clients; authorization runs first, as a dependency.

Authorization:
    ROUTE_POLICIES below is the single place that decides which policy guards
    which route. A route mapped to None is open to unauthenticated callers.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.auth import authorize
from customer_api.database import get_db_session
from customer_api.schemas.customer import CustomerIn, CustomerResponse, ErrorResponse
from customer_api.services.customer_service import CustomerService, get_customer_service

# ── Route → Policy Table ──────────────────────────────────────────────────
ROUTE_POLICIES: Dict[str, Optional[str]] = {
    "list_customers": "Authenticated",
    "get_customer": "Authenticated",
    "create_customer": "Admin",
    "update_customer": None,
    "delete_customer": "DeleteUser",
}


def route_requirements(route_name: str) -> list:
    """Dependencies enforcing the policy ROUTE_POLICIES assigns to a route."""
    policy = ROUTE_POLICIES[route_name]
    if policy is None:
        return []
    return [Depends(authorize(policy))]


_UNAUTHENTICATED = {"description": "Missing or invalid bearer token", "model": ErrorResponse}
_FORBIDDEN = {"description": "Authorization policy not satisfied", "model": ErrorResponse}
_NOT_FOUND = {"description": "Customer not found", "model": ErrorResponse}

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get(
    "",
    response_model=List[CustomerResponse],
    dependencies=route_requirements("list_customers"),
    responses={401: _UNAUTHENTICATED},
    summary="List all customers",
)
async def list_customers(
    db: AsyncSession = Depends(get_db_session),
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerResponse]:
    customers = await service.list_customers(db)
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    dependencies=route_requirements("get_customer"),
    responses={401: _UNAUTHENTICATED, 404: _NOT_FOUND},
    summary="Get a customer by id",
)
async def get_customer(
    customer_id: str,
    db: AsyncSession = Depends(get_db_session),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = await service.get_customer(db, customer_id)
    return CustomerResponse.model_validate(customer)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CustomerResponse,
    dependencies=route_requirements("create_customer"),
    responses={401: _UNAUTHENTICATED, 403: _FORBIDDEN},
    summary="Create a customer",
    description=(
        "Inserts the customer record from the body. The id is generated when omitted. "
        "The response carries a Location header pointing at the new record."
    ),
)
async def create_customer(
    payload: CustomerIn,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = await service.create_customer(db, payload)
    response.headers["Location"] = f"/customers/{customer.id}"
    return CustomerResponse.model_validate(customer)


@router.put(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=route_requirements("update_customer"),
    responses={400: {"description": "Body id differs from path id", "model": ErrorResponse},
               404: _NOT_FOUND},
    summary="Replace a customer",
    description=(
        "Overwrites every field of the stored customer with the body. "
        "Fields omitted from the body are cleared."
    ),
)
async def update_customer(
    customer_id: str,
    payload: CustomerIn,
    db: AsyncSession = Depends(get_db_session),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    await service.update_customer(db, customer_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=route_requirements("delete_customer"),
    responses={401: _UNAUTHENTICATED, 403: _FORBIDDEN, 404: _NOT_FOUND},
    summary="Delete a customer",
)
async def delete_customer(
    customer_id: str,
    db: AsyncSession = Depends(get_db_session),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    await service.delete_customer(db, customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
