"""
Customer API — Customer Service (CRUD Operations)
==================================================

What:  Create, read, replace and delete customer records.
Why:   Keeps all database work out of the route handlers.
How:   Each method receives the request's AsyncSession; writes are committed
       inside the method so the record is persisted before the response is built.
Who:   Called by route handlers in routes/customers.py.

Error Handling Strategy:
    - Missing record → NotFoundError (404)
    - Any database failure (connectivity, duplicate key) → DatabaseError (500).
      No retries; the session dependency rolls back the transaction.

Design Decision:
    The service holds no per-request state. Its only collaborator, the logger,
    is passed to the constructor, and get_customer_service() builds one per
    request so tests can substitute their own via dependency_overrides.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.exceptions import DatabaseError, NotFoundError, ValidationError
from customer_api.models.customer import REPLACEABLE_FIELDS, Customer
from customer_api.schemas.customer import CustomerIn

SERVICE_LOGGER_NAME = "customer_api.customers"


class CustomerService:
    """
    Business logic layer for customer operations.

    Responsibilities:
        - list_customers():  every row, in store order
        - get_customer():    single row or NotFoundError
        - create_customer(): insert + commit
        - update_customer(): full replace of an existing row + commit
        - delete_customer(): delete an existing row + commit
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(SERVICE_LOGGER_NAME)

    async def list_customers(self, db: AsyncSession) -> List[Customer]:
        """
        Return every customer record.

        No ORDER BY: records come back in the store's natural order.
        """
        self.logger.info("Getting customers...")
        try:
            result = await db.execute(select(Customer))
            customers = list(result.scalars().all())
        except Exception as e:
            self.logger.error("Database error listing customers: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve customers. Please try again.",
                context={"error_type": type(e).__name__},
            )
        self.logger.info("Retrieved %d customers", len(customers))
        return customers

    async def get_customer(self, db: AsyncSession, customer_id: str) -> Customer:
        """
        Retrieve a single customer by id.

        Raises:
            NotFoundError: no customer with this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Customer).where(Customer.id == customer_id))
            customer = result.scalar_one_or_none()
        except Exception as e:
            self.logger.error("Database error fetching customer %s: %s", customer_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the customer. Please try again.",
                context={"customer_id": customer_id, "error_type": type(e).__name__},
            )

        if customer is None:
            raise NotFoundError(resource="customer", resource_id=customer_id)
        return customer

    async def create_customer(self, db: AsyncSession, data: CustomerIn) -> Customer:
        """
        Insert a new customer and commit.

        The id is taken from the body, or generated (UUID string) when absent.
        There is no existence pre-check: a duplicate id fails at commit on the
        primary key constraint and surfaces as DatabaseError.
        """
        values = data.model_dump()
        if not values.get("id"):
            values["id"] = str(uuid.uuid4())

        customer = Customer(**values)
        try:
            db.add(customer)
            await db.commit()
        except Exception as e:
            self.logger.error(
                "Database error creating customer %s: %s", values["id"], str(e), exc_info=True
            )
            raise DatabaseError(
                message="Could not create the customer. Please try again.",
                context={"customer_id": values["id"], "error_type": type(e).__name__},
            )

        self.logger.info("Customer created: %s", customer.id)
        return customer

    async def update_customer(
        self, db: AsyncSession, customer_id: str, data: CustomerIn
    ) -> Customer:
        """
        Replace every field of an existing customer and commit.

        Full-replace semantics: a field omitted from `data` is stored as null.
        The key itself cannot change; a body id that differs from the path id
        is rejected with ValidationError.

        Raises:
            ValidationError: body id differs from customer_id (→ 400)
            NotFoundError:   no customer with this id (→ 404)
            DatabaseError:   lookup or commit failed (→ 500)
        """
        if data.id is not None and data.id != customer_id:
            raise ValidationError(
                message=f"Body id '{data.id}' does not match path id '{customer_id}'",
                field="id",
            )

        customer = await self.get_customer(db, customer_id)

        values = data.model_dump()
        for field in REPLACEABLE_FIELDS:
            setattr(customer, field, values.get(field))

        try:
            await db.commit()
        except Exception as e:
            self.logger.error("Database error updating customer %s: %s", customer_id, str(e))
            raise DatabaseError(
                message="Could not update the customer. Please try again.",
                context={"customer_id": customer_id, "error_type": type(e).__name__},
            )

        self.logger.info("Customer updated: %s", customer_id)
        return customer

    async def delete_customer(self, db: AsyncSession, customer_id: str) -> None:
        """
        Delete an existing customer and commit.

        Raises:
            NotFoundError: no customer with this id (→ 404)
            DatabaseError: lookup or commit failed (→ 500)
        """
        customer = await self.get_customer(db, customer_id)

        try:
            await db.delete(customer)
            await db.commit()
        except Exception as e:
            self.logger.error("Database error deleting customer %s: %s", customer_id, str(e))
            raise DatabaseError(
                message="Could not delete the customer. Please try again.",
                context={"customer_id": customer_id, "error_type": type(e).__name__},
            )

        self.logger.info("Customer deleted: %s", customer_id)


def get_customer_service() -> CustomerService:
    """FastAPI dependency: a CustomerService wired with the customers logger."""
    return CustomerService(logger=logging.getLogger(SERVICE_LOGGER_NAME))
