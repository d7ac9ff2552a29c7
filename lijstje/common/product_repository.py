"""
Product Repository - Household-scoped database operations

Every query filters on household_id. A product id from another household
behaves exactly like a missing product.

Tables:
- product_categories (id, household_id, name, display_order)
- products (id, household_id, name, emoji, category_id, frequency_correction_factor)
- product_snoozes (household_id, product_id, snoozed_until), unique (household_id, product_id)
- purchase_history (id, household_id, product_id, purchased_at)
- shopping_list_items (id, household_id, product_id, is_checked)

Methods never commit; the calling service owns the transaction.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

import structlog
from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


class ProductRepository:
    """Repository for products, categories, snoozes and purchase history."""

    async def get_product(
        self,
        product_id: UUID,
        household_id: UUID,
        db: AsyncSession,
    ) -> Optional[Dict[str, Any]]:
        """
        Load a product, scoped to the household.

        Returns:
            Product row as dict or None if it does not exist in this household
        """
        query = text("""
            SELECT
                id,
                household_id,
                name,
                emoji,
                category_id,
                frequency_correction_factor
            FROM products
            WHERE id = :product_id
              AND household_id = :household_id
        """)

        result = await db.execute(query, {
            "product_id": product_id,
            "household_id": household_id,
        })
        row = result.fetchone()

        return dict(row._mapping) if row else None

    async def list_categories(
        self,
        household_id: UUID,
        db: AsyncSession,
    ) -> List[Dict[str, Any]]:
        """List household categories ordered by display_order."""
        query = text("""
            SELECT id, name, display_order
            FROM product_categories
            WHERE household_id = :household_id
            ORDER BY display_order ASC
        """)

        result = await db.execute(query, {"household_id": household_id})
        return [dict(row._mapping) for row in result.fetchall()]

    async def insert_product(
        self,
        household_id: UUID,
        name: str,
        emoji: str,
        category_id: UUID,
        db: AsyncSession,
    ) -> Dict[str, Any]:
        """
        Insert a new product with the default correction factor.

        Returns:
            The inserted product fields
        """
        product = {
            "id": uuid4(),
            "household_id": household_id,
            "name": name,
            "emoji": emoji,
            "category_id": category_id,
            "frequency_correction_factor": 1.0,
        }

        query = text("""
            INSERT INTO products (
                id,
                household_id,
                name,
                emoji,
                category_id,
                frequency_correction_factor
            ) VALUES (
                :id,
                :household_id,
                :name,
                :emoji,
                :category_id,
                :frequency_correction_factor
            )
        """)

        await db.execute(query, product)

        logger.info("product_inserted",
                   household_id=str(household_id),
                   product_id=str(product["id"]),
                   name=name,
                   category_id=str(category_id))

        return product

    async def upsert_snooze(
        self,
        household_id: UUID,
        product_id: UUID,
        snoozed_until: datetime,
        db: AsyncSession,
    ) -> None:
        """Create or replace the snooze for (household_id, product_id)."""
        query = text("""
            INSERT INTO product_snoozes (household_id, product_id, snoozed_until)
            VALUES (:household_id, :product_id, :snoozed_until)
            ON CONFLICT (household_id, product_id)
            DO UPDATE SET snoozed_until = EXCLUDED.snoozed_until
        """)

        await db.execute(query, {
            "household_id": household_id,
            "product_id": product_id,
            "snoozed_until": snoozed_until,
        })

    async def update_correction_factor(
        self,
        product_id: UUID,
        household_id: UUID,
        factor: float,
        db: AsyncSession,
    ) -> bool:
        """
        Persist a new frequency_correction_factor.

        Returns:
            True if a row was updated
        """
        query = text("""
            UPDATE products
            SET frequency_correction_factor = :factor
            WHERE id = :product_id
              AND household_id = :household_id
        """)

        result = await db.execute(query, {
            "factor": factor,
            "product_id": product_id,
            "household_id": household_id,
        })

        return result.rowcount > 0

    async def get_purchase_history(
        self,
        household_id: UUID,
        db: AsyncSession,
    ) -> Dict[UUID, List[datetime]]:
        """
        Purchase timestamps for the household, grouped by product.

        Returns:
            Mapping of product_id to purchase timestamps (newest first)
        """
        query = text("""
            SELECT product_id, purchased_at
            FROM purchase_history
            WHERE household_id = :household_id
            ORDER BY purchased_at DESC
        """)

        result = await db.execute(query, {"household_id": household_id})

        by_product: Dict[UUID, List[datetime]] = {}
        for row in result.fetchall():
            by_product.setdefault(row.product_id, []).append(row.purchased_at)

        return by_product

    async def get_active_snoozed_product_ids(
        self,
        household_id: UUID,
        now: datetime,
        db: AsyncSession,
    ) -> set:
        """Product ids whose snooze has not yet expired."""
        query = text("""
            SELECT product_id
            FROM product_snoozes
            WHERE household_id = :household_id
              AND snoozed_until > :now
        """)

        result = await db.execute(query, {"household_id": household_id, "now": now})
        return {row.product_id for row in result.fetchall()}

    async def get_unchecked_list_product_ids(
        self,
        household_id: UUID,
        db: AsyncSession,
    ) -> set:
        """Product ids currently on the shopping list and not checked off."""
        query = text("""
            SELECT product_id
            FROM shopping_list_items
            WHERE household_id = :household_id
              AND is_checked = false
              AND product_id IS NOT NULL
        """)

        result = await db.execute(query, {"household_id": household_id})
        return {row.product_id for row in result.fetchall()}

    async def get_products_with_category(
        self,
        household_id: UUID,
        product_ids: List[UUID],
        db: AsyncSession,
    ) -> List[Dict[str, Any]]:
        """Load products (with category name and order) by id."""
        if not product_ids:
            return []

        query = text("""
            SELECT
                p.id,
                p.name,
                p.emoji,
                p.category_id,
                p.frequency_correction_factor,
                c.name AS category_name,
                c.display_order AS category_display_order
            FROM products p
            LEFT JOIN product_categories c ON c.id = p.category_id
            WHERE p.household_id = :household_id
              AND p.id IN :product_ids
        """).bindparams(bindparam("product_ids", expanding=True))

        result = await db.execute(query, {
            "household_id": household_id,
            "product_ids": list(product_ids),
        })
        return [dict(row._mapping) for row in result.fetchall()]


# Singleton instance
product_repository = ProductRepository()
