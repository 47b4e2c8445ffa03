import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from country_admin.errors import StoreError
from country_admin.models import Country

logger = logging.getLogger(__name__)


def store_message(error: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement/parameter dump."""
    orig = getattr(error, "orig", None)
    if orig is not None and str(orig):
        return str(orig)
    return str(error) or error.__class__.__name__


class CountryService:

    # ============================================================================
    # QUERY FUNCTIONS
    # ============================================================================

    async def list_countries(self, session: AsyncSession) -> List[Country]:
        """
        Get every country ordered by name.

        Ties and collation are left to the database.

        Args:
            session: Database session

        Returns:
            List of Country objects

        Raises:
            StoreError: If the query fails
        """
        stmt = select(Country).order_by(Country.country)
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(store_message(e)) from e
        return list(result.scalars().all())

    async def create_country(self, session: AsyncSession, name: str) -> Country:
        """
        Insert a new country; the database assigns the id.

        Args:
            session: Database session
            name: Country name, stored as given

        Returns:
            The inserted Country with its id and last_update filled in

        Raises:
            StoreError: If the insert fails (connectivity, constraints)
        """
        country = Country(country=name)
        session.add(country)
        try:
            await session.commit()
            await session.refresh(country)
        except SQLAlchemyError as e:
            raise StoreError(store_message(e)) from e

        logger.info("Created country %s (%r)", country.country_id, country.country)
        return country
