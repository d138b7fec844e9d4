"""
Technician repository implementation.
"""

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories import TechnicianRepositoryInterface
from src.domain.entities.technician import Technician
from src.domain.value_objects.technician_role import TechnicianRole
from src.infrastructure.database.models.technician import TechnicianModel


class TechnicianRepository(TechnicianRepositoryInterface):
    """Technician directory backed by the technicians table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, technician_id: UUID) -> Optional[Technician]:
        """Get technician by ID."""
        result = await self.session.execute(
            select(TechnicianModel).where(TechnicianModel.id == technician_id)
        )
        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def list_active(
        self, roles: Optional[Iterable[TechnicianRole]] = None
    ) -> List[Technician]:
        """List active technicians, optionally restricted to roles."""
        stmt = select(TechnicianModel).where(TechnicianModel.is_active.is_(True))
        if roles:
            stmt = stmt.where(
                TechnicianModel.role.in_([TechnicianRole(r).value for r in roles])
            )
        result = await self.session.execute(stmt.order_by(TechnicianModel.name))
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def create(self, technician: Technician) -> Technician:
        """Create a new technician."""
        model = TechnicianModel(
            id=technician.id,
            name=technician.name,
            email=technician.email,
            phone=technician.phone,
            role=technician.role.value,
            is_active=technician.is_active,
            created_at=technician.created_at,
            updated_at=technician.updated_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)

    def _model_to_entity(self, model: TechnicianModel) -> Technician:
        return Technician(
            id=model.id,
            name=model.name,
            role=TechnicianRole(model.role),
            email=model.email,
            phone=model.phone,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
