from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.booking.domain.entity.enrollment_entity import Address, Enrollment
from src.service.booking.driven_adapter.model.enrollment_model import (
    AddressModel,
    EnrollmentModel,
)


class EnrollmentQueryRepoImpl(IEnrollmentQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _address_to_entity(db_address: AddressModel) -> Address:
        return Address(
            id=db_address.id,
            enrollment_id=db_address.enrollment_id,
            street=db_address.street,
            number=db_address.number,
            city=db_address.city,
            state=db_address.state,
            postal_code=db_address.cep,
            neighborhood=db_address.neighborhood,
            address_detail=db_address.address_detail,
        )

    @staticmethod
    def _to_entity(db_enrollment: EnrollmentModel) -> Enrollment:
        return Enrollment(
            id=db_enrollment.id,
            user_id=db_enrollment.user_id,
            name=db_enrollment.name,
            address=(
                EnrollmentQueryRepoImpl._address_to_entity(db_enrollment.address)
                if db_enrollment.address
                else None
            ),
            created_at=db_enrollment.created_at,
            updated_at=db_enrollment.updated_at,
        )

    @Logger.io
    async def get_with_address_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        result = await self.session.execute(
            select(EnrollmentModel)
            .options(selectinload(EnrollmentModel.address))
            .where(EnrollmentModel.user_id == user_id)
        )
        db_enrollment = result.scalar_one_or_none()

        if not db_enrollment:
            return None

        return EnrollmentQueryRepoImpl._to_entity(db_enrollment)
