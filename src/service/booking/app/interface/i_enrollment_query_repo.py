from abc import ABC, abstractmethod
from typing import Optional

from src.service.booking.domain.entity.enrollment_entity import Enrollment


class IEnrollmentQueryRepo(ABC):
    """Read access to the enrollment subsystem's records"""

    @abstractmethod
    async def get_with_address_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        pass
