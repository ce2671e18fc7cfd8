from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Address:
    id: int
    enrollment_id: int
    street: str
    number: str
    city: str
    state: str
    postal_code: str
    neighborhood: str = ''
    address_detail: Optional[str] = None


@attrs.define
class Enrollment:
    id: int
    user_id: int
    name: str
    address: Optional[Address] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
