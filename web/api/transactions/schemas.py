"""Transaction API schemas."""

from web.api.schemas import CamelModel


class CountResponse(CamelModel):
    success: bool = True
    count: int
