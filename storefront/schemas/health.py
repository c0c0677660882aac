from storefront.schemas.common import CamelModel


class HealthResponse(CamelModel):
    success: bool = True
    message: str
    timestamp: str
    active_sessions: int
