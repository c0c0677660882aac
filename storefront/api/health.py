from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_cart_store
from storefront.schemas.health import HealthResponse
from storefront.services.cart import CartStore

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(store: CartStore = Depends(get_cart_store)):
    return HealthResponse(
        message="Server is running successfully",
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        active_sessions=store.session_count()
    )
