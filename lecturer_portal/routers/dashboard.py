from fastapi import APIRouter, Depends

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.dashboard import DashboardRepository
from lecturer_portal.schemas.dashboard import DashboardStats
from lecturer_portal.utils.auth import get_client, get_current_identity

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardStats)
def get_stats(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return DashboardRepository(client).stats(me)
