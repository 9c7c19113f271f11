# testimonials_api/api/home.py

from fastapi import APIRouter, Depends

from testimonials_api.models.home import AppInfo
from testimonials_api.services.home import HomeService, get_home_service

router = APIRouter(prefix="/home", tags=["Home"])


@router.get("/info", response_model=AppInfo)
def app_info(service: HomeService = Depends(get_home_service)) -> AppInfo:
    """
    Return static application metadata (name, version).
    """
    return service.app_info()
