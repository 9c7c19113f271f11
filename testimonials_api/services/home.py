# testimonials_api/services/home.py

from testimonials_api.config import APP_NAME, APP_VERSION
from testimonials_api.models.home import AppInfo


class HomeService:
    def __init__(self, name: str = APP_NAME, version: str = APP_VERSION):
        self.name = name
        self.version = version

    def app_info(self) -> AppInfo:
        return AppInfo(name=self.name, version=self.version)


def get_home_service() -> HomeService:
    return HomeService()
