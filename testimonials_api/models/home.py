# testimonials_api/models/home.py

from pydantic import BaseModel


class AppInfo(BaseModel):
    name: str
    version: str
