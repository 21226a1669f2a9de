"""Pydantic schemas for video catalog entries."""

from pydantic import BaseModel


class Video(BaseModel):
    type: str
    url: str
    thumbnail: str
    title: str
    product_name: str

    @property
    def is_basic(self) -> bool:
        return self.type == "basic"
