from pydantic import BaseModel, ConfigDict, Field


class PageMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    image_url: str = Field(default="", alias="imageURL")
    description: str = ""
    date: str = ""
    favicon: str = ""
