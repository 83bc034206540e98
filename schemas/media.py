from pydantic import BaseModel


class UploadResponse(BaseModel):
    id: int
    url: str
    message: str
