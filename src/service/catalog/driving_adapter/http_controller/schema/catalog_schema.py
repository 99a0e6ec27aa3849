from pydantic import BaseModel, ConfigDict

from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass


class CinemaCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'id': 1, 'code': 'XYZ', 'class_type': 'PLATINUM'}}
    )

    id: int
    code: str  # Exactly three uppercase letters or digits
    class_type: CinemaClass


class CinemaResponse(BaseModel):
    id: int
    code: str
    class_type: str


class MovieCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'id': 1, 'title': 'Dune', 'is_blockbuster': True}}
    )

    id: int
    title: str
    is_blockbuster: bool = False


class MovieResponse(BaseModel):
    id: int
    title: str
    is_blockbuster: bool
