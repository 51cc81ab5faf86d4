from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .reminder import field_errors

GENDERS = [
    {"id": "M", "name": "Masculino"},
    {"id": "F", "name": "Femenino"},
]

MIN_BIRTHDATE = date(1900, 1, 1)


class CatalogRef(BaseModel):
    id: int


class ProfileValues(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    relevant_conditions: List[CatalogRef] = Field(alias="relevantConditions", default_factory=list)
    medications: List[CatalogRef] = Field(default_factory=list)
    name: str = Field(min_length=2)
    email: EmailStr
    birthdate: date
    gender: str = Field(min_length=1)
    doctor_access_code: str = Field(alias="doctorAccessCode", min_length=6)
    height: int = Field(ge=50, le=250)
    weight: float = Field(ge=10, le=300)

    @field_validator("birthdate")
    @classmethod
    def _birthdate_range(cls, value: date) -> date:
        if value < MIN_BIRTHDATE:
            raise PydanticCustomError("birthdate_min", "La fecha de nacimiento no puede ser anterior a 1900")
        if value > date.today():
            raise PydanticCustomError("birthdate_future", "La fecha de nacimiento no puede ser en el futuro")
        return value

    @field_validator("gender")
    @classmethod
    def _known_gender(cls, value: str) -> str:
        if value not in {g["id"] for g in GENDERS}:
            raise PydanticCustomError("gender_unknown", "El género es obligatorio")
        return value

    def to_payload(self) -> Dict[str, Any]:
        """Body for ``PATCH /users/{id}``; email is never sent."""
        return {
            "name": self.name,
            "birthdate": self.birthdate.isoformat(),
            "gender": self.gender,
            "height": self.height,
            "weight": self.weight,
            "relevantConditions": [{"id": c.id} for c in self.relevant_conditions],
            "medications": [{"id": m.id} for m in self.medications],
        }


class ProfileSchema:
    def validate(self, payload: Dict[str, Any]) -> Tuple[Optional[ProfileValues], Dict[str, str]]:
        try:
            return ProfileValues.model_validate(payload), {}
        except ValidationError as exc:
            return None, field_errors(exc)
