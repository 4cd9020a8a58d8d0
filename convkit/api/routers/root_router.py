"""Service endpoints: health check and the converter catalogue."""

from typing import List

from fastapi import APIRouter

from convkit.api.schemas import ConverterInfoResponse
from convkit.catalogue import CONVERTERS

router = APIRouter(prefix="/api", tags=["root"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/converters", response_model=List[ConverterInfoResponse])
def list_converters():
    return [
        ConverterInfoResponse(id=c.id, title=c.title, description=c.description, path=c.path)
        for c in CONVERTERS
    ]
