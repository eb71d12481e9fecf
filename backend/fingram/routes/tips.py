from typing import List

from fastapi import APIRouter

from fingram.content import TIPS
from fingram.schemas import Tip

router = APIRouter(prefix="/tips", tags=["tips"])


@router.get("/", response_model=List[Tip])
async def list_tips():
    return list(TIPS)
