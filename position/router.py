from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import require_admin
from .schema import PositionSchema, PositionCreate, PositionUpdate, PositionFilter
from . import service

position_router = APIRouter(prefix="/positions", tags=["Positions"])

# Search positions, anyone
@position_router.get("", response_model=list[PositionSchema])
def list_positions(
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    title: Optional[str] = Query(None, min_length=1),
    db: Session = Depends(get_db),
):
    filters = PositionFilter(min_salary=min_salary, has_equity=has_equity, title=title)
    return service.list_positions(db, filters)

@position_router.post("", response_model=PositionSchema, status_code=status.HTTP_201_CREATED)
def position_post(payload: PositionCreate, db: Session = Depends(get_db), _admin = Depends(require_admin)):
    return service.create_position(db, payload)

@position_router.patch("/{position_id}", response_model=PositionSchema)
def position_patch(position_id: int, payload: PositionUpdate, db: Session = Depends(get_db), _admin = Depends(require_admin)):
    return service.update_position(db, position_id, payload.model_dump(by_alias=True, exclude_unset=True))

@position_router.delete("/{position_id}")
def position_delete(position_id: int, db: Session = Depends(get_db), _admin = Depends(require_admin)):
    service.remove_position(db, position_id)
    return {"deleted": position_id}
