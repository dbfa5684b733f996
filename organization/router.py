from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import require_admin

from .schema import (
    OrganizationSchema, OrganizationDetailSchema, OrganizationCreate, OrganizationUpdate, OrganizationFilter,
)
from . import service

organization_router = APIRouter(prefix="/organizations", tags=["Organizations"])

# List organizations, anyone
@organization_router.get("", response_model=list[OrganizationSchema])
def list_organizations(
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    name: Optional[str] = Query(None, min_length=1),
    db: Session = Depends(get_db),
    ):
    filters = OrganizationFilter(min_employees=min_employees, max_employees=max_employees, name=name)
    return service.list_organizations(db, filters)

# Get org by handle, with its positions
@organization_router.get("/{handle}", response_model=OrganizationDetailSchema)
def organization_detail(handle: str, db: Session = Depends(get_db)):
    return service.get_organization(db, handle)

# Create org
@organization_router.post("", response_model=OrganizationSchema, status_code=status.HTTP_201_CREATED)
def organization_post(
    payload: OrganizationCreate,
    db: Session = Depends(get_db),
    _admin = Depends(require_admin),
    ):
    return service.create_organization(db, payload)

# Update org
@organization_router.patch("/{handle}", response_model=OrganizationSchema)
def organization_patch(
    handle: str,
    payload: OrganizationUpdate,
    db: Session = Depends(get_db),
    _admin = Depends(require_admin),
    ):
    return service.update_organization(db, handle, payload.model_dump(by_alias=True, exclude_unset=True))

# Delete org
@organization_router.delete("/{handle}")
def organization_delete(
    handle: str,
    db: Session = Depends(get_db),
    _admin = Depends(require_admin),
    ):
    service.remove_organization(db, handle)
    return {"deleted": handle}
