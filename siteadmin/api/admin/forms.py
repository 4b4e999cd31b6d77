from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.form import FormCreate, FormRead, FormUpdate
from siteadmin.services import resources

router = build_crud_router(
    resources.forms,
    read_schema=FormRead,
    create_schema=FormCreate,
    update_schema=FormUpdate,
)
