from __future__ import annotations

from fastapi import APIRouter, Depends

from clinix.api.v1.schemas import HomeSchema, service_to_schema
from clinix.application.ports.entity_store import EntityStorePort
from clinix.application.use_cases.filters import filter_services
from clinix.core.config import settings
from clinix.domain.entities.service import ServiceStatus
from clinix.wiring.dependencies import get_entity_store

router = APIRouter()


@router.get("/", response_model=HomeSchema)
def home(store: EntityStorePort = Depends(get_entity_store)) -> HomeSchema:
    active = filter_services(store.list_services(), status_filter=ServiceStatus.active)
    return HomeSchema(
        business_name=settings.BUSINESS_NAME,
        tagline=settings.BUSINESS_TAGLINE,
        services=[service_to_schema(service) for service in active],
    )
