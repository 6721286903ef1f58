"""
REST resource endpoints shared by every entity.

``register_entity_routes`` adds the standard endpoints for one entity to
a router:

- ``POST   /<entities>``            create (body must not carry an id)
- ``PUT    /<entities>/{id}``       full update of an existing entity
- ``PATCH  /<entities>/{id}``       partial update of an existing entity
- ``GET    /<entities>``            list, paged for paged entities
- ``GET    /<entities>/{id}``       single entity
- ``DELETE /<entities>/{id}``       delete
- ``GET    /_search/<entities>``    free-text search

The id checks live here and raise ``BadRequestError``; the services
themselves trust their input. Handlers are plain functions since every
store and index call blocks.
"""

from typing import Callable, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel

from hrapp.config.settings import settings
from hrapp.core.dependencies import get_services
from hrapp.core.pagination import Page, PageRequest
from hrapp.services.base import BadRequestError, EntityService
from hrapp.services.factory import ServiceFactory

ServiceGetter = Callable[[ServiceFactory], EntityService]


def _page_request(page: int, size: int, sort: List[str]) -> PageRequest:
    return PageRequest(page=page, size=size, sort=list(sort or []))


def _paged(response: Response, result: Page) -> list:
    response.headers["X-Total-Count"] = str(result.total_elements)
    return result.content


def register_entity_routes(
    router: APIRouter,
    *,
    path: str,
    entity_name: str,
    get_service: ServiceGetter,
    dto_class: Type[BaseModel],
    paged: bool = False,
    filters: Optional[Dict[str, str]] = None,
    eager_load: bool = False,
) -> None:
    """
    Register the CRUD and search endpoints of one entity.

    Args:
        router: Router to add the endpoints to
        path: Plural resource name, e.g. ``"countries"``
        entity_name: Name used in error messages
        get_service: Picks the entity service from the request's factory
        dto_class: DTO accepted and returned by the endpoints
        paged: Whether list and search endpoints return pages
        filters: ``filter`` query values mapped to service method names
        eager_load: Whether the list endpoint accepts ``eagerload``
    """
    filters = filters or {}

    def check_id(id: int, dto: BaseModel) -> None:
        if dto.id is None:
            raise BadRequestError("Invalid id: id is null", "id")
        if dto.id != id:
            raise BadRequestError("Invalid id: id does not match", "id", dto.id)

    def not_found(id: int) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity_name} with ID {id} not found"
        )

    @router.post(f"/{path}", response_model=dto_class, status_code=status.HTTP_201_CREATED)
    def create_entity(
        dto: dto_class,
        response: Response,
        services: ServiceFactory = Depends(get_services),
    ):
        if dto.id is not None:
            raise BadRequestError(f"A new {entity_name} cannot already have an ID", "id", dto.id)
        result = get_service(services).save(dto)
        response.headers["Location"] = f"{settings.api_prefix}/{path}/{result.id}"
        return result

    @router.put(f"/{path}/{{id}}", response_model=dto_class)
    def update_entity(
        id: int,
        dto: dto_class,
        services: ServiceFactory = Depends(get_services),
    ):
        check_id(id, dto)
        service = get_service(services)
        if service.find_one(id) is None:
            raise not_found(id)
        return service.update(dto)

    @router.patch(f"/{path}/{{id}}", response_model=dto_class)
    def partial_update_entity(
        id: int,
        dto: dto_class,
        services: ServiceFactory = Depends(get_services),
    ):
        check_id(id, dto)
        result = get_service(services).partial_update(dto)
        if result is None:
            raise not_found(id)
        return result

    if paged:
        @router.get(f"/{path}", response_model=List[dto_class])
        def list_entities(
            response: Response,
            page: int = Query(0, ge=0, description="Zero-based page index"),
            size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Page size"),
            sort: List[str] = Query([], description="Sort expressions such as 'field,desc'"),
            filter: Optional[str] = Query(None, description="Named relationship filter"),
            eagerload: bool = Query(False, description="Load many-to-many relations eagerly"),
            services: ServiceFactory = Depends(get_services),
        ):
            service = get_service(services)
            if filter in filters:
                return getattr(service, filters[filter])()
            page_request = _page_request(page, size, sort)
            if eager_load and eagerload:
                return _paged(response, service.find_all_with_eager_relationships(page_request))
            return _paged(response, service.find_all(page_request))
    else:
        @router.get(f"/{path}", response_model=List[dto_class])
        def list_entities(
            filter: Optional[str] = Query(None, description="Named relationship filter"),
            services: ServiceFactory = Depends(get_services),
        ):
            service = get_service(services)
            if filter in filters:
                return getattr(service, filters[filter])()
            return service.find_all()

    @router.get(f"/{path}/{{id}}", response_model=dto_class)
    def get_entity(
        id: int,
        services: ServiceFactory = Depends(get_services),
    ):
        result = get_service(services).find_one(id)
        if result is None:
            raise not_found(id)
        return result

    @router.delete(f"/{path}/{{id}}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_entity(
        id: int,
        services: ServiceFactory = Depends(get_services),
    ):
        get_service(services).delete(id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if paged:
        @router.get(f"/_search/{path}", response_model=List[dto_class])
        def search_entities(
            response: Response,
            query: str = Query(..., description="Search query"),
            page: int = Query(0, ge=0),
            size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
            sort: List[str] = Query([]),
            services: ServiceFactory = Depends(get_services),
        ):
            return _paged(response, get_service(services).search(query, _page_request(page, size, sort)))
    else:
        @router.get(f"/_search/{path}", response_model=List[dto_class])
        def search_entities(
            query: str = Query(..., description="Search query"),
            services: ServiceFactory = Depends(get_services),
        ):
            return get_service(services).search(query)
