from fastapi import APIRouter, Depends

from prepper.auth.dependencies import require_admin
from prepper.database import DocumentStore, get_store
from prepper.models.user import Claims
from prepper.services import admin_service

router = APIRouter(tags=['admin'])


@router.get('/stats')
def stats(claims: Claims = Depends(require_admin), store: DocumentStore = Depends(get_store)):
    return admin_service.get_stats(store, claims)
