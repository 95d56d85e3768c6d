from fastapi import APIRouter, Depends, HTTPException
from app.schemas.baby_schema import BabyCreate, BabyUpdate, BabyResponse
from app.stores.baby_store import BabyStore
from app.dependencies.owner import get_baby_store, get_user_id
from typing import List
import structlog

router = APIRouter(tags=["babies"])
logger = structlog.get_logger()

# POST: register a new baby
@router.post("/baby")
def create_baby(
    baby: BabyCreate,
    store: BabyStore = Depends(get_baby_store),
):
    if not baby.user_id:
        raise HTTPException(status_code=400, detail="userId is required")
    if not baby.name:
        raise HTTPException(status_code=400, detail="Name is required")

    new_baby = store.create(
        user_id=baby.user_id,
        name=baby.name,
        photo_url=baby.photo_url,
    )
    logger.info("baby_created", baby_id=new_baby.id, user_id=baby.user_id)

    return {"id": new_baby.id}

# GET: all babies of the calling user
@router.get("/babies", response_model=List[BabyResponse])
def list_babies(
    user_id: str = Depends(get_user_id),
    store: BabyStore = Depends(get_baby_store),
):
    return store.list_for_user(user_id)

@router.get("/baby/{baby_id}", response_model=BabyResponse)
def get_baby(
    baby_id: int,
    user_id: str = Depends(get_user_id),
    store: BabyStore = Depends(get_baby_store),
):
    baby = store.get_owned(baby_id, user_id)
    if not baby:
        raise HTTPException(status_code=404, detail="Baby not found or unauthorized")
    return baby

# PUT: rename a baby (only if it belongs to the user)
@router.put("/baby/{baby_id}")
def update_baby(
    baby_id: int,
    baby_data: BabyUpdate,
    user_id: str = Depends(get_user_id),
    store: BabyStore = Depends(get_baby_store),
):
    if not baby_data.name:
        raise HTTPException(status_code=400, detail="Name is required")

    baby = store.update(baby_id, user_id, name=baby_data.name, photo_url=baby_data.photo_url)
    if not baby:
        raise HTTPException(status_code=404, detail="Baby not found")

    return {"message": "Baby updated successfully"}

# DELETE: removes the baby and every word logged for it
@router.delete("/baby/{baby_id}")
def delete_baby(
    baby_id: int,
    user_id: str = Depends(get_user_id),
    store: BabyStore = Depends(get_baby_store),
):
    if not store.delete(baby_id, user_id):
        raise HTTPException(status_code=404, detail="Baby not found")

    logger.info("baby_deleted", baby_id=baby_id, user_id=user_id)
    return {"message": "Baby deleted successfully"}
