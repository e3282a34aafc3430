from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from db.database import get_db
from db.repositories import HealthProfileRepository
from interfaces.healthModels import HealthData
from logger_manager import log_info
from utils.db_utils import profile_db_to_pydantic

router = APIRouter()


@router.get("/{user_id}", response_model=HealthData)
def read_profile(user_id: int, db: Session = Depends(get_db)):
    log_info(f"Read health profile endpoint called for user {user_id}")
    db_profile = HealthProfileRepository(db).get_profile(user_id)
    if not db_profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health profile not found")
    return profile_db_to_pydantic(db_profile)


@router.put("/{user_id}", response_model=HealthData)
def save_profile(user_id: int, health_data: HealthData, db: Session = Depends(get_db)):
    log_info(f"Save health profile endpoint called for user {user_id}")
    db_profile = HealthProfileRepository(db).save_profile(user_id, health_data)
    return profile_db_to_pydantic(db_profile)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(user_id: int, db: Session = Depends(get_db)):
    log_info(f"Delete health profile endpoint called for user {user_id}")
    if not HealthProfileRepository(db).delete_profile(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Health profile not found")
