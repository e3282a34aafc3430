import json
from sqlalchemy.orm import Session

from logger_manager import log_debug, log_info
from . import models
from interfaces.healthModels import HealthData


class HealthProfileRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: int):
        return self.db.query(models.HealthProfile).filter(models.HealthProfile.user_id == user_id).first()

    def save_profile(self, user_id: int, health_data: HealthData):
        # convert the list/dict fields to string using json.dumps
        allergies = json.dumps(health_data.allergies)
        health_conditions = json.dumps(health_data.health_conditions)
        additional_health_data = json.dumps(
            {name: metric.model_dump() for name, metric in health_data.additional_health_data.items()}
        )

        db_profile = self.get_profile(user_id)
        if db_profile:
            log_debug(f"Updating health profile for user {user_id}")
            db_profile.dietary_requirement = health_data.dietary_requirement
            db_profile.allergies = allergies
            db_profile.health_conditions = health_conditions
            db_profile.additional_health_data = additional_health_data
        else:
            log_debug(f"Creating health profile for user {user_id}")
            db_profile = models.HealthProfile(
                user_id=user_id,
                dietary_requirement=health_data.dietary_requirement,
                allergies=allergies,
                health_conditions=health_conditions,
                additional_health_data=additional_health_data
            )
            self.db.add(db_profile)

        self.db.commit()
        self.db.refresh(db_profile)
        return db_profile

    def delete_profile(self, user_id: int) -> bool:
        db_profile = self.get_profile(user_id)
        if not db_profile:
            return False
        self.db.delete(db_profile)
        self.db.commit()
        log_info(f"Deleted health profile for user {user_id}")
        return True
