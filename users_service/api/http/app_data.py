from dataclasses import dataclass

from users_service.core.services import DbSessionService
from users_service.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
