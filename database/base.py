from sqlalchemy.orm import declarative_base
import core.config as config

Base = declarative_base()

DATABASE_URL = config.DATABASE_URL
