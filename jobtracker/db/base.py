from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: Models are registered by importing jobtracker.db.models
# All models must import Base from this module
